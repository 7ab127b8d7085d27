# -*- coding: utf-8 -*-
"""
Container contract - What the navigation core needs from the surrounding UI.

The navigator, presentation synchronizer and completion controller only
reach the UI through these interfaces, so they can be driven by a QDialog
(see ``stepwizard.ui.wizard_dialog``) or by a test double.
"""

from abc import ABC, ABCMeta, abstractmethod

from PyQt5.QtCore import QObject


# Combine PyQt5 metaclass with ABC metaclass
class ABCQObjectMeta(type(QObject), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class NavigationButton(ABC):
    """A back or next/finish control with a settable label and visibility."""

    @property
    @abstractmethod
    def label(self) -> str:
        pass

    @label.setter
    @abstractmethod
    def label(self, value: str):
        pass

    @property
    @abstractmethod
    def visible(self) -> bool:
        pass

    @visible.setter
    @abstractmethod
    def visible(self, value: bool):
        pass


class WizardContainer(ABC):
    """
    The window hosting a wizard.

    Implementations forward their lifecycle ("loaded", "closing") and the
    buttons' activation to the owning ``Wizard``.
    """

    @property
    @abstractmethod
    def back_button(self) -> NavigationButton:
        pass

    @property
    @abstractmethod
    def next_finish_button(self) -> NavigationButton:
        pass

    @abstractmethod
    def set_title(self, text: str):
        """Show the composite wizard title."""
        pass

    @abstractmethod
    def request_close(self):
        """Close the container after a committed finish."""
        pass

    @abstractmethod
    def relayout(self):
        pass

    @abstractmethod
    def redraw(self):
        pass

    @abstractmethod
    def set_focus(self, button: NavigationButton):
        pass

    @abstractmethod
    def has_focus(self, button: NavigationButton) -> bool:
        pass
