# -*- coding: utf-8 -*-
"""
Wizard Step - One navigable unit of a wizard.

A step carries the state the navigation core needs:
- enabled flag (disabled steps are skipped by traversal)
- title (appended to the wizard title while the step is current)
- per-step overrides for the back and next/finish button labels
- visibility, driven by the navigator

Widgets are not part of the step; see ``stepwizard.ui.step_pane``.
"""

from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal

from .events import TitleEventArgs, WizardEvent


class WizardStep(QObject):
    """
    One step of a wizard.

    Steps are identified by object identity and must not be copied.
    Subscribe to ``visible_changed`` to be notified when the step becomes
    active; see also ``Wizard.step_changed``.
    """

    # Signals
    enabled_changed = pyqtSignal(bool)
    visible_changed = pyqtSignal(bool)
    help_text_changed = pyqtSignal(str)

    def __init__(self, title: str = "", enabled: bool = True, parent: Optional[QObject] = None):
        """
        Initialize the step.

        Args:
            title: Appended to the wizard title as "Wizard Title - Step Title"
                while this step is current
            enabled: Whether the step takes part in navigation
            parent: Optional Qt parent
        """
        super().__init__(parent)
        self._title = title
        self._enabled = enabled
        self._visible = True
        self._help_text = ""

        # Handler exceptions reach the code that set the title
        self.title_changing = WizardEvent("title_changing")  # TitleEventArgs, cancelable
        self.title_changed = WizardEvent("title_changed")  # TitleEventArgs

        # Empty means "use the localized default"
        self.back_button_text = ""
        self.next_button_text = ""

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str):
        if self.on_title_changing(self._title, value):
            return
        old = self._title
        self._title = value
        self.on_title_changed(old, value)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool):
        value = bool(value)
        if value == self._enabled:
            return
        self._enabled = value
        self.enabled_changed.emit(value)

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool):
        value = bool(value)
        if value == self._visible:
            return
        self._visible = value
        self.visible_changed.emit(value)

    @property
    def help_text(self) -> str:
        return self._help_text

    @help_text.setter
    def help_text(self, value: str):
        if value == self._help_text:
            return
        self._help_text = value
        self.help_text_changed.emit(value)

    # =========================================================================
    # Title change hooks
    # =========================================================================

    def on_title_changing(self, old_title: str, new_title: str) -> bool:
        """
        Emit title_changing before the title changes.

        Returns:
            True if a handler cancelled the change
        """
        args = TitleEventArgs(old_title, new_title)
        self.title_changing.emit(args)
        return args.cancel

    def on_title_changed(self, old_title: str, new_title: str):
        """Emit title_changed after the title has changed."""
        self.title_changed.emit(TitleEventArgs(old_title, new_title))

    def __repr__(self):
        return f"WizardStep(title={self._title!r}, enabled={self._enabled})"
