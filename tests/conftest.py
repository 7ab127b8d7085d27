# -*- coding: utf-8 -*-
"""
Shared fixtures for stepwizard tests.
"""
import os

# Must be set before any Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ["STEPWIZARD_LANGUAGE"] = "en"
os.environ["STEPWIZARD_LOG_TO_FILE"] = "false"

import pytest

from stepwizard.framework import NavigationButton, Wizard, WizardContainer, WizardStep


class FakeButton(NavigationButton):
    """In-memory navigation button."""

    def __init__(self, name: str):
        self.name = name
        self._label = ""
        self._visible = True

    @property
    def label(self) -> str:
        return self._label

    @label.setter
    def label(self, value: str):
        self._label = value

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool):
        self._visible = value


class FakeContainer(WizardContainer):
    """Records everything the navigation core pushes to the UI."""

    def __init__(self):
        self._back = FakeButton("back")
        self._next = FakeButton("next")
        self.titles = []
        self.close_requests = 0
        self.relayouts = 0
        self.redraws = 0
        self.focused = None

    @property
    def back_button(self) -> NavigationButton:
        return self._back

    @property
    def next_finish_button(self) -> NavigationButton:
        return self._next

    @property
    def title(self) -> str:
        return self.titles[-1] if self.titles else ""

    def set_title(self, text: str):
        self.titles.append(text)

    def request_close(self):
        self.close_requests += 1

    def relayout(self):
        self.relayouts += 1

    def redraw(self):
        self.redraws += 1

    def set_focus(self, button: NavigationButton):
        self.focused = button

    def has_focus(self, button: NavigationButton) -> bool:
        return self.focused is button


@pytest.fixture(autouse=True)
def _qt_application(qapp):
    """Every test runs with a QApplication available."""
    return qapp


@pytest.fixture
def container():
    return FakeContainer()


@pytest.fixture
def wizard(container):
    return Wizard(container, "Setup")


@pytest.fixture
def make_steps(wizard):
    """Add steps to the wizard fixture: make_steps("A", ("B", False), "C")."""
    def _make(*specs):
        steps = []
        for spec in specs:
            title, enabled = (spec, True) if isinstance(spec, str) else spec
            step = WizardStep(title, enabled=enabled)
            wizard.add_step(step)
            steps.append(step)
        return steps
    return _make
