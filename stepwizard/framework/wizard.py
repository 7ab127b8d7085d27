# -*- coding: utf-8 -*-
"""
Wizard - Public entry point of the navigation core.

Wires a step registry, navigator, presentation synchronizer and completion
controller to one container. The container forwards its lifecycle and button
activations to ``on_loaded``, ``on_closing``, ``on_back_activated`` and
``on_next_finish_activated``.
"""

from typing import Optional, Tuple

from PyQt5.QtCore import QObject

from .completion import CompletionController
from .container import NavigationButton, WizardContainer
from .presentation import PresentationSynchronizer, compose_title
from .step_navigator import StepNavigator
from .step_registry import StepRegistry
from .wizard_step import WizardStep
from stepwizard.app.config import Config
from stepwizard.utils.i18n import I18n
from stepwizard.utils.logger import get_logger

logger = get_logger(__name__)


class Wizard(QObject):
    """
    A step-based wizard.

    Steps are navigated in the order they were added. The back button is
    hidden on the first enabled step, and the next button reads "Finish" on
    the last enabled step (unless the step overrides its label).
    """

    def __init__(self, container: WizardContainer, title: str = "",
                 i18n: Optional[I18n] = None, parent: Optional[QObject] = None):
        """
        Initialize the wizard.

        Args:
            container: Window hosting the wizard
            title: Wizard title; the current step's title is appended to it
            i18n: Translations for the default button labels
            parent: Optional Qt parent
        """
        super().__init__(parent)
        self.container = container
        self.i18n = i18n or I18n(Config.LANGUAGE)

        self.registry = StepRegistry()
        self.synchronizer = PresentationSynchronizer(self.registry, container, self.i18n, title)
        self.navigator = StepNavigator(self.registry, self.synchronizer, container)
        self.completion = CompletionController(self.navigator, container)

    # =========================================================================
    # Events (delegated)
    # =========================================================================

    @property
    def step_changing(self):
        return self.navigator.step_changing

    @property
    def step_changed(self):
        return self.navigator.step_changed

    @property
    def moving_next(self):
        return self.completion.moving_next

    @property
    def moving_back(self):
        return self.completion.moving_back

    @property
    def finishing(self):
        return self.completion.finishing

    @property
    def cancelled(self):
        return self.completion.cancelled

    # =========================================================================
    # Title
    # =========================================================================

    @property
    def title(self) -> str:
        """The full title ("Wizard Title - Step Title")."""
        return compose_title(self.synchronizer.wizard_title, self.registry, self.current_step)

    @title.setter
    def title(self, value: str):
        self.synchronizer.wizard_title = value
        self.container.set_title(self.title)

    @property
    def wizard_title(self) -> str:
        """The wizard's own title, without the step title."""
        return self.synchronizer.wizard_title

    # =========================================================================
    # Steps
    # =========================================================================

    def add_step(self, step: WizardStep):
        """
        Add a step; the buttons navigate through steps in the order they were added.

        Raises:
            DuplicateStepError: if the step was already added
        """
        self.registry.append(step)
        step.enabled_changed.connect(self._on_step_state_changed)
        step.title_changed.connect(self._on_step_state_changed)

        if self.current_step is not None:
            step.visible = False

        self.update_buttons_and_title()

    @property
    def steps(self) -> Tuple[WizardStep, ...]:
        return tuple(self.registry)

    @property
    def current_step(self) -> Optional[WizardStep]:
        return self.navigator.current

    @current_step.setter
    def current_step(self, step: Optional[WizardStep]):
        self.navigator.go_to_step(step)

    @property
    def finish_committed(self) -> bool:
        return self.completion.finish_committed

    @property
    def back_button(self) -> NavigationButton:
        return self.container.back_button

    @property
    def next_finish_button(self) -> NavigationButton:
        return self.container.next_finish_button

    # =========================================================================
    # Navigation
    # =========================================================================

    def go_next(self) -> bool:
        """Move to the next enabled step. Does nothing on the last one."""
        return self.navigator.go_next()

    def go_back(self) -> bool:
        """Move to the previous enabled step. Does nothing on the first one."""
        return self.navigator.go_back()

    def go_to_step(self, step: Optional[WizardStep]) -> bool:
        """Change to the specified step; see ``StepNavigator.go_to_step``."""
        return self.navigator.go_to_step(step)

    def get_next_step(self) -> Optional[WizardStep]:
        """The next enabled step after the current one (the first when unset)."""
        return self.navigator.next_enabled_after(self.current_step)

    def get_previous_step(self) -> Optional[WizardStep]:
        """The previous enabled step before the current one (the last when unset)."""
        return self.navigator.previous_enabled_before(self.current_step)

    def get_first_step(self) -> Optional[WizardStep]:
        return self.registry.first_enabled()

    def get_last_step(self) -> Optional[WizardStep]:
        return self.registry.last_enabled()

    def update_buttons_and_title(self):
        """Push title and button state for the current step."""
        self.synchronizer.synchronize(self.current_step)

    # =========================================================================
    # Container hooks
    # =========================================================================

    def on_loaded(self):
        """Container finished loading: show the first enabled step."""
        self.navigator.initialize()

    def on_closing(self):
        """Container is closing: report a cancellation unless finished."""
        self.completion.closing()

    def on_back_activated(self):
        self.completion.back_activated()

    def on_next_finish_activated(self):
        self.completion.next_finish_activated()

    # =========================================================================
    # Signal Handlers
    # =========================================================================

    def _on_step_state_changed(self, *args):
        """Handle enabled/title changes of a registered step."""
        self.update_buttons_and_title()
