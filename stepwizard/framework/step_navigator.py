# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- The current-step cursor
- Forward/backward traversal that skips disabled steps
- The cancelable step_changing / step_changed transition protocol
- Step visibility (exactly one visible step after a transition)
"""

from typing import Optional

from .container import WizardContainer
from .events import StepChangeEventArgs, WizardEvent
from .presentation import PresentationSynchronizer
from .step_registry import StepRegistry
from .wizard_step import WizardStep
from stepwizard.utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator:
    """
    Manages navigation between wizard steps.

    Responsibilities:
    - Track current step
    - Run the cancelable transition protocol
    - Show the current step and hide the others
    - Keep the container's buttons and title in sync
    """

    def __init__(self, registry: StepRegistry, synchronizer: PresentationSynchronizer,
                 container: WizardContainer):
        """
        Initialize the navigator.

        Args:
            registry: Steps, in traversal order
            synchronizer: Pushes derived state after each transition
            container: Window hosting the wizard (focus handling)
        """
        self.registry = registry
        self.synchronizer = synchronizer
        self.container = container
        self._current: Optional[WizardStep] = None
        self._initialized = False
        self._transition_active = False

        # Events
        self.step_changing = WizardEvent("step_changing")  # StepChangeEventArgs, cancelable
        self.step_changed = WizardEvent("step_changed")  # StepChangeEventArgs, informational

    @property
    def current(self) -> Optional[WizardStep]:
        """The current step, or None before the first transition."""
        return self._current

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def in_transition(self) -> bool:
        """True while step_changing/step_changed handlers are running."""
        return self._transition_active

    def initialize(self):
        """
        Select the first enabled step (called once, when the container loads).

        Later calls do nothing. With no enabled step the cursor stays unset
        and every step is hidden.
        """
        if self._initialized:
            return
        self._initialized = True

        if self._current is not None:
            logger.debug(f"Initialize: keeping current step {self._current.title!r}")
            return

        first = self.next_enabled_after(None)
        logger.debug(f"Initialize: first enabled step is {first.title if first else None!r}")
        self.go_to_step(first)

    # =========================================================================
    # Traversal
    # =========================================================================

    def next_enabled_after(self, step: Optional[WizardStep]) -> Optional[WizardStep]:
        """
        Get the first enabled step after ``step``.

        Scans from the start when ``step`` is None or not registered.
        Returns None when no enabled step follows.
        """
        index = self.registry.find(step)
        start = 0 if index is None else index + 1

        for candidate_index in range(start, len(self.registry)):
            candidate = self.registry[candidate_index]
            if candidate.enabled:
                return candidate
        return None

    def previous_enabled_before(self, step: Optional[WizardStep]) -> Optional[WizardStep]:
        """
        Get the first enabled step before ``step``.

        Scans from the end when ``step`` is None or not registered.
        Returns None when no enabled step precedes.
        """
        index = self.registry.find(step)
        start = len(self.registry) - 1 if index is None else index - 1

        for candidate_index in range(start, -1, -1):
            candidate = self.registry[candidate_index]
            if candidate.enabled:
                return candidate
        return None

    def go_next(self) -> bool:
        """
        Move to the next enabled step.

        Returns:
            True if navigation was successful; False at the last enabled
            step or when the transition was rejected
        """
        next_step = self.next_enabled_after(self._current)
        if next_step is None:
            logger.debug("Cannot go next: no enabled step after the current one")
            return False
        return self.go_to_step(next_step)

    def go_back(self) -> bool:
        """
        Move to the previous enabled step.

        Returns:
            True if navigation was successful; False at the first enabled
            step or when the transition was rejected
        """
        previous = self.previous_enabled_before(self._current)
        if previous is None:
            logger.debug("Cannot go back: no enabled step before the current one")
            return False
        return self.go_to_step(previous)

    # =========================================================================
    # Transition protocol
    # =========================================================================

    def go_to_step(self, target: Optional[WizardStep]) -> bool:
        """
        Change to the specified step.

        Args:
            target: The step to go to; None hides every step

        Returns:
            True if the transition succeeded. False if the step is not
            registered, is disabled, a step_changing handler cancelled, a
            step_changed handler set cancel (the change is kept), or another
            transition is still running.
        """
        if self._transition_active:
            logger.warning(
                f"Ignoring navigation to {target.title if target else None!r}: "
                f"a step transition is already in progress"
            )
            return False

        if target is not None and target not in self.registry:
            logger.warning(f"Cannot go to unregistered step {target!r}")
            return False

        self._transition_active = True
        try:
            return self._transition(target)
        finally:
            self._transition_active = False

    def _transition(self, target: Optional[WizardStep]) -> bool:
        old_step = self._current

        if self.on_step_changing(old_step, target):
            logger.debug(f"Transition to {target!r} cancelled by step_changing handler")
            return False

        if target is not None and not target.enabled:
            logger.debug(f"Transition to {target!r} rejected: step is disabled")
            return False

        # Hide all but the new step
        for step in self.registry:
            step.visible = step is target

        self._current = target
        logger.info(
            f"Navigation complete: {old_step.title if old_step else None!r} -> "
            f"{target.title if target else None!r}"
        )

        self.synchronizer.synchronize(self._current)

        # Keep focus on the navigation buttons
        back = self.container.back_button
        if self.container.has_focus(back):
            self.container.set_focus(back)
        else:
            self.container.set_focus(self.container.next_finish_button)

        if self.on_step_changed(old_step, self._current):
            # Nothing to roll back: the change is already committed
            return False

        return True

    def on_step_changing(self, old_step: Optional[WizardStep], new_step: Optional[WizardStep]) -> bool:
        """
        Emit step_changing.

        Returns:
            True if the change is to be cancelled
        """
        args = StepChangeEventArgs(old_step, new_step)
        self.step_changing.emit(args)
        return args.cancel

    def on_step_changed(self, old_step: Optional[WizardStep], new_step: Optional[WizardStep]) -> bool:
        """
        Emit step_changed.

        Returns:
            True if a handler set cancel
        """
        args = StepChangeEventArgs(old_step, new_step)
        self.step_changed.emit(args)
        return args.cancel
