# -*- coding: utf-8 -*-
"""
Completion Controller - Interprets the wizard's buttons and close requests.

- Next/Finish on the last enabled step finishes the wizard
- Next/Finish elsewhere moves to the next enabled step
- Back moves to the previous enabled step
- Closing without a committed finish reports a cancellation
"""

from .container import WizardContainer
from .events import WizardButtonEventArgs, WizardEvent
from .step_navigator import StepNavigator
from stepwizard.utils.logger import get_logger

logger = get_logger(__name__)


class CompletionController:
    """Turns button activations and container closing into wizard actions."""

    def __init__(self, navigator: StepNavigator, container: WizardContainer):
        self.navigator = navigator
        self.container = container
        self._finish_committed = False
        self._cancel_reported = False

        # Events
        self.moving_next = WizardEvent("moving_next")  # WizardButtonEventArgs, cancelable
        self.moving_back = WizardEvent("moving_back")  # WizardButtonEventArgs, cancelable
        self.finishing = WizardEvent("finishing")  # WizardButtonEventArgs, cancelable
        self.cancelled = WizardEvent("cancelled")  # WizardButtonEventArgs, informational

    @property
    def finish_committed(self) -> bool:
        """True once the finish action completed without being cancelled."""
        return self._finish_committed

    def next_finish_activated(self):
        """Handle the next/finish button."""
        if self.navigator.current is self.navigator.registry.last_enabled():
            args = WizardButtonEventArgs()
            self.finishing.emit(args)
            if args.cancel:
                logger.debug("Finish cancelled by handler")
                return
            self._finish_committed = True
            logger.info("Wizard finished")
            self.container.request_close()
        else:
            args = WizardButtonEventArgs()
            self.moving_next.emit(args)
            if args.cancel:
                logger.debug("Moving next cancelled by handler")
                return
            self.navigator.go_next()

    def back_activated(self):
        """Handle the back button."""
        args = WizardButtonEventArgs()
        self.moving_back.emit(args)
        if args.cancel:
            logger.debug("Moving back cancelled by handler")
            return
        self.navigator.go_back()

    def closing(self):
        """Handle the container closing; reports a cancellation at most once."""
        if self._finish_committed or self._cancel_reported:
            return
        self._cancel_reported = True
        logger.info("Wizard cancelled")
        self.cancelled.emit(WizardButtonEventArgs())
