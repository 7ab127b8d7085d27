# -*- coding: utf-8 -*-
"""
Wizard events and the argument objects delivered through them.

Handlers run synchronously, in connection order, inside the call that
emitted the event. A handler cancels by setting ``args.cancel = True``
before returning. A handler that raises aborts the operation that emitted
the event; the exception reaches that operation's caller.
"""

from typing import Callable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .wizard_step import WizardStep


class WizardEvent:
    """
    Ordered, synchronous event with the connect/emit shape of a pyqtSignal.

    Unlike a pyqtSignal, an exception raised by a handler propagates to the
    caller of ``emit()`` and stops delivery to the remaining handlers.
    """

    def __init__(self, name: str):
        self.name = name
        self._handlers: List[Callable] = []

    def connect(self, handler: Callable):
        """Subscribe a handler; handlers run in subscription order."""
        self._handlers.append(handler)

    def disconnect(self, handler: Optional[Callable] = None):
        """
        Unsubscribe a handler, or every handler when none is given.

        Raises:
            ValueError: if the handler is not connected
        """
        if handler is None:
            self._handlers.clear()
            return
        self._handlers.remove(handler)

    def emit(self, args):
        """Deliver args to every handler connected at the time of the call."""
        for handler in list(self._handlers):
            handler(args)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self):
        return f"WizardEvent({self.name!r}, handlers={len(self._handlers)})"


class StepChangeEventArgs:
    """Arguments for the step_changing / step_changed events."""

    def __init__(self, old_step: Optional['WizardStep'], new_step: Optional['WizardStep']):
        self._old_step = old_step
        self._new_step = new_step
        self.cancel = False

    @property
    def old_step(self) -> Optional['WizardStep']:
        """The current (or previous) step."""
        return self._old_step

    @property
    def new_step(self) -> Optional['WizardStep']:
        """The step the wizard is changing to or has changed to."""
        return self._new_step

    def __repr__(self):
        return f"StepChangeEventArgs(old_step={self._old_step!r}, new_step={self._new_step!r}, cancel={self.cancel})"


class WizardButtonEventArgs:
    """Arguments for the moving_next / moving_back / finishing / cancelled events."""

    def __init__(self):
        self.cancel = False

    def __repr__(self):
        return f"WizardButtonEventArgs(cancel={self.cancel})"


class TitleEventArgs:
    """Arguments for a step's title_changing / title_changed events."""

    def __init__(self, old_title: str, new_title: str):
        self._old_title = old_title
        self._new_title = new_title
        self.cancel = False

    @property
    def old_title(self) -> str:
        return self._old_title

    @property
    def new_title(self) -> str:
        return self._new_title

    def __repr__(self):
        return f"TitleEventArgs(old_title={self._old_title!r}, new_title={self._new_title!r}, cancel={self.cancel})"
