# -*- coding: utf-8 -*-
"""
Wizard framework exceptions.

Only programmer errors are raised. Rejected transitions (cancelled by a
handler, disabled target) are reported as a False return value.
"""


class WizardError(Exception):
    """Base class for wizard framework errors."""
    pass


class DuplicateStepError(WizardError):
    """Raised when the same step object is registered twice."""

    def __init__(self, step):
        self.step = step
        super().__init__(f"Step '{getattr(step, 'title', step)}' is already registered")
