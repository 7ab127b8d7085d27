# -*- coding: utf-8 -*-
"""
Step Registry - Ordered, append-only collection of wizard steps.

Insertion order is traversal order. Steps are compared by identity.
"""

from typing import Iterator, List, Optional

from .exceptions import DuplicateStepError
from .wizard_step import WizardStep
from stepwizard.utils.logger import get_logger

logger = get_logger(__name__)


class StepRegistry:
    """Stores steps in the order they were added."""

    def __init__(self):
        self._steps: List[WizardStep] = []

    def append(self, step: WizardStep):
        """
        Add a step to the end of the registry.

        Raises:
            DuplicateStepError: if the step is already registered
        """
        if self.find(step) is not None:
            raise DuplicateStepError(step)
        self._steps.append(step)
        logger.debug(f"Registered step {len(self._steps) - 1}: {step.title!r}")

    def find(self, step: Optional[WizardStep]) -> Optional[int]:
        """Get the index of a step, or None if it is not registered."""
        if step is None:
            return None
        for index, candidate in enumerate(self._steps):
            if candidate is step:
                return index
        return None

    def first_enabled(self) -> Optional[WizardStep]:
        """Get the first enabled step."""
        return next((s for s in self._steps if s.enabled), None)

    def last_enabled(self) -> Optional[WizardStep]:
        """Get the last enabled step."""
        return next((s for s in reversed(self._steps) if s.enabled), None)

    def __iter__(self) -> Iterator[WizardStep]:
        return iter(list(self._steps))

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, index: int) -> WizardStep:
        return self._steps[index]

    def __contains__(self, step) -> bool:
        return self.find(step) is not None
