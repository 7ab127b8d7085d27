# -*- coding: utf-8 -*-
"""
stepwizard - Multi-step wizard navigation for PyQt5.
"""

from .framework import (
    DuplicateStepError,
    StepChangeEventArgs,
    Wizard,
    WizardButtonEventArgs,
    WizardContainer,
    WizardError,
    WizardStep,
)

__version__ = "1.0.0"

__all__ = [
    "DuplicateStepError",
    "StepChangeEventArgs",
    "Wizard",
    "WizardButtonEventArgs",
    "WizardContainer",
    "WizardError",
    "WizardStep",
]
