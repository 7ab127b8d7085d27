# -*- coding: utf-8 -*-
"""
Wizard Framework - Step navigation core.

Provides the step model, ordered step registry, navigator with cancelable
transitions, presentation synchronization and completion handling. The UI is
reached only through the ``WizardContainer`` contract.
"""

from .completion import CompletionController
from .container import ABCQObjectMeta, NavigationButton, WizardContainer
from .events import StepChangeEventArgs, TitleEventArgs, WizardButtonEventArgs, WizardEvent
from .exceptions import DuplicateStepError, WizardError
from .presentation import PresentationState, PresentationSynchronizer, compose_title, compute_presentation
from .step_navigator import StepNavigator
from .step_registry import StepRegistry
from .wizard import Wizard
from .wizard_step import WizardStep

__all__ = [
    'ABCQObjectMeta',
    'CompletionController',
    'DuplicateStepError',
    'NavigationButton',
    'PresentationState',
    'PresentationSynchronizer',
    'StepChangeEventArgs',
    'StepNavigator',
    'StepRegistry',
    'TitleEventArgs',
    'Wizard',
    'WizardButtonEventArgs',
    'WizardContainer',
    'WizardError',
    'WizardEvent',
    'WizardStep',
    'compose_title',
    'compute_presentation',
]
