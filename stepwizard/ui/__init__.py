# -*- coding: utf-8 -*-
"""
PyQt5 widgets for hosting a wizard.
"""

from .step_pane import StepPane
from .wizard_dialog import WizardDialog
from .wizard_footer import QtNavigationButton, WizardFooter

__all__ = ["QtNavigationButton", "StepPane", "WizardDialog", "WizardFooter"]
