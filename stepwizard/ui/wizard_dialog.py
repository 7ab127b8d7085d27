# -*- coding: utf-8 -*-
"""
Wizard Dialog - QDialog hosting a Wizard.

Provides:
- Step panes stacked in the body (only the current one is visible)
- Separator and footer with Back and Next/Finish buttons
- Window title kept as "Wizard Title - Step Title"
- Cancellation reporting for every close path (Escape, window close, reject)
"""

from typing import Optional

from PyQt5.QtWidgets import QDialog, QFrame, QVBoxLayout, QWidget

from .step_pane import StepPane
from .wizard_footer import WizardFooter
from stepwizard.app.config import Config
from stepwizard.framework.container import ABCQObjectMeta, NavigationButton, WizardContainer
from stepwizard.framework.wizard import Wizard
from stepwizard.framework.wizard_step import WizardStep
from stepwizard.utils.i18n import I18n
from stepwizard.utils.logger import get_logger

logger = get_logger(__name__)


class WizardDialog(QDialog, WizardContainer, metaclass=ABCQObjectMeta):
    """
    Dialog implementation of the WizardContainer contract.

    Usage:
        dialog = WizardDialog("Setup")
        pane = dialog.add_step(WizardStep("Welcome"))
        pane.controls_layout.addWidget(QLabel("Hello"))
        dialog.wizard.finishing.connect(on_finishing)
        dialog.exec_()
    """

    def __init__(self, title: str = "", i18n: Optional[I18n] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setMinimumSize(Config.DIALOG_MIN_WIDTH, Config.DIALOG_MIN_HEIGHT)
        self.panes = []

        self._setup_ui()

        self.wizard = Wizard(self, title, i18n=i18n, parent=self)
        self.footer.previous_clicked.connect(self.wizard.on_back_activated)
        self.footer.next_clicked.connect(self.wizard.on_next_finish_activated)

        self.footer.btn_previous.setText(self.wizard.i18n.t("wizard.back"))
        self.footer.btn_next.setText(self.wizard.i18n.t("wizard.finish"))
        self.setWindowTitle(title)

    def _setup_ui(self):
        """Setup the dialog UI."""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # Step panes
        self.body = QWidget()
        self.body_layout = QVBoxLayout(self.body)
        self.body_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.addWidget(self.body, 1)

        # Separator
        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        # Footer with navigation buttons
        self.footer = WizardFooter(parent=self)
        main_layout.addWidget(self.footer)

    def add_step(self, step: WizardStep) -> StepPane:
        """
        Add a step to the wizard and create its pane.

        Returns:
            The StepPane whose ``controls_layout`` receives the step's widgets
        """
        self.wizard.add_step(step)
        pane = StepPane(step, parent=self.body)
        self.body_layout.addWidget(pane)
        self.panes.append(pane)
        return pane

    # =========================================================================
    # WizardContainer
    # =========================================================================

    @property
    def back_button(self) -> NavigationButton:
        return self.footer.back_button

    @property
    def next_finish_button(self) -> NavigationButton:
        return self.footer.next_finish_button

    def set_title(self, text: str):
        self.setWindowTitle(text)

    def request_close(self):
        self.accept()

    def relayout(self):
        self.layout().invalidate()
        self.layout().activate()

    def redraw(self):
        self.update()

    def set_focus(self, button: NavigationButton):
        button.widget.setFocus()

    def has_focus(self, button: NavigationButton) -> bool:
        return button.widget.hasFocus()

    # =========================================================================
    # Qt events
    # =========================================================================

    def showEvent(self, event):
        super().showEvent(event)
        self.wizard.on_loaded()

    def done(self, result: int):
        # accept(), reject(), Escape and the window close button all end here
        logger.debug(f"Wizard dialog closing with result {result}")
        self.wizard.on_closing()
        super().done(result)
