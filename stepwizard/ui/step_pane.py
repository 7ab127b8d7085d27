# -*- coding: utf-8 -*-
"""
Step Pane - Widget that renders one WizardStep.

The pane hosts two areas: ``controls`` for the step's widgets and a
read-only help text view on the right. Either area can be hidden; the
remaining one fills the pane.
"""

from typing import Optional

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QTextEdit

from stepwizard.app.config import Config
from stepwizard.framework.wizard_step import WizardStep


class StepPane(QWidget):
    """Follows the visibility and help text of a WizardStep."""

    def __init__(self, step: WizardStep, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.step = step
        self._show_help = True
        self._show_controls = True

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.controls = QWidget()
        self.controls_layout = QVBoxLayout(self.controls)
        layout.addWidget(self.controls, 100 - Config.HELP_PANE_PERCENT)

        self.help_view = QTextEdit()
        self.help_view.setReadOnly(True)
        self.help_view.setLineWrapMode(QTextEdit.WidgetWidth)
        self.help_view.setPlainText(step.help_text)
        layout.addWidget(self.help_view, Config.HELP_PANE_PERCENT)

        self.setVisible(step.visible)
        self._update_panes()

        step.visible_changed.connect(self.setVisible)
        step.help_text_changed.connect(self.help_view.setPlainText)

    @property
    def show_help(self) -> bool:
        return self._show_help

    @show_help.setter
    def show_help(self, value: bool):
        self._show_help = value
        self._update_panes()

    @property
    def show_controls(self) -> bool:
        return self._show_controls

    @show_controls.setter
    def show_controls(self, value: bool):
        self._show_controls = value
        self._update_panes()

    def _update_panes(self):
        """Show or hide the controls and help areas."""
        self.controls.setVisible(self._show_controls)
        self.help_view.setVisible(self._show_help)
