#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
stepwizard demo - opens a three-step wizard.

Usage:
    python -m stepwizard
"""

import sys

from PyQt5.QtWidgets import QApplication, QCheckBox, QLabel, QLineEdit

from stepwizard.framework import WizardStep
from stepwizard.ui import WizardDialog
from stepwizard.utils.logger import setup_logger


def build_demo_dialog() -> WizardDialog:
    """Create the demo wizard."""
    dialog = WizardDialog("Project Setup")

    welcome = WizardStep("Welcome")
    welcome.help_text = "This wizard creates a new project."
    welcome.next_button_text = "Start"
    pane = dialog.add_step(welcome)
    pane.controls_layout.addWidget(QLabel("Press Start to begin."))
    advanced_toggle = QCheckBox("Show advanced options")
    pane.controls_layout.addWidget(advanced_toggle)

    name = WizardStep("Name")
    name.help_text = "Choose a name for the project."
    pane = dialog.add_step(name)
    name_edit = QLineEdit()
    pane.controls_layout.addWidget(name_edit)

    advanced = WizardStep("Advanced", enabled=False)
    pane = dialog.add_step(advanced)
    pane.show_help = False
    pane.controls_layout.addWidget(QLabel("Nothing to tune yet."))
    advanced_toggle.toggled.connect(lambda checked: setattr(advanced, "enabled", checked))

    summary = WizardStep("Summary")
    pane = dialog.add_step(summary)
    pane.show_help = False
    summary_label = QLabel()
    pane.controls_layout.addWidget(summary_label)

    def on_step_changing(args):
        # Require a project name before leaving the Name step
        if args.old_step is name and args.new_step is not welcome and not name_edit.text().strip():
            args.cancel = True

    def on_step_changed(args):
        if args.new_step is summary:
            summary_label.setText(f"Project: {name_edit.text().strip()}")

    dialog.wizard.step_changing.connect(on_step_changing)
    dialog.wizard.step_changed.connect(on_step_changed)
    return dialog


def main() -> int:
    logger = setup_logger()
    app = QApplication(sys.argv)

    dialog = build_demo_dialog()
    dialog.wizard.finishing.connect(lambda args: logger.info("Demo wizard finished"))
    dialog.wizard.cancelled.connect(lambda args: logger.info("Demo wizard cancelled"))
    dialog.show()

    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
