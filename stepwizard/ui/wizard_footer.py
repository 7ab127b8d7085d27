# -*- coding: utf-8 -*-
"""
Wizard Footer Component - Back and Next/Finish buttons for WizardDialog.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QPushButton
from PyQt5.QtCore import pyqtSignal

from stepwizard.framework.container import NavigationButton


class QtNavigationButton(NavigationButton):
    """Adapts a QPushButton to the NavigationButton contract."""

    def __init__(self, button: QPushButton):
        self.widget = button

    @property
    def label(self) -> str:
        return self.widget.text()

    @label.setter
    def label(self, value: str):
        self.widget.setText(value)

    @property
    def visible(self) -> bool:
        # isHidden() reflects the explicit state even before the dialog is shown
        return not self.widget.isHidden()

    @visible.setter
    def visible(self, value: bool):
        self.widget.setVisible(value)


class WizardFooter(QWidget):
    """
    Wizard footer with the navigation buttons.

    The back button sits on the left and the next/finish button on the
    right. Labels and visibility are driven by the presentation synchronizer.

    Signals:
        previous_clicked: Emitted when the Back button is clicked
        next_clicked: Emitted when the Next/Finish button is clicked
    """

    # Signals
    previous_clicked = pyqtSignal()
    next_clicked = pyqtSignal()

    def __init__(self, next_text: str = "", previous_text: str = "", parent=None):
        """
        Initialize wizard footer.

        Args:
            next_text: Initial text for next button
            previous_text: Initial text for back button
            parent: Parent widget
        """
        super().__init__(parent)
        self.next_text = next_text
        self.previous_text = previous_text

        self._setup_ui()

    def _setup_ui(self):
        """Setup footer UI."""
        self.setStyleSheet("""
            QWidget {
                border-top: 1px solid #dee2e6;
            }
            QPushButton {
                min-width: 96px;
                min-height: 32px;
                padding: 4px 12px;
            }
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 12, 8)
        layout.setSpacing(12)

        # Back on the left, Next/Finish hard against the right edge
        self.btn_previous = QPushButton(self.previous_text)
        self.btn_previous.clicked.connect(self.previous_clicked.emit)
        layout.addWidget(self.btn_previous)

        layout.addStretch()

        self.btn_next = QPushButton(self.next_text)
        self.btn_next.setDefault(True)
        self.btn_next.clicked.connect(self.next_clicked.emit)
        layout.addWidget(self.btn_next)

        self.back_button = QtNavigationButton(self.btn_previous)
        self.next_finish_button = QtNavigationButton(self.btn_next)
