"""
Main Application Window
=======================
The single fixed-size window of the application.

Why is this file needed?
------------------------
1. Layout: Heading, file picker, selected file label, count button and the
   result/error line, stacked vertically.
2. Routing: It connects the two buttons to the state and the count action,
   then re-reads the state into the labels.
"""
import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QPushButton, QFileDialog
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont

from wordcounter import config
from wordcounter.controller.counting import run_count
from wordcounter.model.state import CounterState, Status

logger = logging.getLogger(__name__)


def _font(point_size: int, bold: bool = False) -> QFont:
    font = QFont()
    font.setPointSize(point_size)
    font.setBold(bold)
    return font


class MainWindow(QMainWindow):
    def __init__(self, state: CounterState) -> None:
        super().__init__()
        self.state: CounterState = state

        self.setWindowTitle(config.APP_TITLE)
        # Fixed size also disables resizing
        self.setFixedSize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        layout = QVBoxLayout(main_widget)
        layout.setSpacing(10)

        # --- 1. Heading ---
        self.lbl_heading = QLabel(config.HEADING_TEXT)
        self.lbl_heading.setFont(_font(config.HEADING_FONT_SIZE))
        layout.addWidget(self.lbl_heading)

        # --- 2. File Picker ---
        self.btn_choose = QPushButton(config.CHOOSE_FILE_TEXT)
        self.btn_choose.setFont(_font(config.BUTTON_FONT_SIZE))
        self.btn_choose.clicked.connect(self.on_choose_file_clicked)
        layout.addWidget(self.btn_choose, alignment=Qt.AlignLeft)

        self.lbl_file = QLabel()
        self.lbl_file.setFont(_font(config.FILE_LABEL_FONT_SIZE))
        self.lbl_file.setWordWrap(True)
        layout.addWidget(self.lbl_file)

        # --- 3. Count Action ---
        self.btn_count = QPushButton(config.COUNT_TEXT)
        self.btn_count.setFont(_font(config.BUTTON_FONT_SIZE))
        self.btn_count.clicked.connect(self.on_count_clicked)
        layout.addWidget(self.btn_count, alignment=Qt.AlignLeft)

        # --- 4. Result / Error ---
        self.lbl_result = QLabel()
        self.lbl_result.setFont(_font(config.RESULT_FONT_SIZE, bold=True))
        layout.addWidget(self.lbl_result)

        self.lbl_error = QLabel()
        self.lbl_error.setFont(_font(config.ERROR_FONT_SIZE))
        self.lbl_error.setWordWrap(True)
        self.lbl_error.setStyleSheet(f"color: {config.ERROR_COLOR};")
        layout.addWidget(self.lbl_error)

        layout.addStretch()

        # Initial Render
        self.refresh_ui_from_state()

    # --- SLOTS ---

    def on_choose_file_clicked(self) -> None:
        # Blocks until the native dialog is closed
        fname, _ = QFileDialog.getOpenFileName(
            self, config.FILE_DIALOG_TITLE, "", config.FILE_DIALOG_FILTER
        )
        if fname:
            self.state.select_file(fname)
            self.refresh_ui_from_state()

    def on_count_clicked(self) -> None:
        if not self.state.has_file:
            return

        self.btn_count.setEnabled(False)
        self.repaint()
        try:
            run_count(self.state)
        finally:
            self.btn_count.setEnabled(True)

        self.refresh_ui_from_state()

    # --- HELPER METHODS ---

    def refresh_ui_from_state(self) -> None:
        """Re-reads the state into the labels."""
        path = self.state.file_path if self.state.has_file else config.NO_FILE_TEXT
        self.lbl_file.setText(config.FILE_LABEL_TEMPLATE.format(path=path))

        status = self.state.status
        self.btn_count.setEnabled(status != Status.IDLE)

        if status == Status.COUNTED:
            self.lbl_result.setText(config.RESULT_TEMPLATE.format(count=self.state.word_count))
        else:
            self.lbl_result.clear()
        self.lbl_result.setVisible(status == Status.COUNTED)

        if status == Status.FAILED:
            self.lbl_error.setText(config.ERROR_TEMPLATE.format(message=self.state.error_message))
        else:
            self.lbl_error.clear()
        self.lbl_error.setVisible(status == Status.FAILED)
