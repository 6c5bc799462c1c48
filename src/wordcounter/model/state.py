"""
Application State (Data Model)
==============================
This module defines the data the window displays.

Why is this file needed?
------------------------
1. State Management: It holds the selected file, the last word count and the
   last error in one place.
2. Decoupling: The view reads from this object; the count action writes to it.

Invariant: 'word_count' and 'error_message' are never both set, and both are
cleared whenever a new file is selected.

Classes:
    Status: Derived stage of a count attempt.
    CounterState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class Status(StrEnum):
    IDLE = "idle"
    FILE_SELECTED = "file_selected"
    COUNTED = "counted"
    FAILED = "failed"


@dataclass
class CounterState:
    """
    Holds the state of the running window.
    Created once at startup and passed to the main window.
    """
    file_path: str = ""
    word_count: Optional[int] = None
    error_message: Optional[str] = None

    @property
    def has_file(self) -> bool:
        return bool(self.file_path)

    @property
    def status(self) -> Status:
        if self.word_count is not None:
            return Status.COUNTED
        if self.error_message is not None:
            return Status.FAILED
        if self.has_file:
            return Status.FILE_SELECTED
        return Status.IDLE

    def select_file(self, path: str) -> None:
        """Select a new file. An empty path (cancelled dialog) is ignored."""
        if not path:
            return
        self.file_path = path
        self.word_count = None
        self.error_message = None
        logger.info(f"Selected file: {path}")

    def record_count(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"Word count must be non-negative, got {count}.")
        self.word_count = count
        self.error_message = None

    def record_error(self, message: str) -> None:
        self.error_message = message
        self.word_count = None
