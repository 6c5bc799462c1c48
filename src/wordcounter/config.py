"""
Configuration & Constants
=========================
This module serves as the central registry for the fixed window geometry,
UI text and supported formats.

Nothing here is read from the environment or from files: the UI text is
hard-coded in Ukrainian and the window size is fixed.

Exports:
    APP_TITLE (str): Window title.
    WINDOW_WIDTH, WINDOW_HEIGHT (int): Fixed window size in logical pixels.
    SUPPORTED_EXTENSIONS (tuple[str, ...]): Lowercase extensions without dot.
    DOCX_BODY_ENTRY (str): ZIP entry holding the main DOCX document body.
    LOG_FORMAT, LOG_DATE_FORMAT (str): Log record layout.
    LIBRARY_LOG_LEVELS (dict[str, int]): Levels forced on third-party loggers.
"""
import logging

# --- Window ---
APP_TITLE: str = "Word Counter"
WINDOW_WIDTH: int = 400
WINDOW_HEIGHT: int = 300

# --- Formats ---
SUPPORTED_EXTENSIONS: tuple[str, ...] = ("txt", "docx", "pdf")
DOCX_BODY_ENTRY: str = "word/document.xml"

FILE_DIALOG_TITLE: str = "Вибрати файл"
FILE_DIALOG_FILTER: str = (
    "Документи (" + " ".join(f"*.{ext}" for ext in SUPPORTED_EXTENSIONS) + ");;"
    "Усі файли (*)"
)

# --- UI text ---
HEADING_TEXT: str = "Підрахунок слів у файлі"
CHOOSE_FILE_TEXT: str = "📂 Вибрати файл"
COUNT_TEXT: str = "▶ Порахувати слова"
FILE_LABEL_TEMPLATE: str = "Файл: {path}"
NO_FILE_TEXT: str = "Не вибрано"
RESULT_TEMPLATE: str = "📝 Кількість слів: {count}"
ERROR_TEMPLATE: str = "❌ Помилка: {message}"

# --- Fonts (pt) & colors ---
HEADING_FONT_SIZE: int = 24
BUTTON_FONT_SIZE: int = 18
FILE_LABEL_FONT_SIZE: int = 16
RESULT_FONT_SIZE: int = 20
ERROR_FONT_SIZE: int = 18
ERROR_COLOR: str = "red"

# --- Logging ---
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT: str = "%H:%M:%S"
# pypdf warns once per broken object on damaged files; the error label covers it
LIBRARY_LOG_LEVELS: dict[str, int] = {"pypdf": logging.ERROR}
