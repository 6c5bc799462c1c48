"""
Format Dispatcher
=================
Routes a file to the extractor matching its extension.
"""
import logging
from pathlib import Path
from typing import Callable

from wordcounter.model.errors import UnsupportedFormatError
from wordcounter.model.extractors import (
    count_words_in_docx,
    count_words_in_pdf,
    count_words_in_txt,
)

logger = logging.getLogger(__name__)

# Keys must match config.SUPPORTED_EXTENSIONS
EXTRACTORS: dict[str, Callable[[str], int]] = {
    "txt": count_words_in_txt,
    "docx": count_words_in_docx,
    "pdf": count_words_in_pdf,
}


def get_extension(file_path: str) -> str:
    """Lowercase extension without the dot, or '' if there is none."""
    return Path(file_path).suffix.lstrip(".").lower()


def count_words(file_path: str) -> int:
    """
    Counts words in a .txt, .docx or .pdf file.

    Raises:
        UnsupportedFormatError: The extension is not supported.
        WordCountError: Any subclass raised by the selected extractor.
    """
    extension = get_extension(file_path)
    extractor = EXTRACTORS.get(extension)
    if extractor is None:
        raise UnsupportedFormatError(f".{extension}" if extension else None)

    logger.debug(f"Dispatching '{file_path}' to {extractor.__name__}")
    return extractor(file_path)
