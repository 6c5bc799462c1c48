"""
Error Taxonomy
==============
Every failure a count attempt can end with is one of the classes below.

Library exceptions (OSError, zipfile.BadZipFile, ElementTree.ParseError,
pypdf errors, ...) are converted at the extractor boundary, so the count
action only has to catch WordCountError.

Classes:
    WordCountError: Base class; str(error) is the text shown in the window.
    UnsupportedFormatError: Extension is not txt/docx/pdf.
    FileReadError: File cannot be opened, read or decoded as text.
    ArchiveError: DOCX container is not a valid ZIP archive.
    MissingDocumentBodyError: DOCX container has no 'word/document.xml'.
    ParseError: DOCX body XML is malformed.
    ExtractionError: PDF text extraction failed.
"""
from typing import Optional


class WordCountError(Exception):
    """Base class for all errors reported to the user."""
    description: str = "Помилка підрахунку"

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        message = f"{self.description}: {detail}" if detail else self.description
        super().__init__(message)


class UnsupportedFormatError(WordCountError):
    description = "Непідтримуваний формат файлу"


class FileReadError(WordCountError):
    description = "Не вдалося прочитати файл"


class ArchiveError(WordCountError):
    description = "Пошкоджений DOCX-архів"


class MissingDocumentBodyError(WordCountError):
    description = "У DOCX-архіві немає основного документа"


class ParseError(WordCountError):
    description = "Некоректний XML у документі"


class ExtractionError(WordCountError):
    description = "Не вдалося видобути текст з PDF"
