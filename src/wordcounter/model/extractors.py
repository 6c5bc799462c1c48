"""
Text Extractors
===============
Format-specific routines that turn a file on disk into a word count.

A word is a maximal run of characters outside the Unicode White_Space set.
Each extractor opens, reads and releases its file within a single call and
reports failures only through the classes in model.errors.

Functions:
    count_tokens: Count whitespace-delimited tokens in a string.
    count_words_in_txt: Plain UTF-8 text, counted line by line.
    count_words_in_docx: Main body ('word/document.xml') of a DOCX container.
    count_words_in_pdf: Full text layer of a PDF document.
"""
import logging
import re
import zipfile
import zlib
from typing import IO
from xml.etree import ElementTree as ET

from pypdf import PasswordType, PdfReader

from wordcounter.config import DOCX_BODY_ENTRY
from wordcounter.model.errors import (
    ArchiveError,
    ExtractionError,
    FileReadError,
    MissingDocumentBodyError,
    ParseError,
)

logger = logging.getLogger(__name__)


# Unicode White_Space; str.isspace() also accepts the U+001C..U+001F separators
_TOKEN_RE = re.compile(r"[\S\x1c-\x1f]+")


def count_tokens(text: str) -> int:
    """Number of maximal non-whitespace runs in text."""
    return len(_TOKEN_RE.findall(text))


# -----------------------------------------------------------------------------
# TXT
# -----------------------------------------------------------------------------

def count_words_in_txt(file_path: str) -> int:
    word_count = 0
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            for line in f:
                word_count += count_tokens(line)
    except UnicodeDecodeError as e:
        raise FileReadError(f"файл не є коректним текстом UTF-8 ({e.reason})") from e
    except OSError as e:
        raise FileReadError(e.strerror or str(e)) from e

    logger.debug(f"TXT '{file_path}': {word_count} words")
    return word_count


# -----------------------------------------------------------------------------
# DOCX
# -----------------------------------------------------------------------------

def _count_words_in_xml(stream: IO[bytes]) -> int:
    """
    Counts tokens in every text node of an XML stream.

    ElementTree stores character data in two places: 'text' (before the first
    child) and 'tail' (after an element's closing tag). When an element's 'end'
    event fires, its own text and the tails of all its children are complete,
    so each text node is visited exactly once.
    """
    word_count = 0
    for _, elem in ET.iterparse(stream, events=("end",)):
        if elem.text:
            word_count += count_tokens(elem.text)
        for child in elem:
            if child.tail:
                word_count += count_tokens(child.tail)
    return word_count


def count_words_in_docx(file_path: str) -> int:
    """
    Counts words in the main document body of a DOCX file.

    Headers, footers, footnotes and comments live in other container entries
    and are not counted.

    Raises:
        FileReadError: The file cannot be opened.
        ArchiveError: The ZIP container is invalid or an entry is corrupt.
        MissingDocumentBodyError: There is no 'word/document.xml' entry.
        ParseError: The body XML is malformed.
    """
    try:
        with zipfile.ZipFile(file_path) as archive:
            try:
                info = archive.getinfo(DOCX_BODY_ENTRY)
            except KeyError:
                raise MissingDocumentBodyError(DOCX_BODY_ENTRY) from None

            with archive.open(info) as body:
                word_count = _count_words_in_xml(body)

    except ET.ParseError as e:
        raise ParseError(str(e)) from e
    # RuntimeError: entry is flagged as password-encrypted
    except (zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError, RuntimeError) as e:
        raise ArchiveError(str(e)) from e
    except OSError as e:
        raise FileReadError(e.strerror or str(e)) from e

    logger.debug(f"DOCX '{file_path}': {word_count} words")
    return word_count


# -----------------------------------------------------------------------------
# PDF
# -----------------------------------------------------------------------------

def count_words_in_pdf(file_path: str) -> int:
    """
    Counts words in the text layer of a PDF document.

    Raises:
        FileReadError: The file cannot be opened.
        ExtractionError: The document is corrupt, encrypted, or has pages but
            no extractable text (e.g. a scanned image).
    """
    try:
        reader = PdfReader(file_path)
    except OSError as e:
        raise FileReadError(e.strerror or str(e)) from e
    except Exception as e:
        # pypdf reports damaged files through several unrelated exception types
        raise ExtractionError(str(e) or e.__class__.__name__) from e

    if reader.is_encrypted:
        # Owner-password-only documents open with an empty user password
        try:
            decrypted = reader.decrypt("")
        except Exception as e:
            raise ExtractionError(str(e) or e.__class__.__name__) from e
        if decrypted == PasswordType.NOT_DECRYPTED:
            raise ExtractionError("документ зашифровано")

    try:
        pages = list(reader.pages)
        text = "\n".join(page.extract_text() or "" for page in pages)
    except Exception as e:
        raise ExtractionError(str(e) or e.__class__.__name__) from e

    if not pages:
        return 0

    word_count = count_tokens(text)
    if word_count == 0:
        raise ExtractionError("документ не містить текстового шару")
    logger.debug(f"PDF '{file_path}': {len(pages)} pages, {word_count} words")
    return word_count
