"""
DOCX text loader.

Reads the raw body XML out of a .docx container. The markup is returned
as-is; tokenization later strips the punctuation.
"""
import logging
import zipfile
import zlib
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

DOCUMENT_ENTRY = "word/document.xml"


class DocumentLoadError(Exception):
    """Base class for document loading failures."""


class DocumentReadError(DocumentLoadError, OSError):
    """The container could not be opened or the entry could not be read."""


class DocumentEntryNotFoundError(DocumentLoadError, LookupError):
    """The container has no word/document.xml entry."""


def extract_text_from_docx(file_path: Union[str, Path]) -> str:
    """
    Return the content of the first word/document.xml entry in a .docx file.

    Raises:
        DocumentReadError: file missing, not a zip container, or unreadable entry
        DocumentEntryNotFoundError: no word/document.xml entry in the container
    """
    try:
        archive = zipfile.ZipFile(file_path)
    except (OSError, EOFError, ValueError, zipfile.BadZipFile) as e:
        raise DocumentReadError(f"error opening docx file {file_path}: {e}") from e

    with archive:
        # getinfo() would return the last duplicate, the first one wins here
        entry = next((info for info in archive.infolist() if info.filename == DOCUMENT_ENTRY), None)
        if entry is None:
            raise DocumentEntryNotFoundError(f"{DOCUMENT_ENTRY} not found in {file_path}")

        try:
            data = archive.read(entry)
        except (OSError, EOFError, zipfile.BadZipFile, zlib.error, RuntimeError, NotImplementedError) as e:
            raise DocumentReadError(f"error reading {DOCUMENT_ENTRY} from {file_path}: {e}") from e

    logger.info(f"Loaded document: path={file_path}, bytes={len(data)}")
    return data.decode("utf-8", errors="replace")
