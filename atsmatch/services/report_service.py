"""
Report persistence.

The last report is kept in memory and mirrored to a plain-text file, so a
restarted server can still serve the previous run.
"""
import logging
from pathlib import Path
from typing import Optional, Union

from atsmatch.schemas.ats import ATSReport

logger = logging.getLogger(__name__)


class ReportWriteError(OSError):
    """The report file could not be written."""


class ReportUnavailableError(Exception):
    """No report in memory and none readable on disk."""


def save_result(file_path: Union[str, Path], content: str) -> None:
    """Overwrite file_path with content."""
    try:
        Path(file_path).write_bytes(content.encode("utf-8", "surrogateescape"))
    except OSError as e:
        raise ReportWriteError(f"error saving result to {file_path}: {e}") from e


class ReportStore:
    """Holds the current report text, backed by a file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._text: Optional[str] = None

    def save(self, report: ATSReport) -> str:
        text = report.render()
        save_result(self.path, text)
        self._text = text
        logger.info(f"Report saved: path={self.path}")
        return text

    def load(self) -> str:
        """
        Return the current report text.

        Raises:
            ReportUnavailableError: nothing cached and the file is missing or unreadable
        """
        if self._text is not None:
            return self._text
        try:
            return self.path.read_bytes().decode("utf-8", "surrogateescape")
        except OSError as e:
            raise ReportUnavailableError(f"error reading report {self.path}: {e}") from e

    def is_available(self) -> bool:
        try:
            self.load()
        except ReportUnavailableError:
            return False
        return True
