"""
Shared fixtures: .docx containers built on the fly.
"""
import zipfile

import pytest


@pytest.fixture
def make_docx(tmp_path):
    """Write a zip container with the given entries and return its path."""
    def _make(name, body=None, entries=None):
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("[Content_Types].xml", "<Types/>")
            if body is not None:
                archive.writestr("word/document.xml", body)
            for entry_name, content in (entries or []):
                archive.writestr(entry_name, content)
        return path
    return _make
