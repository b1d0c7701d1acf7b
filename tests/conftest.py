"""
Pytest configuration and shared fixtures.
"""

import os

import pytest

from export_browser.config import Settings
from export_browser.core.host import LocalFileSystem
from export_browser.dependencies import reset_singletons


@pytest.fixture(autouse=True)
def clean_singletons():
    """Automatically reset singletons before each test."""
    reset_singletons()
    yield
    reset_singletons()


@pytest.fixture
def settings(tmp_path):
    """Settings pointing the documents root at a temporary directory."""
    return Settings(
        documents_root=str(tmp_path / "Documents"),
        export_folder_name="NepaliWallet",
        host_runtime="desktop",
        log_file_path=str(tmp_path / "logs" / "export_browser.log"),
    )


@pytest.fixture
def export_dir(settings):
    path = settings.export_directory
    path.mkdir(parents=True)
    return path


@pytest.fixture
def filesystem():
    return LocalFileSystem()


@pytest.fixture
def write_export(export_dir):
    """Factory creating files in the export folder, optionally with a fixed mtime (epoch ms)."""

    def _write(name, content, mtime_ms=None):
        path = export_dir / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8", newline="")
        if mtime_ms is not None:
            os.utime(path, ns=(mtime_ms * 1_000_000, mtime_ms * 1_000_000))
        return path

    return _write
