# export_browser/core/exceptions.py
"""
Failure taxonomy for the export browser.

None of these escape a service boundary: they are raised close to the I/O
call, caught by the owning service, logged, and turned into a safe default
(empty catalog, unsupported preview, unchanged catalog, failed notice).
"""


class ExportBrowserError(Exception):
    """Base class for all export browser failures."""


class HostUnavailableError(ExportBrowserError):
    """Raised when filesystem access is requested outside the desktop host."""

    def __init__(self):
        super().__init__(
            "Filesystem access is only available inside the desktop application."
        )


class DirectoryUnavailableError(ExportBrowserError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Export directory unavailable at {path}: {reason}")


class ListingFailedError(ExportBrowserError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not list {path}: {reason}")


class EntryMetadataFailedError(ExportBrowserError):
    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Could not read metadata for {name}: {reason}")


class ReadFailedError(ExportBrowserError):
    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Could not read {name}: {reason}")


class DecodeFailedError(ExportBrowserError):
    """Raised when file content cannot be decoded in the expected format."""

    def __init__(self, name: str, file_format: str, reason: str):
        self.name = name
        self.format = file_format
        self.reason = reason
        super().__init__(f"Could not decode {name} as {file_format}: {reason}")


class DeleteFailedError(ExportBrowserError):
    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"Could not delete {name}: {reason}")


class ClipboardFailedError(ExportBrowserError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Clipboard write failed: {reason}")
