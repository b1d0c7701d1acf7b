import asyncio
import logging
from pathlib import Path
from typing import Optional

from export_browser.core.exceptions import DirectoryUnavailableError
from export_browser.core.host import FileSystemCapability


class DirectoryManager:
    """
    Makes sure the export folder exists before anything else touches it.

    A failed create does not stop the application: the folder is marked
    unavailable for the session and callers see ``False``.
    """

    def __init__(self, filesystem: Optional[FileSystemCapability], create_timeout: float = 2.0):
        self._filesystem = filesystem
        self._create_timeout = create_timeout
        self._available: Optional[bool] = None
        self._last_error: Optional[DirectoryUnavailableError] = None

    @property
    def is_available(self) -> bool:
        return bool(self._available)

    @property
    def last_error(self) -> Optional[DirectoryUnavailableError]:
        return self._last_error

    async def ensure_directory(self, path: Path) -> bool:
        """
        Ensure ``path`` exists, creating missing ancestors. Idempotent.

        Returns False (and logs) when the directory could not be created.
        """
        if self._filesystem is None:
            self._mark_unavailable(path, "no filesystem access in this runtime")
            return False

        try:
            if await self._filesystem.is_dir(path):
                self._mark_available()
                return True

            logging.info(f"Creating missing export directory: {path}")

            try:
                await asyncio.wait_for(
                    self._filesystem.make_dirs(path), timeout=self._create_timeout
                )
            except asyncio.TimeoutError:
                self._mark_unavailable(path, f"create timed out after {self._create_timeout}s")
                return False

            if await self._filesystem.is_dir(path):
                logging.info(f"Successfully created export directory: {path}")
                self._mark_available()
                return True

            self._mark_unavailable(path, "creation appeared successful but verification failed")
            return False

        except OSError as e:
            self._mark_unavailable(path, str(e))
            return False

    def _mark_available(self) -> None:
        self._available = True
        self._last_error = None

    def _mark_unavailable(self, path: Path, reason: str) -> None:
        self._available = False
        self._last_error = DirectoryUnavailableError(str(path), reason)
        logging.error(str(self._last_error))
