import logging
from pathlib import Path
from typing import Optional

from export_browser.config import Settings
from export_browser.core.events.catalog_events import ExportFileDeletedEvent, NotificationEvent
from export_browser.core.events.event_bus import DomainEventBus
from export_browser.core.exceptions import (
    ClipboardFailedError,
    DeleteFailedError,
    HostUnavailableError,
)
from export_browser.core.host import ClipboardCapability, FileSystemCapability
from export_browser.domains.file_catalog.catalog_service import FileCatalogService
from export_browser.domains.file_catalog.models import FileEntry
from export_browser.domains.preview.dispatcher import PreviewDispatcher

from .models import OperationNotice

COPY_SUCCESS_MESSAGE = "File path copied to clipboard!"


class FileOpsService:
    """
    Single-entry operations on the export folder: delete and copy-path.

    Failures are logged and reported as a failed OperationNotice. Nothing is
    retried; catalog and preview state are only touched on success.
    """

    def __init__(
        self,
        settings: Settings,
        filesystem: Optional[FileSystemCapability],
        clipboard: Optional[ClipboardCapability],
        catalog: FileCatalogService,
        dispatcher: PreviewDispatcher,
        event_bus: Optional[DomainEventBus] = None,
    ):
        self._settings = settings
        self._filesystem = filesystem
        self._clipboard = clipboard
        self._catalog = catalog
        self._dispatcher = dispatcher
        self._event_bus = event_bus

    async def delete(self, entry: FileEntry) -> OperationNotice:
        """
        Remove the file from disk, then from the catalog (no rescan).

        On failure the catalog is left as it was; a refresh reconciles it.
        """
        if self._filesystem is None:
            return self._host_unavailable(entry)

        path = self._settings.export_directory / entry.name
        try:
            await self._filesystem.remove(path)
        except OSError as e:
            error = DeleteFailedError(entry.name, e.strerror or str(e))
            logging.error(f"Error deleting file: {error}")
            return OperationNotice(
                success=False,
                message=f"Could not delete {entry.name}",
                detail=str(error),
                file_name=entry.name,
            )

        await self._catalog.remove_entry(entry.name)
        await self._dispatcher.forget(entry.name)
        logging.info(f"Deleted export file: {entry.name}")

        if self._event_bus:
            await self._event_bus.publish(ExportFileDeletedEvent(file_name=entry.name))

        return OperationNotice(success=True, message=f"Deleted {entry.name}", file_name=entry.name)

    def resolve_path(self, entry: FileEntry) -> str:
        """Absolute path of ``entry``: documents root / export folder / file name."""
        documents_root = self._settings.documents_directory
        return str((documents_root / self._settings.export_folder_name / entry.name).absolute())

    async def copy_path(self, entry: FileEntry) -> OperationNotice:
        """Put the absolute path of ``entry`` on the clipboard."""
        if self._filesystem is None:
            return self._host_unavailable(entry)

        try:
            if self._clipboard is None:
                raise ClipboardFailedError("no clipboard available")
            file_path = self.resolve_path(entry)
            await self._clipboard.write_text(file_path)
        except ClipboardFailedError as e:
            return await self._notify_copy_failed(entry, str(e))
        except (OSError, RuntimeError) as e:
            return await self._notify_copy_failed(entry, str(ClipboardFailedError(str(e))))

        logging.info(f"Copied path to clipboard: {file_path}")
        notice = OperationNotice(success=True, message=COPY_SUCCESS_MESSAGE, file_name=entry.name)
        await self._notify(notice)
        return notice

    async def _notify_copy_failed(self, entry: FileEntry, detail: str) -> OperationNotice:
        logging.error(f"Copy failed: {detail}")
        notice = OperationNotice(
            success=False,
            message="Could not copy file path",
            detail=detail,
            file_name=entry.name,
        )
        await self._notify(notice)
        return notice

    async def _notify(self, notice: OperationNotice) -> None:
        if self._event_bus:
            await self._event_bus.publish(
                NotificationEvent(success=notice.success, message=notice.message, detail=notice.detail)
            )

    def _host_unavailable(self, entry: FileEntry) -> OperationNotice:
        error = HostUnavailableError()
        logging.warning(str(error))
        return OperationNotice(
            success=False,
            message="Not available outside the desktop app",
            detail=str(error),
            file_name=entry.name,
        )
