"""
Presentation event handlers - turn domain events into webview messages.

Only changes made through this application are pushed; the export folder is
not watched.
"""

import logging

from export_browser.core.events.catalog_events import (
    CatalogRefreshedEvent,
    ExportFileDeletedEvent,
    NotificationEvent,
    PreviewChangedEvent,
)
from export_browser.domains.file_catalog.catalog_service import FileCatalogService
from export_browser.domains.file_catalog.handlers import build_snapshot

from .websocket_manager import WebSocketManager


class PresentationEventHandlers:

    def __init__(self, websocket_manager: WebSocketManager, catalog: FileCatalogService):
        self._websocket_manager = websocket_manager
        self._catalog = catalog

    async def handle_catalog_refreshed(self, event: CatalogRefreshedEvent) -> None:
        await self._broadcast_catalog("catalog_refreshed")

    async def handle_file_deleted(self, event: ExportFileDeletedEvent) -> None:
        logging.debug(f"Broadcasting deletion of {event.file_name}")
        await self._broadcast_catalog("file_deleted", file_name=event.file_name)

    async def handle_preview_changed(self, event: PreviewChangedEvent) -> None:
        self._websocket_manager.broadcast_message(
            {
                "type": "preview_changed",
                "data": {"file_name": event.file_name, "kind": event.kind},
            }
        )

    async def handle_notification(self, event: NotificationEvent) -> None:
        self._websocket_manager.broadcast_message(
            {
                "type": "notification",
                "data": {
                    "success": event.success,
                    "message": event.message,
                    "detail": event.detail,
                    "timestamp": event.timestamp.isoformat(),
                },
            }
        )

    async def _broadcast_catalog(self, message_type: str, **extra) -> None:
        snapshot = await build_snapshot(self._catalog)
        self._websocket_manager.broadcast_message(
            {"type": message_type, "data": {**snapshot.model_dump(mode="json"), **extra}}
        )
