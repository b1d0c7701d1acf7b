# export_browser/domains/presentation/registration.py
import logging

from export_browser.core.events.catalog_events import (
    CatalogRefreshedEvent,
    ExportFileDeletedEvent,
    NotificationEvent,
    PreviewChangedEvent,
)
from export_browser.core.events.event_bus import DomainEventBus

from .event_handlers import PresentationEventHandlers


async def register_presentation_handlers(
    event_bus: DomainEventBus, handlers: PresentationEventHandlers
) -> None:
    logging.info("Subscribing 'Presentation' event handlers...")

    await event_bus.subscribe(CatalogRefreshedEvent, handlers.handle_catalog_refreshed)
    await event_bus.subscribe(ExportFileDeletedEvent, handlers.handle_file_deleted)
    await event_bus.subscribe(PreviewChangedEvent, handlers.handle_preview_changed)
    await event_bus.subscribe(NotificationEvent, handlers.handle_notification)
