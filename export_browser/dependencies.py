from functools import lru_cache
from typing import Any, Dict, Optional

from export_browser.core.cqrs.command_bus import CommandBus
from export_browser.core.cqrs.query_bus import QueryBus
from export_browser.core.events.event_bus import DomainEventBus
from export_browser.core.host import (
    ClipboardCapability,
    CommandLineClipboard,
    FileSystemCapability,
    resolve_filesystem_capability,
)

from .config import Settings
from .domains.directory_sync.directory_manager import DirectoryManager
from .domains.file_catalog.catalog_repository import CatalogRepository
from .domains.file_catalog.catalog_service import FileCatalogService
from .domains.file_catalog.registration import register_file_catalog_handlers
from .domains.file_ops.file_ops_service import FileOpsService
from .domains.file_ops.registration import register_file_ops_handlers
from .domains.presentation.event_handlers import PresentationEventHandlers
from .domains.presentation.registration import register_presentation_handlers
from .domains.presentation.websocket_manager import WebSocketManager
from .domains.preview.dispatcher import PreviewDispatcher
from .domains.preview.registration import register_preview_handlers
from .domains.preview.registry import PreviewStrategyRegistry, build_default_registry
from .domains.preview.resource_lifecycle import ResourceLifecycle

# Global singleton instances
_singletons: Dict[str, Any] = {}


@lru_cache
def get_settings() -> Settings:
    """Get the Settings singleton."""
    return Settings()


def get_filesystem() -> Optional[FileSystemCapability]:
    """The host filesystem capability, resolved once. None outside the desktop host."""
    if "filesystem" not in _singletons:
        settings = get_settings()
        _singletons["filesystem"] = resolve_filesystem_capability(
            settings.host_runtime, settings.binary_transport
        )
    return _singletons["filesystem"]


def get_clipboard() -> Optional[ClipboardCapability]:
    if "clipboard" not in _singletons:
        _singletons["clipboard"] = CommandLineClipboard() if get_filesystem() is not None else None
    return _singletons["clipboard"]


def get_command_bus() -> CommandBus:
    if "command_bus" not in _singletons:
        _singletons["command_bus"] = CommandBus()
    return _singletons["command_bus"]


def get_query_bus() -> QueryBus:
    if "query_bus" not in _singletons:
        _singletons["query_bus"] = QueryBus()
    return _singletons["query_bus"]


def get_event_bus() -> DomainEventBus:
    if "event_bus" not in _singletons:
        _singletons["event_bus"] = DomainEventBus()
    return _singletons["event_bus"]


def get_directory_manager() -> DirectoryManager:
    if "directory_manager" not in _singletons:
        _singletons["directory_manager"] = DirectoryManager(
            get_filesystem(),
            create_timeout=get_settings().directory_create_timeout_seconds,
        )
    return _singletons["directory_manager"]


def get_catalog_repository() -> CatalogRepository:
    if "catalog_repository" not in _singletons:
        _singletons["catalog_repository"] = CatalogRepository()
    return _singletons["catalog_repository"]


def get_file_catalog() -> FileCatalogService:
    if "file_catalog" not in _singletons:
        _singletons["file_catalog"] = FileCatalogService(
            settings=get_settings(),
            filesystem=get_filesystem(),
            repository=get_catalog_repository(),
            event_bus=get_event_bus(),
        )
    return _singletons["file_catalog"]


def get_resource_lifecycle() -> ResourceLifecycle:
    if "resource_lifecycle" not in _singletons:
        _singletons["resource_lifecycle"] = ResourceLifecycle(
            url_prefix=get_settings().resource_url_prefix
        )
    return _singletons["resource_lifecycle"]


def get_preview_registry() -> Optional[PreviewStrategyRegistry]:
    if "preview_registry" not in _singletons:
        filesystem = get_filesystem()
        _singletons["preview_registry"] = (
            build_default_registry(get_settings(), filesystem, get_resource_lifecycle())
            if filesystem is not None
            else None
        )
    return _singletons["preview_registry"]


def get_preview_dispatcher() -> PreviewDispatcher:
    if "preview_dispatcher" not in _singletons:
        _singletons["preview_dispatcher"] = PreviewDispatcher(
            export_directory=get_settings().export_directory,
            registry=get_preview_registry(),
            lifecycle=get_resource_lifecycle(),
            event_bus=get_event_bus(),
        )
    return _singletons["preview_dispatcher"]


def get_file_ops() -> FileOpsService:
    if "file_ops" not in _singletons:
        _singletons["file_ops"] = FileOpsService(
            settings=get_settings(),
            filesystem=get_filesystem(),
            clipboard=get_clipboard(),
            catalog=get_file_catalog(),
            dispatcher=get_preview_dispatcher(),
            event_bus=get_event_bus(),
        )
    return _singletons["file_ops"]


def get_websocket_manager() -> WebSocketManager:
    if "websocket_manager" not in _singletons:
        _singletons["websocket_manager"] = WebSocketManager()
    return _singletons["websocket_manager"]


def get_presentation_event_handlers() -> PresentationEventHandlers:
    if "presentation_event_handlers" not in _singletons:
        _singletons["presentation_event_handlers"] = PresentationEventHandlers(
            websocket_manager=get_websocket_manager(),
            catalog=get_file_catalog(),
        )
    return _singletons["presentation_event_handlers"]


async def register_all_handlers() -> None:
    """Wire every domain onto the buses. Safe to call more than once."""
    if _singletons.get("handlers_registered"):
        return

    query_bus = get_query_bus()
    command_bus = get_command_bus()
    catalog = get_file_catalog()

    register_file_catalog_handlers(query_bus, command_bus, catalog)
    register_preview_handlers(
        query_bus, command_bus, get_preview_dispatcher(), get_resource_lifecycle(), catalog
    )
    register_file_ops_handlers(query_bus, command_bus, get_file_ops(), catalog)
    await register_presentation_handlers(get_event_bus(), get_presentation_event_handlers())

    _singletons["handlers_registered"] = True


def reset_singletons() -> None:
    """Reset all singletons (for testing)."""
    _singletons.clear()
    get_settings.cache_clear()
