# export_browser/domains/file_catalog/registration.py
import logging

from export_browser.core.cqrs.command_bus import CommandBus
from export_browser.core.cqrs.query_bus import QueryBus

from .catalog_service import FileCatalogService
from .commands import RefreshCatalogCommand
from .handlers import (
    GetCatalogEntryHandler,
    GetCatalogHandler,
    GetCatalogInfoHandler,
    RefreshCatalogHandler,
)
from .queries import GetCatalogEntryQuery, GetCatalogInfoQuery, GetCatalogQuery


def register_file_catalog_handlers(
    query_bus: QueryBus, command_bus: CommandBus, catalog: FileCatalogService
) -> None:
    """Wire the catalog queries and commands onto the buses. Called once at startup."""
    logging.info("Registering 'File Catalog' handlers...")

    query_bus.register(GetCatalogQuery, GetCatalogHandler(catalog).handle)
    query_bus.register(GetCatalogEntryQuery, GetCatalogEntryHandler(catalog).handle)
    query_bus.register(GetCatalogInfoQuery, GetCatalogInfoHandler(catalog).handle)

    command_bus.register(RefreshCatalogCommand, RefreshCatalogHandler(catalog).handle)
