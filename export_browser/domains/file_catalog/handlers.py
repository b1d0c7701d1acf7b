from typing import Optional

from export_browser.core.cqrs.command import CommandHandler
from export_browser.core.cqrs.query import QueryHandler

from .catalog_service import FileCatalogService
from .commands import RefreshCatalogCommand
from .models import CatalogSnapshot, FileEntry
from .queries import GetCatalogEntryQuery, GetCatalogInfoQuery, GetCatalogQuery

HOST_UNAVAILABLE_MESSAGE = (
    "Please open your browser downloads to view and manage your exported files."
)


async def build_snapshot(catalog: FileCatalogService) -> CatalogSnapshot:
    if not catalog.host_available:
        return CatalogSnapshot(host_available=False, message=HOST_UNAVAILABLE_MESSAGE)

    entries = await catalog.snapshot()
    return CatalogSnapshot(
        host_available=True,
        directory=str(catalog.export_directory),
        entries=entries,
        is_loading=catalog.is_loading,
        message=None if entries else "No exported files found",
    )


class GetCatalogHandler(QueryHandler[GetCatalogQuery, CatalogSnapshot]):
    def __init__(self, catalog: FileCatalogService):
        self._catalog = catalog

    async def handle(self, query: GetCatalogQuery) -> CatalogSnapshot:
        return await build_snapshot(self._catalog)


class GetCatalogEntryHandler(QueryHandler[GetCatalogEntryQuery, Optional[FileEntry]]):
    def __init__(self, catalog: FileCatalogService):
        self._catalog = catalog

    async def handle(self, query: GetCatalogEntryQuery) -> Optional[FileEntry]:
        return await self._catalog.get_entry(query.name)


class GetCatalogInfoHandler(QueryHandler[GetCatalogInfoQuery, dict]):
    def __init__(self, catalog: FileCatalogService):
        self._catalog = catalog

    async def handle(self, query: GetCatalogInfoQuery) -> dict:
        return self._catalog.get_service_info()


class RefreshCatalogHandler(CommandHandler[RefreshCatalogCommand, CatalogSnapshot]):
    def __init__(self, catalog: FileCatalogService):
        self._catalog = catalog

    async def handle(self, command: RefreshCatalogCommand) -> CatalogSnapshot:
        if self._catalog.host_available:
            await self._catalog.refresh()
        return await build_snapshot(self._catalog)
