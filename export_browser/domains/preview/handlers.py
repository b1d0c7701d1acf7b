from typing import Optional

from export_browser.core.cqrs.command import CommandHandler
from export_browser.core.cqrs.query import QueryHandler
from export_browser.domains.file_catalog.catalog_service import FileCatalogService

from .commands import ClosePreviewCommand, OpenPreviewCommand
from .dispatcher import PreviewDispatcher
from .models import PreviewResult
from .queries import GetActivePreviewQuery, GetPreviewResourceQuery
from .resource_lifecycle import RenderResource, ResourceLifecycle


class OpenPreviewHandler(CommandHandler[OpenPreviewCommand, Optional[PreviewResult]]):
    """Returns None when the name is not in the catalog."""

    def __init__(self, dispatcher: PreviewDispatcher, catalog: FileCatalogService):
        self._dispatcher = dispatcher
        self._catalog = catalog

    async def handle(self, command: OpenPreviewCommand) -> Optional[PreviewResult]:
        entry = await self._catalog.get_entry(command.name)
        if entry is None:
            return None
        return await self._dispatcher.open(entry)


class ClosePreviewHandler(CommandHandler[ClosePreviewCommand, None]):
    def __init__(self, dispatcher: PreviewDispatcher):
        self._dispatcher = dispatcher

    async def handle(self, command: ClosePreviewCommand) -> None:
        await self._dispatcher.close()


class GetActivePreviewHandler(QueryHandler[GetActivePreviewQuery, Optional[PreviewResult]]):
    def __init__(self, dispatcher: PreviewDispatcher):
        self._dispatcher = dispatcher

    async def handle(self, query: GetActivePreviewQuery) -> Optional[PreviewResult]:
        return self._dispatcher.active


class GetPreviewResourceHandler(QueryHandler[GetPreviewResourceQuery, Optional[RenderResource]]):
    def __init__(self, lifecycle: ResourceLifecycle):
        self._lifecycle = lifecycle

    async def handle(self, query: GetPreviewResourceQuery) -> Optional[RenderResource]:
        return self._lifecycle.get(query.resource_id)
