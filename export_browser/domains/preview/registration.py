# export_browser/domains/preview/registration.py
import logging

from export_browser.core.cqrs.command_bus import CommandBus
from export_browser.core.cqrs.query_bus import QueryBus
from export_browser.domains.file_catalog.catalog_service import FileCatalogService

from .commands import ClosePreviewCommand, OpenPreviewCommand
from .dispatcher import PreviewDispatcher
from .handlers import (
    ClosePreviewHandler,
    GetActivePreviewHandler,
    GetPreviewResourceHandler,
    OpenPreviewHandler,
)
from .queries import GetActivePreviewQuery, GetPreviewResourceQuery
from .resource_lifecycle import ResourceLifecycle


def register_preview_handlers(
    query_bus: QueryBus,
    command_bus: CommandBus,
    dispatcher: PreviewDispatcher,
    lifecycle: ResourceLifecycle,
    catalog: FileCatalogService,
) -> None:
    logging.info("Registering 'Preview' handlers...")

    command_bus.register(OpenPreviewCommand, OpenPreviewHandler(dispatcher, catalog).handle)
    command_bus.register(ClosePreviewCommand, ClosePreviewHandler(dispatcher).handle)

    query_bus.register(GetActivePreviewQuery, GetActivePreviewHandler(dispatcher).handle)
    query_bus.register(GetPreviewResourceQuery, GetPreviewResourceHandler(lifecycle).handle)
