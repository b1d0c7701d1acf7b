# export_browser/domains/file_ops/registration.py
import logging

from export_browser.core.cqrs.command_bus import CommandBus
from export_browser.core.cqrs.query_bus import QueryBus
from export_browser.domains.file_catalog.catalog_service import FileCatalogService

from .commands import CopyExportPathCommand, DeleteExportFileCommand
from .file_ops_service import FileOpsService
from .handlers import CopyExportPathHandler, DeleteExportFileHandler, ResolveExportPathHandler
from .queries import ResolveExportPathQuery


def register_file_ops_handlers(
    query_bus: QueryBus,
    command_bus: CommandBus,
    file_ops: FileOpsService,
    catalog: FileCatalogService,
) -> None:
    logging.info("Registering 'File Ops' handlers...")

    command_bus.register(DeleteExportFileCommand, DeleteExportFileHandler(file_ops, catalog).handle)
    command_bus.register(CopyExportPathCommand, CopyExportPathHandler(file_ops, catalog).handle)

    query_bus.register(ResolveExportPathQuery, ResolveExportPathHandler(file_ops, catalog).handle)
