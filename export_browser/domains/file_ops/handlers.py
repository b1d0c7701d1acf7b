from typing import Optional

from export_browser.core.cqrs.command import CommandHandler
from export_browser.core.cqrs.query import QueryHandler
from export_browser.domains.file_catalog.catalog_service import FileCatalogService

from .commands import CopyExportPathCommand, DeleteExportFileCommand
from .file_ops_service import FileOpsService
from .models import OperationNotice
from .queries import ResolveExportPathQuery

# Handlers return None when the name is not in the catalog


class DeleteExportFileHandler(CommandHandler[DeleteExportFileCommand, Optional[OperationNotice]]):
    def __init__(self, file_ops: FileOpsService, catalog: FileCatalogService):
        self._file_ops = file_ops
        self._catalog = catalog

    async def handle(self, command: DeleteExportFileCommand) -> Optional[OperationNotice]:
        entry = await self._catalog.get_entry(command.name)
        if entry is None:
            return None
        return await self._file_ops.delete(entry)


class CopyExportPathHandler(CommandHandler[CopyExportPathCommand, Optional[OperationNotice]]):
    def __init__(self, file_ops: FileOpsService, catalog: FileCatalogService):
        self._file_ops = file_ops
        self._catalog = catalog

    async def handle(self, command: CopyExportPathCommand) -> Optional[OperationNotice]:
        entry = await self._catalog.get_entry(command.name)
        if entry is None:
            return None
        return await self._file_ops.copy_path(entry)


class ResolveExportPathHandler(QueryHandler[ResolveExportPathQuery, Optional[str]]):
    def __init__(self, file_ops: FileOpsService, catalog: FileCatalogService):
        self._file_ops = file_ops
        self._catalog = catalog

    async def handle(self, query: ResolveExportPathQuery) -> Optional[str]:
        entry = await self._catalog.get_entry(query.name)
        if entry is None:
            return None
        return self._file_ops.resolve_path(entry)
