import logging

from fastapi import APIRouter, Depends, HTTPException

from export_browser.core.cqrs.command_bus import CommandBus
from export_browser.core.cqrs.query_bus import QueryBus
from export_browser.dependencies import get_command_bus, get_query_bus
from export_browser.domains.file_catalog.commands import RefreshCatalogCommand
from export_browser.domains.file_catalog.models import CatalogSnapshot
from export_browser.domains.file_catalog.queries import GetCatalogInfoQuery, GetCatalogQuery
from export_browser.domains.file_ops.commands import CopyExportPathCommand, DeleteExportFileCommand
from export_browser.domains.file_ops.models import OperationNotice
from export_browser.domains.file_ops.queries import ResolveExportPathQuery
from export_browser.domains.preview.commands import OpenPreviewCommand
from export_browser.domains.preview.models import PreviewResult

router = APIRouter(prefix="/api/exports", tags=["exports"])


def _not_in_catalog(name: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"'{name}' is not in the export catalog")


@router.get("", response_model=CatalogSnapshot)
async def get_catalog(query_bus: QueryBus = Depends(get_query_bus)) -> CatalogSnapshot:
    try:
        return await query_bus.execute(GetCatalogQuery())
    except Exception as e:
        logging.error(f"API: Error reading catalog: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/refresh", response_model=CatalogSnapshot)
async def refresh_catalog(command_bus: CommandBus = Depends(get_command_bus)) -> CatalogSnapshot:
    try:
        snapshot = await command_bus.execute(RefreshCatalogCommand())
        logging.info(f"API: Catalog refresh completed - {snapshot.total_files} files")
        return snapshot
    except Exception as e:
        logging.error(f"API: Unexpected error during catalog refresh: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/info")
async def get_catalog_info(query_bus: QueryBus = Depends(get_query_bus)) -> dict:
    try:
        return await query_bus.execute(GetCatalogInfoQuery())
    except Exception as e:
        logging.error(f"API: Error getting catalog info: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to get catalog info: {str(e)}")


@router.get("/{name}/preview", response_model=PreviewResult)
async def open_preview(name: str, command_bus: CommandBus = Depends(get_command_bus)):
    try:
        result = await command_bus.execute(OpenPreviewCommand(name=name))
    except Exception as e:
        logging.error(f"API: Unexpected error opening preview for {name}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if result is None:
        raise _not_in_catalog(name)
    return result


@router.delete("/{name}", response_model=OperationNotice)
async def delete_export_file(
    name: str, command_bus: CommandBus = Depends(get_command_bus)
) -> OperationNotice:
    try:
        notice = await command_bus.execute(DeleteExportFileCommand(name=name))
    except Exception as e:
        logging.error(f"API: Unexpected error deleting {name}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if notice is None:
        raise _not_in_catalog(name)
    return notice


@router.post("/{name}/copy-path", response_model=OperationNotice)
async def copy_export_path(
    name: str, command_bus: CommandBus = Depends(get_command_bus)
) -> OperationNotice:
    try:
        notice = await command_bus.execute(CopyExportPathCommand(name=name))
    except Exception as e:
        logging.error(f"API: Unexpected error copying path of {name}: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if notice is None:
        raise _not_in_catalog(name)
    return notice


@router.get("/{name}/path")
async def resolve_export_path(name: str, query_bus: QueryBus = Depends(get_query_bus)) -> dict:
    path = await query_bus.execute(ResolveExportPathQuery(name=name))
    if path is None:
        raise _not_in_catalog(name)
    return {"name": name, "path": path}
