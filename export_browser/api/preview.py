import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response

from export_browser.core.cqrs.command_bus import CommandBus
from export_browser.core.cqrs.query_bus import QueryBus
from export_browser.dependencies import get_command_bus, get_query_bus
from export_browser.domains.preview.commands import ClosePreviewCommand
from export_browser.domains.preview.models import PreviewResult
from export_browser.domains.preview.queries import GetActivePreviewQuery, GetPreviewResourceQuery

router = APIRouter(prefix="/api/preview", tags=["preview"])


@router.get("", response_model=Optional[PreviewResult])
async def get_active_preview(query_bus: QueryBus = Depends(get_query_bus)):
    return await query_bus.execute(GetActivePreviewQuery())


@router.delete("")
async def close_preview(command_bus: CommandBus = Depends(get_command_bus)) -> dict:
    try:
        await command_bus.execute(ClosePreviewCommand())
    except Exception as e:
        logging.error(f"API: Error closing preview: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return {"success": True}


@router.get("/resources/{resource_id}")
async def get_preview_resource(
    resource_id: str, query_bus: QueryBus = Depends(get_query_bus)
) -> Response:
    """Serve the bytes of the live binary resource to the embedded viewer."""
    resource = await query_bus.execute(GetPreviewResourceQuery(resource_id=resource_id))
    if resource is None:
        raise HTTPException(status_code=404, detail="Preview resource has been released")

    return Response(
        content=resource.data,
        media_type=resource.handle.media_type,
        headers={"Content-Disposition": "inline", "Cache-Control": "no-store"},
    )
