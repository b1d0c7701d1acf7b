from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from export_browser.core.cqrs.query_bus import QueryBus
from export_browser.dependencies import get_query_bus, get_websocket_manager
from export_browser.domains.file_catalog.queries import GetCatalogQuery
from export_browser.domains.presentation.websocket_manager import WebSocketManager

router = APIRouter(prefix="/api/ws", tags=["websockets"])


@router.websocket("/live")
async def websocket_endpoint(
    websocket: WebSocket,
    ws_manager: WebSocketManager = Depends(get_websocket_manager),
    query_bus: QueryBus = Depends(get_query_bus),
):
    snapshot = await query_bus.execute(GetCatalogQuery())
    await ws_manager.connect(
        websocket, {"type": "catalog_snapshot", "data": snapshot.model_dump(mode="json")}
    )

    try:
        while True:
            message = await websocket.receive_text()
            if message == "ping":
                await websocket.send_text("pong")

    except WebSocketDisconnect:
        ws_manager.disconnect(websocket)
