import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request

from .api import exports, host, preview, websockets
from .dependencies import (
    get_directory_manager,
    get_file_catalog,
    get_filesystem,
    get_preview_dispatcher,
    get_settings,
    get_websocket_manager,
    register_all_handlers,
)
from .logging_config import setup_logging


async def start_export_browser() -> None:
    """
    Startup sequence: wire handlers, make sure the export folder exists, then
    load the catalog once. Outside the desktop host only the wiring happens.
    """
    settings = get_settings()
    await register_all_handlers()

    if get_filesystem() is None:
        logging.info("Not running inside the desktop host - file management disabled")
        return

    export_directory = settings.export_directory
    logging.info(f"Export directory: {export_directory}")

    if await get_directory_manager().ensure_directory(export_directory):
        await get_file_catalog().refresh()
    else:
        logging.warning("Export directory unavailable - catalog starts empty")


async def stop_export_browser() -> None:
    # Releases any binary resource still held by an open preview
    await get_preview_dispatcher().close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    settings = get_settings()
    setup_logging(settings)

    config_info = settings.config_file_info
    logging.info(f"Configuration loaded from: {config_info['active_config_file']}")
    logging.info(f"Running on hostname: {config_info['hostname']}")
    logging.info("Export Browser starting up...")

    await start_export_browser()

    websocket_manager = get_websocket_manager()
    websocket_manager.start_sender_task()

    yield

    logging.info("Export Browser shutting down...")
    await stop_export_browser()
    websocket_manager.stop_sender_task()


app = FastAPI(
    title="Export Browser",
    description="Host bridge for browsing, previewing and managing exported files",
    version="0.1.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logging.debug(
        f"Incoming request: {request.method} {request.url.path}",
        extra={"operation": "http_request", "method": request.method, "path": request.url.path},
    )
    response = await call_next(request)
    logging.debug(
        f"Response: {response.status_code}",
        extra={"operation": "http_response", "status_code": response.status_code},
    )
    return response


app.include_router(host.router)
app.include_router(exports.router)
app.include_router(preview.router)
app.include_router(websockets.router)


@app.get("/health")
async def health():
    return {"status": "healthy", "service": "export-browser"}


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "export_browser.main:app",
        host=settings.bridge_host,
        port=settings.bridge_port,
        reload=False,
        log_level="info",
    )


if __name__ == "__main__":
    main()
