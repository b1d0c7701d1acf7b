import logging

from fastapi import APIRouter, Depends

from export_browser.config import Settings
from export_browser.dependencies import get_directory_manager, get_filesystem, get_settings
from export_browser.domains.directory_sync.directory_manager import DirectoryManager
from export_browser.domains.file_catalog.handlers import HOST_UNAVAILABLE_MESSAGE

router = APIRouter(prefix="/api", tags=["host"])


@router.get("/host")
async def get_host_status(
    settings: Settings = Depends(get_settings),
    directory_manager: DirectoryManager = Depends(get_directory_manager),
) -> dict:
    """Tell the webview whether file management is available in this runtime."""
    host_available = get_filesystem() is not None
    logging.debug("Host status endpoint called", extra={"operation": "api_host_status"})

    return {
        "host_runtime": settings.host_runtime,
        "host_available": host_available,
        "export_directory": str(settings.export_directory) if host_available else None,
        "directory_available": directory_manager.is_available,
        "directory_error": str(directory_manager.last_error) if directory_manager.last_error else None,
        "message": None if host_available else HOST_UNAVAILABLE_MESSAGE,
    }


@router.get("/config-info")
async def get_config_info(settings: Settings = Depends(get_settings)) -> dict:
    logging.info("Config info endpoint called", extra={"operation": "api_config_info"})
    return settings.config_file_info
