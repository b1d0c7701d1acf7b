from pathlib import Path
from typing import Dict, Literal, Optional

from platformdirs import user_documents_dir
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.host_config import get_hostname_settings_file


class Settings(BaseSettings):
    # Export folder
    export_folder_name: str = "NepaliWallet"
    documents_root: Optional[str] = None  # None = platform documents directory

    # Execution context: "desktop" enables filesystem access, "browser" disables it
    host_runtime: Literal["desktop", "browser"] = "desktop"
    binary_transport: Literal["native", "base64"] = "native"

    # Timeouts
    directory_create_timeout_seconds: float = 2.0
    entry_metadata_timeout_seconds: float = 5.0

    # Preview
    preview_media_types: Dict[str, str] = {"pdf": "application/pdf"}
    resource_url_prefix: str = "/api/preview/resources"

    # Logging
    log_level: str = "INFO"
    log_file_path: str = "logs/export_browser.log"
    log_retention_days: int = 30

    # Host bridge (loopback only)
    bridge_host: str = "127.0.0.1"
    bridge_port: int = 8765

    model_config = SettingsConfigDict(env_file=get_hostname_settings_file())

    @property
    def documents_directory(self) -> Path:
        """Documents root as a Path; the platform default when unset."""
        if self.documents_root:
            return Path(self.documents_root)
        return Path(user_documents_dir())

    @property
    def export_directory(self) -> Path:
        """Absolute path of the managed export folder."""
        return self.documents_directory / self.export_folder_name

    @property
    def log_directory(self) -> Path:
        """Directory holding the log file."""
        return Path(self.log_file_path).parent

    @property
    def config_file_info(self) -> dict:
        """Return information about which configuration file is being used."""
        from .utils.host_config import get_hostname, list_all_settings_files

        return {
            "hostname": get_hostname(),
            "active_config_file": get_hostname_settings_file(),
            "all_available_configs": list_all_settings_files(),
        }
