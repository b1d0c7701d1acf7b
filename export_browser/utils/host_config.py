"""
Host-specific settings file selection.

Each machine running the desktop shell gets its own ``<hostname>-settings.env``,
seeded from the shared ``settings.env`` the first time it is needed.
"""

import logging
import socket
from pathlib import Path
from typing import List

BASE_SETTINGS_FILE = "settings.env"
HOST_SETTINGS_SUFFIX = "-settings.env"


def get_hostname() -> str:
    """Get the current hostname (without domain)."""
    return socket.gethostname().split(".")[0]


def get_hostname_settings_file() -> str:
    """
    Return the settings file to load for this host.

    Falls back to ``settings.env`` when no base file exists to seed from, or when
    the host file cannot be written.
    """
    try:
        hostname = get_hostname()
        base_settings = Path(BASE_SETTINGS_FILE)
        host_settings = Path(f"{hostname}{HOST_SETTINGS_SUFFIX}")

        if host_settings.exists():
            logging.debug(f"Using existing host-specific configuration: {host_settings}")
            return str(host_settings)

        if not base_settings.exists():
            logging.debug("Base settings.env not found, using defaults")
            return BASE_SETTINGS_FILE

        header = (
            f"# Host-specific configuration for: {hostname}\n"
            f"# Seeded from {BASE_SETTINGS_FILE}; edit freely for this machine\n\n"
        )
        host_settings.write_text(
            header + base_settings.read_text(encoding="utf-8"), encoding="utf-8"
        )
        logging.info(f"Created host-specific configuration: {host_settings}")
        return str(host_settings)

    except OSError as e:
        logging.error(f"Error handling host-specific settings: {e}")
        return BASE_SETTINGS_FILE


def list_all_settings_files() -> List[str]:
    """List the base settings file and every host-specific one in the working directory."""
    settings_files = []
    if Path(BASE_SETTINGS_FILE).exists():
        settings_files.append(BASE_SETTINGS_FILE)
    settings_files.extend(str(p) for p in sorted(Path(".").glob(f"*{HOST_SETTINGS_SUFFIX}")))
    return settings_files
