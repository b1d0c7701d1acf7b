import logging
import logging.handlers

from rich.console import Console
from rich.logging import RichHandler

from .config import Settings

FILE_LOG_FORMAT = (
    "%(asctime)s - %(levelname)s - "
    "%(filename)s:%(lineno)d in %(funcName)s() - "
    "%(message)s"
)


def setup_logging(settings: Settings) -> None:
    """
    Configure the root logger for the host bridge.

    Two handlers share the level from settings:
    - a rich console handler for the terminal the desktop shell launches us in
    - a file handler rotated at midnight, keeping ``log_retention_days`` files

    Calling it again replaces the handlers instead of stacking duplicates.
    """
    log_dir = settings.log_directory
    log_dir.mkdir(parents=True, exist_ok=True)

    # Console output, with markup for the startup banner
    rich_handler = RichHandler(
        console=Console(width=120),
        show_time=True,
        show_level=True,
        show_path=True,
        markup=True,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
    )
    rich_handler.setLevel(settings.log_level)

    # File output keeps source location for every line
    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=settings.log_file_path,
        when="midnight",
        interval=1,
        backupCount=settings.log_retention_days,
        encoding="utf-8",
    )
    file_handler.setLevel(settings.log_level)
    file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        if isinstance(handler, (RichHandler, logging.handlers.TimedRotatingFileHandler)):
            handler.close()
    root_logger.addHandler(rich_handler)
    root_logger.addHandler(file_handler)

    # Request lines are logged by our own middleware at debug level
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.info(
        f"[bold green]Logging initialized[/] - "
        f"File: [cyan]{settings.log_file_path}[/], "
        f"Level: [yellow]{settings.log_level}[/], "
        f"Retention: [blue]{settings.log_retention_days}[/] days"
    )
