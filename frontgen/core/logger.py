"""Unified logging for frontgen with console and optional file output."""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console()

ROOT_LOGGER_NAME = "frontgen"

# Track if file logging has been set up
_file_logging_configured = False


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Set up logging for a generator run.

    Args:
        log_file: Path to an additional log file (console only when omitted)
        verbose: Enable debug-level logging

    Note:
        Creates the log file's parent directory if it doesn't exist.
    """
    global _file_logging_configured

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.INFO
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)

    if _file_logging_configured or not log_file:
        return

    target_log_file = Path(log_file)
    target_log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(target_log_file)
    file_handler.setLevel(level)

    # Detailed format for file logs
    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    _file_logging_configured = True

    root_logger.info(f"frontgen logging initialized: {target_log_file}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger that reports through the shared Rich console.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger whose records propagate to the ``frontgen`` root logger

    Note:
        File logging must be enabled separately via setup_file_logging()
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Only add console handler if not already present
    if not any(isinstance(h, RichHandler) for h in root_logger.handlers):
        handler = RichHandler(console=console, show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.INFO)

    return logging.getLogger(name)
