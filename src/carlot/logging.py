"""Logging configuration for carlot."""

import logging
from pathlib import Path
from typing import Optional

import platformdirs
from rich.console import Console
from rich.logging import RichHandler

LOG_FILENAME = "carlot.log"


def default_log_dir() -> Path:
    return Path(platformdirs.user_log_dir("carlot"))


def setup_logging(verbose: bool = False, log_dir: Optional[Path] = None) -> Optional[Path]:
    """Send carlot log records to a file, and to stderr when verbose.

    The file gets everything from DEBUG up, so skipped inventory lines and
    failed writes can be traced after a session. With ``verbose`` the INFO
    records are also rendered on stderr through rich, away from the tables
    and panels on stdout.

    Returns:
        Path of the log file, or None if it could not be opened
    """
    logger = logging.getLogger("carlot")
    logger.setLevel(logging.DEBUG)

    if verbose and not any(isinstance(h, RichHandler) for h in logger.handlers):
        stderr_handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
        )
        stderr_handler.setLevel(logging.INFO)
        logger.addHandler(stderr_handler)

    existing = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    if existing:
        return Path(existing[0].baseFilename)

    log_file = Path(log_dir or default_log_dir()) / LOG_FILENAME
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        return None

    fh.setLevel(logging.DEBUG)
    fh.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(fh)

    logger.debug("Logging to %s", log_file)
    return log_file
