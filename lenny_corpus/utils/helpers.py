import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from loguru import logger

from lenny_corpus.utils.config import ConfigProto


def init_logging(config: ConfigProto) -> None:
    """Initialize loguru logger."""
    logger.remove()

    if config.mode == "local":
        logger.add(
            sys.stdout,
            format="{time:HH:mm:ss} <level>{level: <8}</level> [lenny-corpus] {message}",
            level=config.log_level,
            colorize=True,
        )
    else:
        logger.add(
            sys.stdout,
            format="[lenny-corpus] - {level: <8} - {message}",
            level=config.log_level,
            colorize=False,
        )


def count_subdirectories(folder: Path) -> int:
    """Count the immediate subdirectories of a folder."""
    return sum(1 for entry in folder.iterdir() if entry.is_dir())


def run_main_safely(func: Callable[..., None], *args: Any, **kwargs: Any) -> None:
    """Run a function safely, logging any exceptions and providing a graceful exit."""
    try:
        func(*args, **kwargs)
    except Exception:
        logger.exception("Exiting due to exception.")
        raise
    else:
        logger.info("Exiting without exception.")
