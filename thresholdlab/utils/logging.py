# thresholdlab/utils/logging.py
from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union


PathLike = Union[str, Path]

ROOT_LOGGER_NAME = "thresholdlab"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a named logger. Use configure_logging() once at program start.

    Module names ("thresholdlab.session") land under the package logger, so
    one configure_logging() call covers the whole package.
    """
    return logging.getLogger(name)


def configure_logging(
    name: str = ROOT_LOGGER_NAME,
    level: int = logging.INFO,
    log_file: Optional[PathLike] = None,
    overwrite: bool = True,
) -> logging.Logger:
    """
    Configure logging to console and optionally a file.

    Args:
        name: logger name
        level: logging.INFO / DEBUG / etc.
        log_file: optional path to write logs
        overwrite: if True, truncates the log file; else appends

    Returns:
        configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False  # prevent duplicate logs when root logger is configured elsewhere

    # Clear existing handlers (repeated calls in notebooks)
    if logger.handlers:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    ch = logging.StreamHandler(stream=sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        mode = "w" if overwrite else "a"
        fh = logging.FileHandler(log_path, mode=mode, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


def log_run_header(
    logger: logging.Logger,
    title: str,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Log a standardized header: platform, interpreter and library versions.
    """
    import numpy as np
    import pandas as pd

    logger.info("=" * 80)
    logger.info(title)
    logger.info(f"Platform: {platform.platform()}")
    logger.info(f"Python:   {sys.version.split()[0]}")
    logger.info(f"NumPy:    {np.__version__}")
    logger.info(f"pandas:   {pd.__version__}")

    if extra:
        for k, v in extra.items():
            logger.info(f"{k}: {v}")
    logger.info("=" * 80)
