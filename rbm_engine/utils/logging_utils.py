"""Logger configuration for training runs."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional, Union


def setup_logger(
    name: str = "rbm_engine",
    log_dir: Optional[str] = "logs",
    filename: str = "train.log",
    level: Union[int, str] = logging.DEBUG,
) -> logging.Logger:
    """Attach a console handler and a rotating file handler to ``name``.

    Console output is limited to INFO and above; the file receives ``level``.
    Calling it again for the same logger does not add handlers twice. Pass
    ``log_dir=None`` to log to the console only.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    if logger.handlers:
        return logger

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        fh = RotatingFileHandler(os.path.join(log_dir, filename), maxBytes=5_000_000, backupCount=3)
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return logger
