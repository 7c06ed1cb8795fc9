from __future__ import annotations
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Логер пакета 'cp3d': stderr (stdout зайнятий звітом) + необов'язковий файл.
    Повторний виклик замінює хендлери, а не додає нові.
    """
    logger = logging.getLogger("cp3d")
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    fmt = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(fmt)
        logger.addHandler(h)

    logger.debug("logging: level=%s, file=%s", logging.getLevelName(level), log_file)
    return logger
