"""
Configuration du logging de l'API.

A appeler une seule fois au démarrage (main.py), avant le premier logger.info.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "taskmind"

_FORMAT = logging.Formatter(
    fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Évite les handlers en double si l'app est importée plusieurs fois (tests, reload)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(_FORMAT)
    logger.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(path), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_FORMAT)
        logger.addHandler(file_handler)

    # warnings.warn(...) -> logging 'py.warnings'
    logging.captureWarnings(True)
    return logger
