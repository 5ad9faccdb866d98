'''
configuración de logging del paquete (NullHandler por defecto)
'''

from __future__ import annotations
import logging
import sys
from typing import Any, Literal

ARCHNS_LOGGER_NAME = "archns"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    stream: Any = None,
    force: bool = False,
) -> logging.Logger:
    """Activa la salida de logs de archns hacia `stream` (sys.stderr por defecto).

    Como biblioteca, archns no emite nada hasta que se llama a esta función.
    Con force=True se eliminan antes los manejadores existentes.
    """
    logger = logging.getLogger(ARCHNS_LOGGER_NAME)
    if force:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger

logging.getLogger(ARCHNS_LOGGER_NAME).addHandler(logging.NullHandler())
