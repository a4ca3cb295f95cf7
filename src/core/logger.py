"""Configuración de logging (loguru).

Por qué loguru:
- Los adaptadores solo llaman a `logger.debug(...)`; no añaden sinks.
- Quien ejecuta (CLI) decide nivel y destino con `configure_logging`.

El logging estándar (httpx/httpcore) se redirige a loguru con
`InterceptHandler` para tener un único formato en stderr.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Saltar frames del propio módulo logging.
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str = "WARNING") -> None:
    """Reemplaza el sink por defecto de loguru por uno en stderr con `level`."""

    level = level.strip().upper()

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    # httpcore es muy verboso incluso en DEBUG.
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.remove()
    logger.add(sys.stderr, level=level, colorize=True, format=_FORMAT)
