"""
src/fpe_core/logger.py
Configuración de Logging de fpe_core.
"""

import logging
import os
import sys

from . import config

__all__ = ["logger", "setup_logger", "get_logger", "resolve_level"]


def resolve_level(level: str | None) -> int:
    """
    Traduce un nombre de nivel (DEBUG, INFO, ...) a su constante numérica.
    LOG_LEVEL lo comparten otras herramientas: valores desconocidos
    (TRACE, verbose, 10) caen al nivel por defecto en lugar de fallar.
    """
    resolved = logging.getLevelName(str(level or config.DEFAULT_LOG_LEVEL).upper())
    if not isinstance(resolved, int):
        return logging.getLevelName(config.DEFAULT_LOG_LEVEL)
    return resolved


def setup_logger(
    name: str = config.LOGGER_NAME,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configura y retorna un logger.

    Args:
        name: Nombre del logger (normalmente el del paquete)
        level: Nivel (DEBUG, INFO, WARNING, ERROR, CRITICAL). Si falta, se lee LOG_LEVEL.
        format_string: Formato alternativo

    Returns:
        Logger configurado
    """
    level = level or os.getenv(config.LOG_LEVEL_ENV, config.DEFAULT_LOG_LEVEL)
    format_string = format_string or config.LOG_FORMAT

    logger = logging.getLogger(name)

    # Solo se configura la primera vez
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt=config.LOG_DATE_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(resolve_level(level))
        logger.propagate = False

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Logger hijo del logger del paquete, p.ej. fpe_core.ds.list."""
    if module_name == config.LOGGER_NAME:
        return logger
    prefix = config.LOGGER_NAME + "."
    if module_name.startswith(prefix):
        module_name = module_name[len(prefix):]
    return logger.getChild(module_name)


# Instancia por defecto del paquete
logger = setup_logger()
