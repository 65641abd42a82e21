"""Logging setup for hosts that want to see what the parser does."""
import os

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

from .utils import Unset, coalesce

_SINK = None


def configure_logging(level=Unset, /):
    """
    Enable argscan's logger and route it to a rich handler on stderr.

    The package logger is disabled on import. Calling this again replaces the
    sink installed by the previous call.

    Parameters
    - level: str | int | Unset
      Unset reads ARGSCAN_LOG_LEVEL, falling back to "INFO". Registrations log
      at DEBUG and each emitted entry at TRACE.

    Returns
    - int: the loguru handler id.
    """
    global _SINK

    level = coalesce(level, os.getenv("ARGSCAN_LOG_LEVEL", "INFO"))
    if isinstance(level, str):
        level = level.upper()

    if _SINK is not None:
        logger.remove(_SINK)

    _SINK = logger.add(
        RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
            rich_tracebacks=False,
        ),
        level=level,
        format="{message}",
        filter="argscan",
        backtrace=False,
        diagnose=False,
    )
    logger.enable("argscan")
    return _SINK


__all__ = (
    "configure_logging",
)
