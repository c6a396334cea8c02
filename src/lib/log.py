"""
Verbosity-gated logging for the formatter and its command line

LOG() checks the verbosity of the ProgramState bound to the current
context and forwards the message to loguru. The text stages log freely;
when they run as a library (no state bound) every message is dropped, so
formatting a sample never writes to stderr unless the CLI asked for it.

Each verbosity level is logged at its own loguru severity:

    1  INFO   progress of the run (files, totals)
    2  DEBUG  per-document and per-file detail
    3  TRACE  per-sample stage trace

Usage:
    from codemarkup.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)
    LOG("Formatting code samples...", level=1)
    LOG("Wrapping 12 code lines", level=3)
"""

from loguru import logger
from typing import Any, Dict, Optional
from contextvars import ContextVar
import sys

# ProgramState bound by the CLI, None when used as a library
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

LOG_LEVELS: Dict[int, str] = {
    1: "INFO",
    2: "DEBUG",
    3: "TRACE",
}

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <12}</cyan> "
    "<cyan>{function: <20}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="TRACE")


def state_connectToLogger(state: Any) -> None:
    """
    Bind a ProgramState to the current context.

    Args:
        state: Object with a verbosity attribute (normally ProgramState)
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the bound state's verbosity reaches level.

    Args:
        message: Log message to display
        level: Minimum verbosity (1=progress, 2=detail, 3=stage trace)
        **kwargs: Additional loguru metadata
    """
    state = _program_state.get()
    if state is None or getattr(state, 'verbosity', 0) < level:
        return

    severity = LOG_LEVELS.get(min(level, 3), "INFO")
    # attribute the record to the caller
    logger.opt(depth=1).log(severity, message, **kwargs)
