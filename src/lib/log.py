"""
Centralized logging using Loguru with context-aware verbosity.

LOG() respects the verbosity of the ProgramState connected to the current
context, so parser and renderer code can trace without being handed state.
Outside a pipeline (library use, tests) no state is connected and LOG() is
silent.

Usage:
    from stylemark.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)

    LOG("Shown at verbosity >= 1", level=1)
    LOG("Shown at verbosity >= 2 (-v)", level=2)
    LOG("Parser trace at verbosity >= 3 (-vv)", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: Object with a ``verbosity`` attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the connected state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru arguments
    """
    state = _program_state.get()

    if state is not None and getattr(state, 'verbosity', 0) >= level:
        logger.opt(depth=1).debug(message, **kwargs)
