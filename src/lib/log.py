"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the verbosity of the
object connected to the current context (a ProgramState from the CLI, or a
Processor when the library is used directly) without passing it around.

Usage:
    from lib.log import LOG, state_connectToLogger

    # At start of pipeline function:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("Read 1024 characters", level=1)
    LOG("Applied 3 directives", level=2)
    LOG("(hex) at token 7 -> scope 1", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold the object whose verbosity gates LOG()
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
    Connect a verbosity-carrying object to the logging context.

    Call this at the start of a pipeline (CLI main, or Processor.process)
    so that LOG() calls further down honour its verbosity.

    Args:
        state: Any object with an integer ``verbosity`` attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru metadata

    Level 1 messages are emitted as INFO, deeper levels as DEBUG. The
    caller's function and line are reported, not LOG's own.
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        emit = logger.opt(depth=1)
        if level <= 1:
            emit.info(message, **kwargs)
        else:
            emit.debug(message, **kwargs)
