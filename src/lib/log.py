"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the current ProgramState's
verbosity level without requiring explicit state passing. When no state is
connected (library use of strip_markdown), LOG() is silent, so rendering
output never depends on logging.

Usage:
    from lib.log import LOG, state_connectToLogger

    # At start of pipeline:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("This message appears if verbosity >= 1", level=1)
    LOG("Debug details appear if verbosity >= 2", level=2)
    LOG("Per-event trace appears if verbosity >= 3", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

from ..config import appsettings

# Context variable to hold current ProgramState
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

TRACE_LEVEL = 3


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Makes the state's verbosity setting available to LOG() calls made
    anywhere in the current context, including inside the renderer.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def verbosity_allows(level: int) -> bool:
    """Check whether the connected state's verbosity reaches a level"""
    state = _program_state.get()
    return bool(state and hasattr(state, 'verbosity') and state.verbosity >= level)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=trace)
        **kwargs: Additional loguru metadata

    Example:
        LOG("Read 512 characters", level=2)
        LOG("StartTag(tag=Tag(kind=<TagKind.ITEM ...>))", level=3)
    """
    if verbosity_allows(level):
        logger.opt(depth=1).debug(message, **kwargs)


def event_trace(event: Any) -> None:
    """
    Report one consumed event on the diagnostic channel.

    Write-only: nothing here feeds back into rendering. Skips building the
    event repr entirely unless tracing is on.
    """
    if appsettings.trace_events and verbosity_allows(TRACE_LEVEL):
        logger.opt(depth=1).debug(repr(event))
