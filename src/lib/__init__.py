"""
mdstrip - Markdown to plain text

Single-pass renderer over a Markdown event stream.
"""

__version__ = "1.0.0"

from .renderer import Renderer, render, strip_markdown
from .source import events_fromMarkdown
from .stack import TagStack
from .log import LOG, state_connectToLogger

__all__ = [
    "Renderer",
    "render",
    "strip_markdown",
    "events_fromMarkdown",
    "TagStack",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
