"""
mdstrip - Markdown to plain text

Strips Markdown formatting for previews, notifications and search indexing,
keeping paragraph breaks and list bullets.
"""

__version__ = "1.0.0"

from .lib import Renderer, render, strip_markdown, events_fromMarkdown, LOG, state_connectToLogger

__all__ = [
    "Renderer",
    "render",
    "strip_markdown",
    "events_fromMarkdown",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
