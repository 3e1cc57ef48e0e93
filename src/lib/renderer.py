"""
Plain-text renderer

Consumes a stream of structural events and emits plain text, stripping
all formatting while keeping paragraph breaks and list bullets.

The render pass is a strict single left-to-right walk:
1. Start/end events apply the per-tag rules (models.rules) and update
   the tag context stack
2. Text is appended unless a strikethrough span is open
3. Code spans are appended unconditionally
4. Soft breaks collapse to one space
5. The accumulated text is trimmed once the stream is exhausted

Example:
    >>> strip_markdown("* alpha\\n* beta\\n")
    '• alpha\\n• beta'
"""

from typing import Iterable, List, Optional

from ..config import appsettings
from ..models.events import Event, StartTag, EndTag, Text, CodeSpan, SoftBreak, Tag
from ..models.rules import rule_get
from .log import LOG, event_trace
from .source import events_fromMarkdown
from .stack import TagStack


class Renderer:
    """
    Single-use plain-text renderer

    Owns the tag context stack and the output buffer for one render pass.
    Each render() call starts from an empty stack and buffer, so an
    instance can be reused across documents.

    Attributes:
        bullet: Marker written before each list item
        stack: Open tags, innermost last
        buffer: Output fragments accumulated so far
    """

    def __init__(self, bullet: Optional[str] = None) -> None:
        """
        Initialize renderer

        Args:
            bullet: Bullet marker for list items (defaults to the configured
                    bullet_marker setting)
        """
        self.bullet = bullet if bullet is not None else appsettings.bullet_marker
        self.stack = TagStack()
        self.buffer: List[str] = []

    def render(self, events: Iterable[Event]) -> str:
        """
        Render an event stream to plain text

        Args:
            events: Events in document order (consumed once)

        Returns:
            Plain text with leading/trailing whitespace removed
        """
        self.stack = TagStack()
        self.buffer = []
        for event in events:
            event_trace(event)
            self.event_handle(event)
        return self.buffer_finalize()

    def event_handle(self, event: Event) -> None:
        if isinstance(event, StartTag):
            self.tag_start(event.tag)
            self.stack.push(event.tag)
        elif isinstance(event, EndTag):
            self.tag_end(event.tag)
            if self.stack.pop() is None:
                LOG(f"Unmatched end tag ignored: {event.tag.kind.value}", level=2)
        elif isinstance(event, Text):
            if not self.stack.strikethrough_contains():
                self.buffer.append(event.content)
        elif isinstance(event, CodeSpan):
            self.buffer.append(event.content)
        elif isinstance(event, SoftBreak):
            self.buffer.append(" ")
        # Other: nothing to emit

    def tag_start(self, tag: Tag) -> None:
        rule = rule_get(tag.kind)
        if rule:
            self.buffer.append(rule.start_text(tag, self.bullet))

    def tag_end(self, tag: Tag) -> None:
        rule = rule_get(tag.kind)
        if rule:
            self.buffer.append(rule.on_end)

    def buffer_finalize(self) -> str:
        """Join the buffer and trim surrounding whitespace"""
        return "".join(self.buffer).strip()


def render(events: Iterable[Event], bullet: Optional[str] = None) -> str:
    """Render an event stream with a fresh Renderer"""
    return Renderer(bullet=bullet).render(events)


def strip_markdown(markdown: str, bullet: Optional[str] = None) -> str:
    """
    Convert Markdown source to plain text

    Args:
        markdown: Markdown source text
        bullet: Optional bullet marker override for list items

    Returns:
        Plain text; empty string for empty or whitespace-only input

    Example:
        >>> strip_markdown("This was ~~erased~~ deleted.")
        'This was  deleted.'
    """
    return render(events_fromMarkdown(markdown), bullet=bullet)
