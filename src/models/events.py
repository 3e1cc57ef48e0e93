"""
Event and tag models for the plain-text renderer

Defines the closed set of structural tag kinds and the event union that
the renderer consumes. The event source (a Markdown tokenizer adapter)
produces these; the renderer never sees raw tokenizer output.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Union


class TagKind(Enum):
    """
    Structural kinds of a span

    Only some kinds carry a rendering rule (see models.rules). The rest are
    transparent: their inner events render as if the span were absent.
    """
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    LIST = "list"
    ITEM = "item"
    LINK = "link"
    IMAGE = "image"
    CODE_BLOCK = "code_block"
    TABLE = "table"
    TABLE_HEAD = "table_head"
    TABLE_BODY = "table_body"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    STRIKETHROUGH = "strikethrough"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    BLOCK_QUOTE = "block_quote"


@dataclass(frozen=True)
class Tag:
    """
    A structural span kind plus its attributes

    Attributes:
        kind: TagKind of the span
        title: Title attribute for LINK and IMAGE spans (empty when absent)
        level: Heading level for HEADING (0 otherwise)
        ordered: True for a numbered LIST

    Example:
        >>> Tag.link("Home page")
        Tag(kind=<TagKind.LINK: 'link'>, title='Home page', level=0, ordered=False)
    """
    kind: TagKind
    title: str = ""
    level: int = 0
    ordered: bool = False

    @classmethod
    def link(cls, title: str = "") -> "Tag":
        return cls(TagKind.LINK, title=title)

    @classmethod
    def image(cls, title: str = "") -> "Tag":
        return cls(TagKind.IMAGE, title=title)

    @property
    def strikethrough_is(self) -> bool:
        return self.kind is TagKind.STRIKETHROUGH


@dataclass(frozen=True)
class StartTag:
    """Entering a span"""
    tag: Tag


@dataclass(frozen=True)
class EndTag:
    """Leaving a span (carries the tag that opened it)"""
    tag: Tag


@dataclass(frozen=True)
class Text:
    """Literal text run"""
    content: str


@dataclass(frozen=True)
class CodeSpan:
    """Inline code run, never suppressed"""
    content: str


@dataclass(frozen=True)
class SoftBreak:
    """Line wrap inside flowing text"""


@dataclass(frozen=True)
class Other:
    """
    Catch-all for events the renderer ignores

    Attributes:
        kind: Originating token type (hardbreak, html_inline, hr, ...),
              kept for diagnostics only
    """
    kind: str = ""


Event = Union[StartTag, EndTag, Text, CodeSpan, SoftBreak, Other]
