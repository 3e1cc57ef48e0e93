"""
Markdown event source

Drives markdown-it-py and flattens its token stream into the renderer's
event union (models.events).

markdown-it-py produces a two-level token list: block tokens at the top,
with each ``inline`` token carrying its own list of children. This module
walks both levels in document order and yields one event per structural
step, so the renderer only ever sees a flat, well-nested sequence.

Parser configuration:
- CommonMark preset
- strikethrough (``~~text~~``) enabled
- GFM tables disabled; task lists are not part of the core rule set

Example:
    >>> list(events_fromMarkdown("~~gone~~"))[:3]
    [StartTag(tag=Tag(kind=<TagKind.PARAGRAPH: 'paragraph'>, title='', level=0, ordered=False)),
     StartTag(tag=Tag(kind=<TagKind.STRIKETHROUGH: 'strikethrough'>, title='', level=0, ordered=False)),
     Text(content='gone')]
"""

from typing import Dict, Iterator, List, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token

from ..models.events import (
    Tag,
    TagKind,
    Event,
    StartTag,
    EndTag,
    Text,
    CodeSpan,
    SoftBreak,
    Other,
)

# Token type without its _open/_close suffix -> span kind
SPAN_KINDS: Dict[str, TagKind] = {
    "paragraph": TagKind.PARAGRAPH,
    "heading": TagKind.HEADING,
    "bullet_list": TagKind.LIST,
    "ordered_list": TagKind.LIST,
    "list_item": TagKind.ITEM,
    "blockquote": TagKind.BLOCK_QUOTE,
    "table": TagKind.TABLE,
    "thead": TagKind.TABLE_HEAD,
    "tbody": TagKind.TABLE_BODY,
    "tr": TagKind.TABLE_ROW,
    "th": TagKind.TABLE_CELL,
    "td": TagKind.TABLE_CELL,
    "em": TagKind.EMPHASIS,
    "strong": TagKind.STRONG,
    "s": TagKind.STRIKETHROUGH,
    "link": TagKind.LINK,
}

CODE_BLOCK_TYPES = ("fence", "code_block")


def markdownParser_make() -> MarkdownIt:
    """
    Build a markdown-it parser with the supported extension set

    Returns:
        CommonMark parser with strikethrough enabled and tables disabled
    """
    return MarkdownIt("commonmark").enable("strikethrough").disable("table")


def tokenType_split(token_type: str) -> str:
    """
    Strip the _open/_close suffix from a token type

    Example:
        >>> tokenType_split("bullet_list_open")
        'bullet_list'
    """
    for suffix in ("_open", "_close"):
        if token_type.endswith(suffix):
            return token_type[: -len(suffix)]
    return token_type


def tag_fromToken(token: Token, kind: TagKind) -> Tag:
    """Build the Tag for an opening token, copying the attributes we keep"""
    if kind is TagKind.LINK:
        return Tag.link(str(token.attrGet("title") or ""))
    if kind is TagKind.HEADING:
        return Tag(kind, level=int(token.tag[1:]))
    if token.type == "ordered_list_open":
        return Tag(kind, ordered=True)
    return Tag(kind)


class EventStream:
    """
    Single-use translator from markdown-it tokens to events

    Keeps its own stack of opened tags so that every EndTag carries the
    exact Tag its StartTag did (a link's title is only on link_open).
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tokens
        self.opened: List[Tag] = []

    def __iter__(self) -> Iterator[Event]:
        return self.tokens_walk(self.tokens)

    def tokens_walk(self, tokens: Sequence[Token]) -> Iterator[Event]:
        for token in tokens:
            yield from self.token_translate(token)

    def token_translate(self, token: Token) -> Iterator[Event]:
        if token.type == "inline":
            yield from self.tokens_walk(token.children or [])
        elif token.nesting != 0:
            yield from self.span_translate(token)
        elif token.type in CODE_BLOCK_TYPES:
            tag = Tag(TagKind.CODE_BLOCK)
            yield StartTag(tag)
            yield Text(token.content)
            yield EndTag(tag)
        elif token.type == "image":
            tag = Tag.image(str(token.attrGet("title") or ""))
            yield StartTag(tag)
            yield from self.tokens_walk(token.children or [])
            yield EndTag(tag)
        elif token.type == "text":
            yield Text(token.content)
        elif token.type == "code_inline":
            yield CodeSpan(token.content)
        elif token.type == "softbreak":
            yield SoftBreak()
        else:
            yield Other(token.type)

    def span_translate(self, token: Token) -> Iterator[Event]:
        # Tight list paragraphs are hidden: the list item holds the text directly
        if token.hidden:
            return
        kind = SPAN_KINDS.get(tokenType_split(token.type))
        if kind is None:
            yield Other(token.type)
        elif token.nesting > 0:
            tag = tag_fromToken(token, kind)
            self.opened.append(tag)
            yield StartTag(tag)
        else:
            tag = self.opened.pop() if self.opened else Tag(kind)
            yield EndTag(tag)


def events_fromMarkdown(markdown: str) -> Iterator[Event]:
    """
    Parse Markdown and return its event stream

    Args:
        markdown: Markdown source text

    Returns:
        Single-use iterator of events in document order
    """
    tokens = markdownParser_make().parse(markdown)
    return iter(EventStream(tokens))
