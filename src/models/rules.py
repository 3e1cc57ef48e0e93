"""
Per-tag rendering rules

Declarative table describing what the renderer appends when it enters
and leaves each kind of span. Kinds with no entry are transparent.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .events import Tag, TagKind

BLANK_LINE = "\n\n"
LINE_END = "\n"


@dataclass(frozen=True)
class TagRule:
    """
    Rendering rule for one tag kind

    Attributes:
        kind: TagKind this rule applies to
        on_end: Text appended when the span closes
        title_emit: Append the tag's title attribute when the span opens
        bullet_emit: Append the bullet marker and a space when the span opens
    """
    kind: TagKind
    on_end: str = ""
    title_emit: bool = False
    bullet_emit: bool = False

    def start_text(self, tag: Tag, bullet: str) -> str:
        """
        Text appended when entering a span of this kind

        Args:
            tag: The tag being opened (provides the title)
            bullet: Bullet marker for list items

        Returns:
            String to append (possibly empty)
        """
        if self.title_emit:
            return tag.title
        if self.bullet_emit:
            return f"{bullet} "
        return ""


TAG_RULES: Dict[TagKind, TagRule] = {
    rule.kind: rule
    for rule in (
        TagRule(TagKind.LINK, title_emit=True),
        TagRule(TagKind.IMAGE, title_emit=True),
        TagRule(TagKind.ITEM, on_end=LINE_END, bullet_emit=True),
        TagRule(TagKind.PARAGRAPH, on_end=BLANK_LINE),
        TagRule(TagKind.TABLE, on_end=BLANK_LINE),
        TagRule(TagKind.HEADING, on_end=BLANK_LINE),
        TagRule(TagKind.LIST, on_end=BLANK_LINE),
        TagRule(TagKind.CODE_BLOCK, on_end=LINE_END),
        TagRule(TagKind.TABLE_HEAD, on_end=LINE_END),
        TagRule(TagKind.TABLE_ROW, on_end=LINE_END),
    )
}


def rule_get(kind: TagKind) -> Optional[TagRule]:
    """Look up the rule for a tag kind (None when the kind is transparent)"""
    return TAG_RULES.get(kind)
