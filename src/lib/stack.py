"""
Tag context stack

Tracks the spans currently open during a render pass, innermost last.
"""

from typing import List, Optional

from ..models.events import Tag


class TagStack:
    """
    Ordered stack of open tags

    Mirrors the nesting implied by the start/end events seen so far. An
    unmatched end tag must not abort a render, so popping an empty stack
    is a no-op.

    Example:
        >>> stack = TagStack()
        >>> stack.push(Tag(TagKind.STRIKETHROUGH))
        >>> stack.push(Tag(TagKind.EMPHASIS))
        >>> stack.strikethrough_contains()
        True
    """

    def __init__(self) -> None:
        self.tags: List[Tag] = []

    def __len__(self) -> int:
        return len(self.tags)

    @property
    def top(self) -> Optional[Tag]:
        """Innermost open tag, or None when nothing is open"""
        return self.tags[-1] if self.tags else None

    def push(self, tag: Tag) -> None:
        self.tags.append(tag)

    def pop(self) -> Optional[Tag]:
        """
        Remove and return the innermost tag

        Returns:
            The removed tag, or None if the stack was empty
        """
        if not self.tags:
            return None
        return self.tags.pop()

    def strikethrough_contains(self) -> bool:
        """
        Check whether any open span is struck through

        Scans the whole stack: struck text can sit under other spans
        (emphasis inside strikethrough inside a list item, and so on).
        """
        return any(tag.strikethrough_is for tag in self.tags)
