"""
Models package for mdstrip

Contains data structures and type definitions for the render pass and
the CLI pipeline.
"""

from .state import ProgramState, pipeline
from .events import TagKind, Tag, Event, StartTag, EndTag, Text, CodeSpan, SoftBreak, Other
from .rules import TagRule, TAG_RULES, rule_get

__all__ = [
    "ProgramState",
    "pipeline",
    "TagKind",
    "Tag",
    "Event",
    "StartTag",
    "EndTag",
    "Text",
    "CodeSpan",
    "SoftBreak",
    "Other",
    "TagRule",
    "TAG_RULES",
    "rule_get",
]
