"""
Event source tests - markdown-it token stream to events

Checks the structural shape of the event stream produced for common
Markdown constructs and the enabled/disabled extension set.
"""

from mdstrip.lib.source import events_fromMarkdown, markdownParser_make, tokenType_split
from mdstrip.models.events import (
    Tag,
    TagKind,
    StartTag,
    EndTag,
    Text,
    CodeSpan,
    SoftBreak,
    Other,
)


def events_of(markdown):
    return list(events_fromMarkdown(markdown))


def started_kinds(events):
    return [event.tag.kind for event in events if isinstance(event, StartTag)]


class TestParserConfiguration:
    """Test the enabled extension set"""

    def test_strikethrough_enabled(self):
        """~~text~~ produces a strikethrough span"""
        assert TagKind.STRIKETHROUGH in started_kinds(events_of("~~gone~~"))

    def test_tables_disabled(self):
        """Pipe table syntax produces no table spans"""
        kinds = started_kinds(events_of("| a | b |\n|---|---|\n| 1 | 2 |\n"))
        assert TagKind.TABLE not in kinds
        assert TagKind.TABLE_ROW not in kinds
        assert kinds == [TagKind.PARAGRAPH]

    def test_fresh_parser_each_call(self):
        """Parser factory returns independent instances"""
        assert markdownParser_make() is not markdownParser_make()

    def test_token_type_split(self):
        assert tokenType_split("bullet_list_open") == "bullet_list"
        assert tokenType_split("s_close") == "s"
        assert tokenType_split("fence") == "fence"


class TestBlockEvents:
    """Test block-level spans"""

    def test_paragraph(self):
        events = events_of("Hello")
        assert events == [
            StartTag(Tag(TagKind.PARAGRAPH)),
            Text("Hello"),
            EndTag(Tag(TagKind.PARAGRAPH)),
        ]

    def test_heading_level(self):
        """Heading tag records its level"""
        events = events_of("## Section")
        assert events[0] == StartTag(Tag(TagKind.HEADING, level=2))
        assert events[-1] == EndTag(Tag(TagKind.HEADING, level=2))

    def test_tight_list_has_no_paragraphs(self):
        """Tight list items contain their text directly"""
        kinds = started_kinds(events_of("* alpha\n* beta\n"))
        assert kinds == [TagKind.LIST, TagKind.ITEM, TagKind.ITEM]

    def test_loose_list_has_paragraphs(self):
        """Loose list items wrap their text in paragraphs"""
        kinds = started_kinds(events_of("* alpha\n\n* beta\n"))
        assert kinds.count(TagKind.PARAGRAPH) == 2

    def test_ordered_list_flag(self):
        events = events_of("1. one\n2. two\n")
        assert events[0] == StartTag(Tag(TagKind.LIST, ordered=True))

    def test_bullet_list_not_ordered(self):
        """Bullet lists are unordered and carry no level"""
        events = events_of("* one\n")
        assert events[0] == StartTag(Tag(TagKind.LIST))
        assert events[0].tag.level == 0

    def test_fenced_code_block(self):
        """Fence expands to start, verbatim text, end"""
        events = events_of("```python\na = 1\n```\n")
        assert events == [
            StartTag(Tag(TagKind.CODE_BLOCK)),
            Text("a = 1\n"),
            EndTag(Tag(TagKind.CODE_BLOCK)),
        ]

    def test_indented_code_block(self):
        events = events_of("    indented\n")
        assert events[1] == Text("indented\n")

    def test_thematic_break_is_other(self):
        assert events_of("---") == [Other("hr")]


class TestInlineEvents:
    """Test inline content inside paragraphs"""

    def test_soft_break(self):
        events = events_of("one\ntwo")
        assert SoftBreak() in events

    def test_hard_break_is_other(self):
        events = events_of("one  \ntwo")
        assert Other("hardbreak") in events

    def test_code_span(self):
        events = events_of("use `x = 1` here")
        assert CodeSpan("x = 1") in events

    def test_emphasis_spans(self):
        kinds = started_kinds(events_of("**bold _both_**"))
        assert kinds == [TagKind.PARAGRAPH, TagKind.STRONG, TagKind.EMPHASIS]

    def test_html_inline_is_other(self):
        events = events_of("a <b>c</b>")
        assert Other("html_inline") in events


class TestLinksAndImages:
    """Test title capture for links and images"""

    def test_link_without_title(self):
        events = events_of("[text](https://example.com)")
        assert StartTag(Tag.link("")) in events

    def test_link_title_on_both_ends(self):
        """End tag carries the same tag, title included"""
        events = events_of('[text](https://example.com "The Title")')
        assert StartTag(Tag.link("The Title")) in events
        assert EndTag(Tag.link("The Title")) in events

    def test_image_alt_text(self):
        """Image expands to start, alt text, end"""
        events = events_of('![alt words](pic.png "Pic")')
        start = events.index(StartTag(Tag.image("Pic")))
        assert events[start + 1] == Text("alt words")
        assert events[start + 2] == EndTag(Tag.image("Pic"))


class TestStreamShape:
    """Test nesting of the whole stream"""

    def test_balanced_nesting(self):
        """Every end tag matches the innermost open start tag"""
        source = "# T\n\n> quote *em ~~s `c`~~*\n\n1. a\n   * b [l](u)\n"
        open_tags = []
        for event in events_fromMarkdown(source):
            if isinstance(event, StartTag):
                open_tags.append(event.tag)
            elif isinstance(event, EndTag):
                assert open_tags.pop() == event.tag
        assert open_tags == []

    def test_empty_source(self):
        assert events_of("") == []
