import types

from docdigest.markdown import (
    Blockquote,
    Bold,
    Code,
    FencedCode,
    Heading,
    HorizontalRule,
    Italic,
    ListBlock,
    Paragraph,
    PlainText,
    Spacer,
    Strikethrough,
    parse_inline,
    render,
)


def test_bold_and_italic_paragraph():
    blocks = list(render("**bold** and *italic*"))

    assert blocks == [
        Paragraph(spans=(Bold("bold"), PlainText(" and "), Italic("italic"))),
    ]


def test_lists_do_not_merge_across_type_or_blank_line():
    blocks = list(render("1. a\n2. b\n\n- x"))

    assert blocks == [
        ListBlock(ordered=True, items=((PlainText("a"),), (PlainText("b"),))),
        Spacer(),
        ListBlock(ordered=False, items=((PlainText("x"),),)),
    ]


def test_adjacent_lists_of_different_type_split():
    blocks = list(render("- x\n- y\n1. z"))

    assert [type(block) for block in blocks] == [ListBlock, ListBlock]
    assert blocks[0].ordered is False
    assert len(blocks[0].items) == 2
    assert blocks[1].ordered is True


def test_all_unordered_markers_share_one_list():
    (block,) = render("* one\n- two\n+ three")
    assert [item[0].text for item in block.items] == ["one", "two", "three"]


def test_headings_levels():
    blocks = list(render("# One\n## Two\n### Three"))

    assert blocks == [
        Heading(level=1, spans=(PlainText("One"),)),
        Heading(level=2, spans=(PlainText("Two"),)),
        Heading(level=3, spans=(PlainText("Three"),)),
    ]


def test_heading_with_inline_markup():
    (block,) = render("## Key **findings**")
    assert block.spans == (PlainText("Key "), Bold("findings"))


def test_four_hashes_is_a_paragraph():
    assert list(render("#### Deep")) == [Paragraph(spans=(PlainText("#### Deep"),))]


def test_fenced_code_kept_verbatim():
    content = "```python\nx = **1**\n\n  y = 2\n```\nafter"

    blocks = list(render(content))

    assert blocks == [
        FencedCode(language="python", lines=("x = **1**", "", "  y = 2")),
        Paragraph(spans=(PlainText("after"),)),
    ]
    assert blocks[0].code == "x = **1**\n\n  y = 2"


def test_unclosed_fence_runs_to_end():
    assert list(render("```\ncode line")) == [FencedCode(language="", lines=("code line",))]


def test_horizontal_rules():
    blocks = list(render("---\n***\n___\n  -----  "))
    assert blocks == [HorizontalRule()] * 4


def test_blockquote():
    assert list(render("> quoted *text*")) == [
        Blockquote(spans=(PlainText("quoted "), Italic("text"))),
    ]


def test_paragraph_lines_joined_until_other_block():
    blocks = list(render("first line\nsecond line\n- item"))

    assert blocks == [
        Paragraph(spans=(PlainText("first line second line"),)),
        ListBlock(ordered=False, items=((PlainText("item"),),)),
    ]


def test_leading_blank_lines_emit_nothing():
    assert list(render("\n\nText")) == [Paragraph(spans=(PlainText("Text"),))]


def test_every_blank_line_after_content_emits_spacer():
    blocks = list(render("Text\n\n\nMore"))

    assert blocks == [
        Paragraph(spans=(PlainText("Text"),)),
        Spacer(),
        Spacer(),
        Paragraph(spans=(PlainText("More"),)),
    ]


def test_inline_code_and_strikethrough():
    assert parse_inline("run `make test` not ~~make check~~") == (
        PlainText("run "),
        Code("make test"),
        PlainText(" not "),
        Strikethrough("make check"),
    )


def test_unmatched_markers_stay_literal():
    assert parse_inline("2 * 3 = 6 and ~ tilde") == (PlainText("2 * 3 = 6 and ~ tilde"),)


def test_bold_takes_priority_over_italic():
    assert parse_inline("**a** *b*") == (Bold("a"), PlainText(" "), Italic("b"))


def test_empty_inline_text():
    assert parse_inline("") == (PlainText(""),)


def test_empty_content_renders_nothing():
    assert list(render("")) == []


def test_render_is_a_one_shot_generator():
    content = "# Title\n\nBody"
    blocks = render(content)

    assert isinstance(blocks, types.GeneratorType)
    first = list(blocks)
    assert list(blocks) == []
    assert list(render(content)) == first
