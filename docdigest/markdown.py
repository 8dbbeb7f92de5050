"""Lightweight Markdown renderer for model-generated text.

Turns a Markdown-flavoured string into a flat sequence of display blocks
(headings, fenced code, lists, rules, quotes, paragraphs, spacers) with
inline spans for bold, italic, inline code and strikethrough. It covers what
chat and summary replies actually use; it is not a CommonMark parser.

Examples:
    >>> blocks = list(render("# Summary\\n\\n- one\\n- two"))
    >>> [type(block).__name__ for block in blocks]
    ['Heading', 'Spacer', 'ListBlock']
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Union


@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class Bold:
    text: str


@dataclass(frozen=True)
class Italic:
    text: str


@dataclass(frozen=True)
class Code:
    text: str


@dataclass(frozen=True)
class Strikethrough:
    text: str


InlineSpan = Union[PlainText, Bold, Italic, Code, Strikethrough]
Spans = tuple[InlineSpan, ...]


@dataclass(frozen=True)
class Heading:
    level: int  # 1-3
    spans: Spans


@dataclass(frozen=True)
class FencedCode:
    language: str
    lines: tuple[str, ...]

    @property
    def code(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class ListBlock:
    ordered: bool
    items: tuple[Spans, ...]


@dataclass(frozen=True)
class HorizontalRule:
    pass


@dataclass(frozen=True)
class Blockquote:
    spans: Spans


@dataclass(frozen=True)
class Paragraph:
    spans: Spans


@dataclass(frozen=True)
class Spacer:
    pass


MarkdownBlock = Union[
    Heading, FencedCode, ListBlock, HorizontalRule, Blockquote, Paragraph, Spacer
]

# Alternatives are tried left to right at each position, so ** wins over *
_INLINE_RE = re.compile(r"\*\*(.+?)\*\*|\*(.+?)\*|`(.+?)`|~~(.+?)~~")
_INLINE_TYPES = (Bold, Italic, Code, Strikethrough)

_FENCE = "```"
_HEADING_RE = re.compile(r"^(#{1,3})\s+(.*)")
_RULE_RE = re.compile(r"^(-{3,}|\*{3,}|_{3,})$")
_UNORDERED_RE = re.compile(r"^[*\-+]\s+")
_ORDERED_RE = re.compile(r"^\d+\.\s+")
_QUOTE = "> "


def parse_inline(text: str) -> Spans:
    """Split one line of text into inline spans."""
    spans: list[InlineSpan] = []
    last = 0
    for match in _INLINE_RE.finditer(text):
        if match.start() > last:
            spans.append(PlainText(text[last : match.start()]))
        group = match.lastindex
        spans.append(_INLINE_TYPES[group - 1](match.group(group)))
        last = match.end()
    if last < len(text):
        spans.append(PlainText(text[last:]))
    return tuple(spans) or (PlainText(text),)


def _is_fence(line: str) -> bool:
    return line.startswith(_FENCE)


def _is_heading(line: str) -> bool:
    return _HEADING_RE.match(line) is not None


def _is_rule(line: str) -> bool:
    return _RULE_RE.match(line.strip()) is not None


def _is_unordered(line: str) -> bool:
    return _UNORDERED_RE.match(line) is not None


def _is_ordered(line: str) -> bool:
    return _ORDERED_RE.match(line) is not None


def _is_quote(line: str) -> bool:
    return line.startswith(_QUOTE)


def _is_blank(line: str) -> bool:
    return line.strip() == ""


class _BlockReader:
    """Single forward pass over the lines; each handler consumes its own lines."""

    def __init__(self, lines: list[str]):
        self.lines = lines
        self.pos = 0
        self.emitted = False
        # Precedence matters: the first matching predicate decides the block type
        self.rules: list[tuple[Callable[[str], bool], Callable[[], Optional[MarkdownBlock]]]] = [
            (_is_fence, self._fenced_code),
            (_is_heading, self._heading),
            (_is_rule, self._rule),
            (_is_unordered, lambda: self._list(_UNORDERED_RE, ordered=False)),
            (_is_ordered, lambda: self._list(_ORDERED_RE, ordered=True)),
            (_is_quote, self._quote),
            (_is_blank, self._blank),
        ]

    @property
    def done(self) -> bool:
        return self.pos >= len(self.lines)

    @property
    def line(self) -> str:
        return self.lines[self.pos]

    def blocks(self) -> Iterator[MarkdownBlock]:
        while not self.done:
            block = self._next_block()
            if block is not None:
                self.emitted = True
                yield block

    def _next_block(self) -> Optional[MarkdownBlock]:
        line = self.line
        for matches, handle in self.rules:
            if matches(line):
                return handle()
        return self._paragraph()

    def _starts_block(self, line: str) -> bool:
        return any(matches(line) for matches, _ in self.rules)

    def _fenced_code(self) -> FencedCode:
        language = self.line[len(_FENCE):].strip()
        self.pos += 1
        body = []
        while not self.done and not _is_fence(self.line):
            body.append(self.line)
            self.pos += 1
        self.pos += 1  # closing fence, if any
        return FencedCode(language=language, lines=tuple(body))

    def _heading(self) -> Heading:
        match = _HEADING_RE.match(self.line)
        self.pos += 1
        return Heading(level=len(match.group(1)), spans=parse_inline(match.group(2)))

    def _rule(self) -> HorizontalRule:
        self.pos += 1
        return HorizontalRule()

    def _list(self, marker: re.Pattern, ordered: bool) -> ListBlock:
        items = []
        while not self.done and marker.match(self.line):
            items.append(parse_inline(marker.sub("", self.line, count=1)))
            self.pos += 1
        return ListBlock(ordered=ordered, items=tuple(items))

    def _quote(self) -> Blockquote:
        text = self.line[len(_QUOTE):]
        self.pos += 1
        return Blockquote(spans=parse_inline(text))

    def _blank(self) -> Optional[Spacer]:
        self.pos += 1
        # Leading blank lines are dropped; every later one becomes a spacer
        return Spacer() if self.emitted else None

    def _paragraph(self) -> Paragraph:
        collected = [self.line]
        self.pos += 1
        while not self.done and not self._starts_block(self.line):
            collected.append(self.line)
            self.pos += 1
        return Paragraph(spans=parse_inline(" ".join(collected)))


def render(content: str) -> Iterator[MarkdownBlock]:
    """Yield display blocks for ``content``.

    The result is a one-shot generator; call ``render`` again to re-read the
    same input.
    """
    if not content:
        return
    yield from _BlockReader(content.split("\n")).blocks()
