"""Parser for the supported markdown subset.

Two passes:
- A line-oriented state machine groups lines into blocks
  (paragraphs, bullet lists, ordered lists, fenced code).
- An inline scanner turns each non-code line into bold/italic spans.

Nothing here raises on malformed input. Unclosed markers stay literal and
an unterminated fence swallows the rest of the text as code, so the parser
can be run on a message that is still streaming in.
"""

import re
from bisect import bisect_right
from enum import Enum

from .models import (
    Block,
    BulletList,
    CodeBlock,
    Document,
    Emphasis,
    Inline,
    Line,
    OrderedList,
    Paragraph,
    Strong,
    Text,
)

FENCE = "```"

_BULLET_RE = re.compile(r"^\s*[*+-]\s+(.*)$")
_ORDERED_RE = re.compile(r"^\s*\d+\.\s+(.*)$")
_LANGUAGE_RE = re.compile(r"^[\w+#.-]+$")

_STRONG_MARKERS = ("**", "__")
_EMPHASIS_MARKERS = ("*", "_")


class BlockState(str, Enum):
    """States of the block-level line scanner."""

    NORMAL = "normal"
    UNORDERED = "in-unordered-list"
    ORDERED = "in-ordered-list"
    CODE = "in-code-fence"


class _BlockBuilder:
    """Accumulates lines and emits finished blocks."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self.state = BlockState.NORMAL
        self._paragraph: list[str] = []
        self._items: list[str] = []
        self._code: list[str] = []
        self._language: str | None = None

    def feed(self, line: str) -> None:
        if self.state is BlockState.CODE:
            if line.strip() == FENCE:
                self._emit_code()
            else:
                self._code.append(line)
            return

        stripped = line.strip()
        if stripped.startswith(FENCE):
            self._flush()
            self._open_fence(stripped[len(FENCE):].strip())
            return

        if not stripped:
            self._flush()
            return

        match = _BULLET_RE.match(line)
        if match:
            self._add_item(BlockState.UNORDERED, match.group(1))
            return

        match = _ORDERED_RE.match(line)
        if match:
            self._add_item(BlockState.ORDERED, match.group(1))
            return

        if self.state is not BlockState.NORMAL:
            self._flush()
        self._paragraph.append(line)

    def finish(self) -> Document:
        if self.state is BlockState.CODE:
            # Unterminated fence: the remainder is code
            self._emit_code()
        self._flush()
        return Document(blocks=tuple(self.blocks))

    def _open_fence(self, info: str) -> None:
        # ```code``` on a single line
        if len(info) > len(FENCE) and info.endswith(FENCE):
            self.blocks.append(CodeBlock(code=info[:-len(FENCE)].strip()))
            return

        self.state = BlockState.CODE
        self._code = []
        tag = info.split()[0] if info else ""
        self._language = tag if _LANGUAGE_RE.match(tag) else None

    def _emit_code(self) -> None:
        self.blocks.append(CodeBlock(code="\n".join(self._code), language=self._language))
        self._code = []
        self._language = None
        self.state = BlockState.NORMAL

    def _add_item(self, kind: BlockState, content: str) -> None:
        if self.state is not kind:
            self._flush()
            self.state = kind
        self._items.append(content.rstrip())

    def _flush(self) -> None:
        """Close the open paragraph or list, if any."""
        if self._paragraph:
            text = "\n".join(self._paragraph).strip()
            if text:
                self.blocks.append(
                    Paragraph(lines=tuple(parse_inline(line) for line in text.split("\n")))
                )
            self._paragraph = []

        if self._items:
            items = tuple(parse_inline(item) for item in self._items)
            if self.state is BlockState.ORDERED:
                self.blocks.append(OrderedList(items=items))
            else:
                self.blocks.append(BulletList(items=items))
            self._items = []

        self.state = BlockState.NORMAL


def parse(text: str) -> Document:
    """Parse message text into a block tree.

    Args:
        text: Full or partial message text

    Returns:
        Document with the parsed blocks (empty for blank input)
    """
    builder = _BlockBuilder()
    for line in text.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        builder.feed(line)
    return builder.finish()


def parse_inline(text: str) -> Line:
    """Parse bold and italic spans within a single line.

    At every position a ***bold italic*** run is tried first, then bold,
    then italic, so the two characters of a bold marker are never read as
    a pair of italic markers.
    """
    return _InlineScanner(text).parse(0, len(text))


def _opens_word(text: str, pos: int, marker: str) -> bool:
    """Underscore markers may not open inside a word (snake_case)."""
    return not (marker[0] == "_" and pos > 0 and text[pos - 1].isalnum())


def _closes_word(text: str, end: int, marker: str) -> bool:
    return not (marker[0] == "_" and end < len(text) and text[end].isalnum())


class _InlineScanner:
    """Span matcher for one line.

    Nested spans are parsed as [start, end) windows of the same line.
    Closing marker positions are collected once up front, and every
    italic scan records its outcome for each position it passes, so a
    line full of unmatched markers is still parsed in near-linear time.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._strong_closers = {marker: self._closers(marker) for marker in _STRONG_MARKERS}
        self._triple_closers = {marker: self._closers(marker * 3) for marker in _EMPHASIS_MARKERS}
        self._emphasis_scans: dict[tuple[str, int], dict[int, int | None]] = {}

    def _closers(self, marker: str) -> list[int]:
        """Positions where marker can close a span, ascending."""
        text = self.text
        positions = []
        index = text.find(marker, 1)
        while index != -1:
            if not text[index - 1].isspace() and _closes_word(text, index + len(marker), marker):
                positions.append(index)
            index = text.find(marker, index + 1)
        return positions

    def parse(self, lo: int, hi: int) -> Line:
        text = self.text
        nodes: list[Inline] = []
        literal: list[str] = []
        pos = lo

        while pos < hi:
            span = self._match(pos, hi)
            if span is None:
                # An unmatched bold marker stays literal as a unit
                step = 2 if pos + 2 <= hi and text.startswith(_STRONG_MARKERS, pos) else 1
                literal.append(text[pos:pos + step])
                pos += step
                continue

            node, pos = span
            if literal:
                nodes.append(Text("".join(literal)))
                literal = []
            nodes.append(node)

        if literal:
            nodes.append(Text("".join(literal)))
        return tuple(nodes)

    def _match(self, pos: int, hi: int) -> tuple[Inline, int] | None:
        span = self._match_strong_emphasis(pos, hi)
        if span is not None:
            return span
        end = self._strong_end(pos, hi)
        if end is not None:
            width = len(_STRONG_MARKERS[0])
            return Strong(self.parse(pos + width, end - width)), end
        return self._match_emphasis(pos, hi)

    def _next_closer(self, closers: list[int], start: int, width: int, hi: int) -> int | None:
        """First closer after start that ends inside the window (shortest match)."""
        index = bisect_right(closers, start)
        if index == len(closers) or closers[index] + width > hi:
            return None
        return closers[index]

    def _strong_end(self, pos: int, hi: int) -> int | None:
        """End of the bold span opening at pos, or None."""
        text = self.text
        for marker in _STRONG_MARKERS:
            if text.startswith(marker, pos):
                break
        else:
            return None

        start = pos + len(marker)
        if start >= hi or text[start].isspace() or not _opens_word(text, pos, marker):
            return None
        close = self._next_closer(self._strong_closers[marker], start, len(marker), hi)
        return None if close is None else close + len(marker)

    def _match_strong_emphasis(self, pos: int, hi: int) -> tuple[Emphasis, int] | None:
        text = self.text
        marker = text[pos]
        if marker not in _EMPHASIS_MARKERS or not text.startswith(marker * 3, pos):
            return None

        start = pos + 3
        if start >= hi or text[start] == marker or text[start].isspace():
            return None
        if not _opens_word(text, pos, marker):
            return None
        close = self._next_closer(self._triple_closers[marker], start, 3, hi)
        if close is None:
            return None
        return Emphasis((Strong(self.parse(start, close)),)), close + 3

    def _match_emphasis(self, pos: int, hi: int) -> tuple[Emphasis, int] | None:
        text = self.text
        marker = text[pos]
        if marker not in _EMPHASIS_MARKERS:
            return None

        start = pos + 1
        if start >= hi or text[start] == marker or text[start].isspace():
            return None
        if not _opens_word(text, pos, marker):
            return None
        close = self._emphasis_close(marker, start, hi)
        if close is None:
            return None
        return Emphasis(self.parse(start, close)), close + 1

    def _emphasis_close(self, marker: str, index: int, hi: int) -> int | None:
        """Closing italic marker reached by scanning from index.

        Complete bold spans inside the italic run are skipped whole. The
        scan from a position does not depend on where the span opened, so
        outcomes are shared between openers.
        """
        text = self.text
        known = self._emphasis_scans.setdefault((marker, hi), {})
        passed: list[int] = []
        close = None

        while index < hi:
            if index in known:
                close = known[index]
                break
            passed.append(index)

            end = self._strong_end(index, hi)
            if end is not None:
                index = end
                continue

            if (
                text[index] == marker
                and not text[index - 1].isspace()
                and _closes_word(text, index + 1, marker)
            ):
                close = index
                break
            index += 1

        for position in passed:
            known[position] = close
        return close
