"""Data structures for the markup renderer.

Hides the shape of a parsed message: a flat sequence of blocks, each
holding lines of inline spans. Renderers walk this tree; only the parser
builds it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Text:
    """Literal run of text."""

    value: str


@dataclass(frozen=True)
class Strong:
    """Bold span."""

    children: tuple["Inline", ...]


@dataclass(frozen=True)
class Emphasis:
    """Italic span."""

    children: tuple["Inline", ...]


Inline = Text | Strong | Emphasis
Line = tuple[Inline, ...]


@dataclass(frozen=True)
class Paragraph:
    """Paragraph; each line is rendered with an explicit break between."""

    lines: tuple[Line, ...]


@dataclass(frozen=True)
class BulletList:
    items: tuple[Line, ...]


@dataclass(frozen=True)
class OrderedList:
    items: tuple[Line, ...]


@dataclass(frozen=True)
class CodeBlock:
    """Fenced code, kept verbatim.

    The language tag is metadata only and never affects the content.
    """

    code: str
    language: str | None = None


Block = Paragraph | BulletList | OrderedList | CodeBlock


@dataclass(frozen=True)
class Document:
    """Parsed message text."""

    blocks: tuple[Block, ...] = ()
