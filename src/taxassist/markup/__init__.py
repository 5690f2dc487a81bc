"""Renderer for the markdown subset used in assistant replies.

Module structure:
- models.py: Block and inline span types
- parser.py: Line state machine and inline span scanner
- html.py: HTML output
- console.py: Rich output for the terminal UI
"""

from .console import render_console
from .html import escape_code, render, render_document
from .models import (
    Block,
    BulletList,
    CodeBlock,
    Document,
    Emphasis,
    OrderedList,
    Paragraph,
    Strong,
    Text,
)
from .parser import BlockState, parse, parse_inline

__all__ = [
    "Block",
    "BlockState",
    "BulletList",
    "CodeBlock",
    "Document",
    "Emphasis",
    "OrderedList",
    "Paragraph",
    "Strong",
    "Text",
    "escape_code",
    "parse",
    "parse_inline",
    "render",
    "render_console",
    "render_document",
]
