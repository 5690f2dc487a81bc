"""Rich rendering of the parsed markup tree for the terminal UI.

Builds the same structure as the HTML renderer, using Rich styles instead
of tags. Text is appended literally, so Rich markup in a message is never
interpreted.
"""

from rich.console import Group, RenderableType
from rich.syntax import Syntax
from rich.text import Text as RichText

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
from .parser import parse

BULLET = "• "
DEFAULT_CODE_THEME = "monokai"


def render_console(text: str, code_theme: str = DEFAULT_CODE_THEME) -> Group:
    """Render message text as a Rich renderable group."""
    return render_document_console(parse(text), code_theme=code_theme)


def render_document_console(document: Document, code_theme: str = DEFAULT_CODE_THEME) -> Group:
    renderables: list[RenderableType] = []
    for index, block in enumerate(document.blocks):
        if index:
            renderables.append(RichText(""))
        renderables.append(_render_block(block, code_theme))
    return Group(*renderables)


def _render_block(block: Block, code_theme: str) -> RenderableType:
    if isinstance(block, Paragraph):
        result = RichText()
        for index, line in enumerate(block.lines):
            if index:
                result.append("\n")
            _append_line(result, line)
        return result
    if isinstance(block, BulletList):
        return _render_items(block.items, lambda _: BULLET)
    if isinstance(block, OrderedList):
        return _render_items(block.items, lambda number: f"{number}. ")
    if isinstance(block, CodeBlock):
        return Syntax(
            block.code,
            block.language or "text",
            theme=code_theme,
            word_wrap=True,
        )
    raise TypeError(f"Unknown block type: {type(block).__name__}")


def _render_items(items: tuple[Line, ...], prefix) -> RichText:
    result = RichText()
    for number, item in enumerate(items, 1):
        if number > 1:
            result.append("\n")
        result.append(prefix(number), style="bold")
        _append_line(result, item)
    return result


def _append_line(target: RichText, line: Line, style: str = "") -> None:
    for node in line:
        _append_inline(target, node, style)


def _append_inline(target: RichText, node: Inline, style: str) -> None:
    if isinstance(node, Text):
        target.append(node.value, style=style or None)
    elif isinstance(node, Strong):
        _append_line(target, node.children, f"{style} bold".strip())
    elif isinstance(node, Emphasis):
        _append_line(target, node.children, f"{style} italic".strip())
    else:
        raise TypeError(f"Unknown inline type: {type(node).__name__}")
