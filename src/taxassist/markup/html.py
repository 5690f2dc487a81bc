"""HTML rendering of the parsed markup tree.

Only code content is escaped. Text outside code blocks is emitted as-is,
so upstream text containing raw HTML passes through unchanged.
"""

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

LINE_BREAK = "<br/>"


def render(text: str) -> str:
    """Render message text to an HTML string.

    Pure and deterministic: the same text always yields the same output.
    Blank input yields an empty string.

    Examples:
        >>> render("**a** and **b**")
        '<p><strong>a</strong> and <strong>b</strong></p>'

        >>> render("* x\\n* y")
        '<ul><li>x</li><li>y</li></ul>'
    """
    return render_document(parse(text))


def render_document(document: Document) -> str:
    """Render an already parsed document."""
    return "".join(_render_block(block) for block in document.blocks)


def escape_code(code: str) -> str:
    """Escape the characters that would turn code into markup."""
    return code.replace("<", "&lt;").replace(">", "&gt;")


def _render_block(block: Block) -> str:
    if isinstance(block, Paragraph):
        return f"<p>{LINE_BREAK.join(_render_line(line) for line in block.lines)}</p>"
    if isinstance(block, BulletList):
        return f"<ul>{_render_items(block.items)}</ul>"
    if isinstance(block, OrderedList):
        return f"<ol>{_render_items(block.items)}</ol>"
    if isinstance(block, CodeBlock):
        css_class = f' class="language-{block.language}"' if block.language else ""
        return f"<pre><code{css_class}>{escape_code(block.code)}</code></pre>"
    raise TypeError(f"Unknown block type: {type(block).__name__}")


def _render_items(items: tuple[Line, ...]) -> str:
    return "".join(f"<li>{_render_line(item)}</li>" for item in items)


def _render_line(line: Line) -> str:
    return "".join(_render_inline(node) for node in line)


def _render_inline(node: Inline) -> str:
    if isinstance(node, Text):
        return node.value
    if isinstance(node, Strong):
        return f"<strong>{_render_line(node.children)}</strong>"
    if isinstance(node, Emphasis):
        return f"<em>{_render_line(node.children)}</em>"
    raise TypeError(f"Unknown inline type: {type(node).__name__}")
