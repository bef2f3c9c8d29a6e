from __future__ import annotations

from collections.abc import Iterable

from mdhtml.document_io import split_lines
from mdhtml.line_tagger import tag_lines


def markdown_to_html(markdown_text: str, *, max_heading_level: int | None = None) -> str:
    """Render line-oriented Markdown to HTML, one element per input line.

    Supported:
    - Headings: one or more `#` (level = number of `#`)
    - Paragraphs: every other non-blank line becomes its own `<p>`
    - Blank lines: dropped

    Lines end at `\\n`, `\\r\\n` or `\\r`, as when reading a file. Body text is
    passed through unescaped.
    """
    return render_lines(split_lines(markdown_text), max_heading_level=max_heading_level)


def render_lines(lines: Iterable[str], *, max_heading_level: int | None = None) -> str:
    return "".join(tag_lines(lines, max_heading_level=max_heading_level))
