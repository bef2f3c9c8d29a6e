from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from mdhtml.domain.models import Heading, Paragraph, TagKind, TagState, tag_name

_HEADING_MARKER_RE = re.compile(r"(?P<marker>#+) ?")


def classify_line(line: str, *, max_heading_level: int | None = None) -> tuple[TagKind, str]:
    """Split a line into its tag kind and the text that goes inside the tag.

    Any line starting with `#` is a heading whose level is the length of the
    leading `#` run; a single space after the run is dropped. Everything else,
    including empty lines, is paragraph text kept verbatim.
    """
    match = _HEADING_MARKER_RE.match(line)
    if match is None:
        return Paragraph(), line

    level = len(match.group("marker"))
    if max_heading_level is not None:
        level = min(level, max_heading_level)
    return Heading(level=level), line[match.end() :]


def process_line(
    line: str,
    state: TagState,
    *,
    max_heading_level: int | None = None,
) -> tuple[str, TagState]:
    kind, content = classify_line(line, max_heading_level=max_heading_level)

    prefix = ""
    continues_paragraph = False
    if state.is_open and state.current_tag is not None:
        if isinstance(kind, Paragraph) and isinstance(state.current_tag, Paragraph):
            continues_paragraph = True
        else:
            prefix = _close_tag(state.current_tag)

    if isinstance(kind, Paragraph) and not state.is_open and not content.strip():
        return "", TagState.closed()

    opening = "" if continues_paragraph else _open_tag(kind)
    fragment = f"{prefix}{opening}{content}{_close_tag(kind)}"
    return fragment, TagState.closed()


def close_open_tag(state: TagState) -> str:
    if not state.is_open or state.current_tag is None:
        return ""
    return _close_tag(state.current_tag)


def tag_lines(
    lines: Iterable[str],
    *,
    max_heading_level: int | None = None,
    state: TagState | None = None,
) -> Iterator[str]:
    """Yield the non-empty fragments for `lines`, in order.

    Pass `state` to resume a stream that was cut off while a tag was open; the
    tag is continued or closed by the first line, or closed at the end if there
    are no lines.
    """
    state = state if state is not None else TagState.closed()
    for line in lines:
        fragment, state = process_line(line, state, max_heading_level=max_heading_level)
        if fragment:
            yield fragment

    trailer = close_open_tag(state)
    if trailer:
        yield trailer


def _open_tag(kind: TagKind) -> str:
    return f"<{tag_name(kind)}>"


def _close_tag(kind: TagKind) -> str:
    return f"</{tag_name(kind)}>\n"
