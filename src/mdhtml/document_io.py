from __future__ import annotations

import io
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

import typer


class MdhtmlError(RuntimeError):
    pass


class InputOpenError(MdhtmlError):
    pass


class InputDecodeError(MdhtmlError):
    pass


class OutputCreateError(MdhtmlError):
    pass


class OutputWriteError(MdhtmlError):
    pass


def read_input_lines(path: Path | None, *, encoding: str = "utf-8") -> list[str]:
    """Read every line of `path` (or stdin when `path` is None) without line endings."""
    if path is None:
        stream = typer.get_text_stream("stdin", encoding=encoding)
        return _read_lines(stream, source="<stdin>")

    try:
        handle = path.open(encoding=encoding)
    except OSError as exc:
        raise InputOpenError(f"Failed to open input file {path}: {exc.strerror or exc}") from exc
    with handle:
        return _read_lines(handle, source=str(path))


def split_lines(text: str) -> list[str]:
    """Split text on the same line endings `read_input_lines` recognises."""
    return _read_lines(io.StringIO(text, newline=None), source="<text>")


def write_fragments(fragments: Iterable[str], path: Path | None, *, encoding: str = "utf-8") -> int:
    """Write fragments to `path` (created or truncated) or to stdout; return how many were written."""
    if path is None:
        return _write_stdout(fragments)

    try:
        handle = path.open("w", encoding=encoding)
    except OSError as exc:
        raise OutputCreateError(f"Could not create output file {path}: {exc.strerror or exc}") from exc

    count = 0
    with handle:
        for fragment in fragments:
            try:
                handle.write(fragment)
            except (OSError, UnicodeEncodeError) as exc:
                raise OutputWriteError(f"Could not write to output file {path}: {exc}") from exc
            count += 1
    return count


def _read_lines(stream: TextIO, *, source: str) -> list[str]:
    try:
        return [line.removesuffix("\n") for line in stream]
    except UnicodeDecodeError as exc:
        raise InputDecodeError(f"Input {source} is not valid {exc.encoding}: {exc.reason}") from exc
    except OSError as exc:
        raise InputOpenError(f"Failed to read input {source}: {exc}") from exc


def _write_stdout(fragments: Iterable[str]) -> int:
    count = 0
    for fragment in fragments:
        try:
            typer.echo(fragment, nl=False)
        except OSError as exc:
            raise OutputWriteError(f"Could not write to standard output: {exc}") from exc
        count += 1
    return count
