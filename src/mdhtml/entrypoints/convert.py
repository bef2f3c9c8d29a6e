from __future__ import annotations

from pathlib import Path

import typer

from mdhtml.converter_config import ConverterConfigError, load_converter_config
from mdhtml.document_io import MdhtmlError, read_input_lines, write_fragments
from mdhtml.line_tagger import tag_lines


def run_convert(
    *,
    input_path: Path | None,
    output_path: Path | None,
    max_heading_level: int | None = None,
) -> None:
    try:
        config = load_converter_config().with_overrides(max_heading_level=max_heading_level)
        lines = read_input_lines(input_path, encoding=config.encoding)
        fragments = list(tag_lines(lines, max_heading_level=config.max_heading_level))
        count = write_fragments(fragments, output_path, encoding=config.encoding)
    except (ConverterConfigError, MdhtmlError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if output_path is not None:
        typer.echo(f"Wrote {count} fragment(s) to {output_path}", err=True)
