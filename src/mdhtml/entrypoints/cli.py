from pathlib import Path
from typing import Annotated

import typer

app = typer.Typer(add_completion=False)


def _version_callback(value: bool) -> None:
    if not value:
        return
    from mdhtml import __version__

    typer.echo(__version__)
    raise typer.Exit()


@app.command()
def convert(
    input_path: Annotated[
        Path | None,
        typer.Argument(
            metavar="INPUT",
            dir_okay=False,
            help="Markdown file to read (default: standard input).",
        ),
    ] = None,
    *,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            dir_okay=False,
            help="HTML file to write (default: standard output).",
        ),
    ] = None,
    max_heading_level: Annotated[
        int | None,
        typer.Option(min=1, help="Clamp deeper headings to this level (overrides the config file)."),
    ] = None,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Print version and exit."),
    ] = False,
) -> None:
    """Convert a Markdown document to HTML, one element per line."""
    from mdhtml.entrypoints.convert import run_convert

    run_convert(input_path=input_path, output_path=output, max_heading_level=max_heading_level)


def main() -> None:
    app()
