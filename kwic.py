"""KWIC CLI: build a Key-Word-In-Context index from a text file.

    kwic INPUT_FILENAME NOISE_WORDS_FILENAME

Uses typer for argument parsing and rich for terminal output.  The report
goes to stdout unchanged; errors, stats and logs go to stderr via rich.
"""

from __future__ import annotations

import sys
from enum import Enum

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kwic_core.logging import configure_logging
from kwic_core.pipeline import run
from kwic_core.render import render_json, render_text
from kwic_core.text import SourceError

app = typer.Typer(
    help="KWIC: every significant rotation of every line, alphabetized.",
    add_completion=False,
)
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    text = "text"
    json = "json"


DEFAULT_FORMAT = OutputFormat.text


@app.command()
def main(
    input_filename: str = typer.Argument(..., help="Text file to index"),
    noise_words_filename: str = typer.Argument(
        ..., help="Whitespace-separated noise words"
    ),
    fmt: OutputFormat = typer.Option(
        DEFAULT_FORMAT, "--format", help="Report format"
    ),
    timing: bool = typer.Option(
        True, "--timing/--no-timing", help="Print elapsed time after the report"
    ),
    stats: bool = typer.Option(False, "--stats", help="Print a summary table to stderr"),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging to stderr"),
):
    """Print the KWIC index of INPUT_FILENAME, skipping noise-word rotations."""
    configure_logging(verbose)

    try:
        index = run(input_filename, noise_words_filename)
    except SourceError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(code=1)

    if fmt is OutputFormat.json:
        report = render_json(index)
    else:
        report = render_text(index, timing=timing)
    # Written as-is: rotations keep every character of their words.
    sys.stdout.write(report)

    if stats:
        table = Table(title="KWIC Summary")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green", justify="right")
        table.add_row("Lines", str(index.line_count))
        table.add_row("Noise Words", str(index.noise_word_count))
        table.add_row("Rotations", str(len(index)))
        table.add_row("Elapsed (µs)", str(index.elapsed_us))
        err_console.print(table)


if __name__ == "__main__":
    app()
