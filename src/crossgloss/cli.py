# src/crossgloss/cli.py
"""
crossgloss Command Line Interface (CLI).

This module implements the user-facing terminal interface using `typer` and `rich`.

Commands
--------
- **generate**: Build `index.html` plus one page per term into a destination
  folder. Missing paths are asked for interactively.
- **check**: Parse and validate a glossary file without writing anything, and
  list its terms in alphabetical order.

Usage
-----
    # Build the site (relative links with --link-base .)
    $ crossgloss generate terms.txt site/ --link-base .

    # Prompt for both paths
    $ crossgloss generate

    # Validate only
    $ crossgloss check terms.txt
"""

from __future__ import annotations

import time
import traceback
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Prompt
from rich.table import Table

from crossgloss.core.errors import GlossaryError
from crossgloss.pipelines.glossary_site import GenerationReport, plan_glossary
from crossgloss.pipelines.glossary_site import generate as run_generate
from crossgloss.render.writer import page_filename

# Ensure env vars (like CROSSGLOSS_LINK_BASE) are loaded before any logic runs
load_dotenv()

app = typer.Typer(
    help="crossgloss: Turn a plain-text glossary into cross-linked HTML pages.",
    rich_markup_mode="markdown",
)
console = Console()

_PREVIEW_CHARS = 60


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _ask_path(value: Path | None, question: str) -> Path:
    """Return `value`, or ask the user for it when it was not given."""
    if value is not None:
        return value
    return Path(Prompt.ask(question, console=console).strip())


def _fail(title: str, exc: Exception, verbose: bool) -> typer.Exit:
    """Print a readable error and build the matching exit signal."""
    console.print(f"\n[bold red]❌ {title}:[/bold red] {escape(str(exc))}", soft_wrap=True)
    if verbose:
        traceback.print_exc()
    return typer.Exit(code=1)


def _render_report(report: GenerationReport) -> None:
    """Summarise a finished run."""
    index_path = report["index_path"]
    # as_uri percent-encodes brackets, so the link target cannot close the tag.
    target = index_path.resolve().as_uri()
    console.print(
        Panel(
            f"Index: [link={target}]{escape(str(index_path))}[/link]\n"
            f"Term pages: {len(report['page_paths'])}",
            title="Output",
            border_style="green",
        )
    )


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def generate(
    input_file: Annotated[
        Path | None,
        typer.Argument(help="Glossary text file (term line, definition lines, blank line)."),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Argument(help="Existing folder that receives index.html and the term pages."),
    ] = None,
    link_base: Annotated[
        str | None,
        typer.Option(
            "--link-base",
            "-l",
            help="Prefix for generated links (default: the output folder as given).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks for debugging."),
    ] = False,
) -> None:
    """
    Generate the glossary index and one HTML page per term.
    """
    source = _ask_path(input_file, "Enter an input file")
    destination = _ask_path(output_dir, "Enter a destination folder")

    console.print(
        Panel.fit(
            f"[bold cyan]crossgloss[/bold cyan]\nProcessing: [u]{escape(source.name)}[/u]",
            border_style="cyan",
        )
    )

    start_time = time.time()
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("[cyan]Writing pages...", total=None)
            report = run_generate(source, destination, link_base=link_base)
    except GlossaryError as e:
        raise _fail("Generation Error", e, verbose) from e

    duration = time.time() - start_time
    console.print(
        f"\n[bold green]✅ Complete![/bold green] {report['term_count']} terms "
        f"(took {duration:.1f}s)\n"
    )
    _render_report(report)
    console.print("Your files have been stored in the specified destination.")


@app.command()  # type: ignore[misc]
def check(
    input_file: Annotated[
        Path,
        typer.Argument(help="Glossary text file to validate."),
    ],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks for debugging."),
    ] = False,
) -> None:
    """
    Validate a glossary file and list its terms without writing any pages.
    """
    try:
        plan = plan_glossary(input_file)
    except GlossaryError as e:
        raise _fail("Invalid Glossary", e, verbose) from e

    table = Table(title=f"{escape(input_file.name)}: {len(plan['entries'])} terms")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Term", style="bold")
    table.add_column("Page")
    table.add_column("Definition", overflow="ellipsis")
    for i, entry in enumerate(plan["entries"], start=1):
        definition = entry.definition
        if len(definition) > _PREVIEW_CHARS:
            definition = definition[: _PREVIEW_CHARS - 3] + "..."
        table.add_row(
            str(i), escape(entry.term), escape(page_filename(entry.term)), escape(definition)
        )

    console.print(table)
    console.print("[bold green]✅ Glossary is valid.[/bold green]")


if __name__ == "__main__":
    app()
