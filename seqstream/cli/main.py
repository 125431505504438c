"""
SeqStream CLI - run practice queries over the sample dataset

Usage:
    seqstream list                      # list practice queries
    seqstream show                      # print the sample dataset
    seqstream run <number>... [options] # run practice queries
"""

import sys
import time

import click

from seqstream import __version__
from seqstream.catalog import all_queries, get_query
from seqstream.cli.formatters import get_formatter, to_rows
from seqstream.dataset import sample_people

FORMATS = ["table", "json", "csv", "markdown"]


def _use_color(no_color: bool) -> bool:
    return not no_color and sys.stdout.isatty()


def _fail(message: str):
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="seqstream")
def cli():
    """
    SeqStream - lazy queries over in-memory sequences

    Runs the practice queries shipped with the library against the
    sample dataset of five people.
    """


@cli.command("list")
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(FORMATS, case_sensitive=False),
    default="table",
    help="Output format (default: table)",
)
@click.option("--no-color", is_flag=True, help="Disable colored output")
def list_queries(fmt: str, no_color: bool):
    """List practice queries"""
    rows = [
        {"number": q.number, "title": q.title, "terminal": q.terminal} for q in all_queries()
    ]
    formatter = get_formatter(fmt.lower())
    click.echo(formatter.format(rows, no_color=not _use_color(no_color)))


@cli.command()
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(FORMATS, case_sensitive=False),
    default="table",
    help="Output format (default: table)",
)
@click.option("--no-color", is_flag=True, help="Disable colored output")
def show(fmt: str, no_color: bool):
    """Print the sample dataset"""
    formatter = get_formatter(fmt.lower())
    click.echo(formatter.format(to_rows(sample_people()), no_color=not _use_color(no_color)))


@cli.command()
@click.argument("numbers", type=int, nargs=-1)
@click.option("--all", "run_all", is_flag=True, help="Run every practice query")
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(FORMATS, case_sensitive=False),
    default="table",
    help="Output format (default: table)",
)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option(
    "--explain",
    is_flag=True,
    help="Show the query plan instead of results",
)
@click.option(
    "--time",
    "-t",
    "show_time",
    is_flag=True,
    help="Show execution time",
)
@click.option(
    "--check",
    is_flag=True,
    help="Compare results with the expected ones; exit 1 on any mismatch",
)
def run(
    numbers: tuple,
    run_all: bool,
    fmt: str,
    no_color: bool,
    explain: bool,
    show_time: bool,
    check: bool,
):
    """
    Run practice queries by number

    Examples:

        \b
        # Oldest person
        $ seqstream run 7

        \b
        # Several queries as JSON
        $ seqstream run 1 13 15 -f json

        \b
        # Show the plan of a query
        $ seqstream run 21 --explain

        \b
        # Verify every query against its expected result
        $ seqstream run --all --check
    """
    if not numbers and not run_all:
        _fail("Give one or more query numbers, or --all")

    try:
        queries = all_queries() if run_all else [get_query(n) for n in numbers]
    except ValueError as e:
        _fail(str(e))

    formatter = get_formatter(fmt.lower())
    color = _use_color(no_color)
    mismatches = []

    try:
        for q in queries:
            heading = f"Query {q.number}: {q.title}"

            if explain:
                click.echo(heading)
                click.echo(q.explain())
                continue

            start_time = time.time()
            result = q.run()
            elapsed = time.time() - start_time

            output_text = formatter.format(to_rows(result), no_color=not color, title=heading)
            if fmt.lower() != "table":
                click.echo(heading, err=True)
            click.echo(output_text)

            if show_time:
                click.echo(f"Processed in {elapsed:.6f}s", err=True)

            if check and result != q.expected:
                mismatches.append(q.number)
                click.echo(
                    f"MISMATCH in query {q.number}: expected {q.expected!r}, got {result!r}",
                    err=True,
                )

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        if "--debug" in sys.argv:
            raise
        sys.exit(1)

    if mismatches:
        _fail(f"{len(mismatches)} quer{'y' if len(mismatches) == 1 else 'ies'} did not match")
    if check:
        click.echo(f"All {len(queries)} queries match", err=True)


if __name__ == "__main__":
    cli()
