"""chronicles search / show: query a journal from the terminal."""

from __future__ import annotations

import json
import sys

import click

from chronicles.core.exceptions import ChroniclesError
from chronicles.journal import DocumentIndex, IndexConfig


def _open_index(config, journal: str) -> DocumentIndex:
    return DocumentIndex(journal, config=IndexConfig.from_config(config))


@click.command()
@click.argument("journal", type=click.Path(file_okay=False))
@click.pass_obj
def search(config, journal: str) -> None:
    """List every dated entry in JOURNAL, newest first, as JSON."""
    try:
        result = _open_index(config, journal).search()
    except ChroniclesError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(json.dumps(result.to_dict(), indent=2))
    if not result.complete:
        click.echo(f"Warning: {len(result.errors)} path(s) could not be read; results are partial.", err=True)


@click.command()
@click.argument("journal", type=click.Path(file_okay=False))
@click.argument("date")
@click.option("--raw", is_flag=True, help="Print the markdown source instead of HTML.")
@click.pass_obj
def show(config, journal: str, date: str, raw: bool) -> None:
    """Print the entry for DATE in JOURNAL."""
    try:
        doc = _open_index(config, journal).find_by_date(date)
    except ChroniclesError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if doc is None:
        click.echo(f"No entry found for '{date}'.", err=True)
        sys.exit(1)

    click.echo(doc.raw if raw else doc.html)
