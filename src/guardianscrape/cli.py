"""Command line entry point for the Guardian search tools.

Usage:
    guardianscrape scrape -q 'David Cameron'
    guardianscrape write -q 'David Cameron' --words 200
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from guardianscrape.config import GuardianSettings
from guardianscrape.services.client import GuardianClient
from guardianscrape.services.markov import (
    DEFAULT_PREFIX_LENGTH,
    DEFAULT_WORD_LENGTH,
    write_article,
)
from guardianscrape.services.text import NoResultsError, concatenate_bodies, strip_html

logger = logging.getLogger(__name__)

USAGE = "Query parameter (-q) missing.\nUsage example:\tscrape -q 'David Cameron'"
WRITE_USAGE = "Query parameter (-q) missing.\nUsage example:\twrite -q 'David Cameron'"

app = typer.Typer(
    name="guardianscrape",
    help="Search the Guardian content API and print article text.",
    no_args_is_help=True,
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


def _load_client(keyfile: Optional[Path]) -> GuardianClient:
    try:
        settings = GuardianSettings.load(keyfile)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Could not load API key: %s", exc)
        raise typer.Exit(code=1) from exc
    return GuardianClient.from_settings(settings)


@app.command("scrape")
def scrape(
    query: Optional[str] = typer.Option(None, "-q", "--query", help="Search keyword."),
    keyfile: Optional[Path] = typer.Option(
        None, "--keyfile", help="JSON file holding the Guardian API key."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr."),
) -> None:
    """Print the plain text of every article matching QUERY."""
    _configure_logging(verbose)

    if not query:
        typer.echo(USAGE)
        raise typer.Exit(code=0)

    client = _load_client(keyfile)
    results = client.search(query)
    try:
        output = concatenate_bodies(results)
    except NoResultsError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    typer.echo(strip_html(output))


@app.command("write")
def write(
    query: Optional[str] = typer.Option(None, "-q", "--query", help="Search keyword."),
    words: int = typer.Option(DEFAULT_WORD_LENGTH, "--words", "-w", min=1, help="Word limit per part."),
    prefix: int = typer.Option(DEFAULT_PREFIX_LENGTH, "--prefix", "-p", min=1, help="Prefix length."),
    continuous: bool = typer.Option(
        False, "--continuous", help="Keep generating across article boundaries."
    ),
    keyfile: Optional[Path] = typer.Option(
        None, "--keyfile", help="JSON file holding the Guardian API key."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr."),
) -> None:
    """Generate a pseudo-article from the articles matching QUERY."""
    _configure_logging(verbose)

    if not query:
        typer.echo(WRITE_USAGE)
        raise typer.Exit(code=0)

    client = _load_client(keyfile)
    results = client.search_fields(query)
    try:
        article = write_article(
            results, word_length=words, prefix_length=prefix, single=not continuous
        )
    except NoResultsError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    typer.echo(article.headline)
    typer.echo("")
    if article.trail_text:
        typer.echo(article.trail_text)
        typer.echo("")
    typer.echo(article.body)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
