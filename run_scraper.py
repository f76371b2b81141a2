"""Convenience script for running the Guardian scraper locally.

Usage example:
    python run_scraper.py -q 'David Cameron'
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the src directory is on the Python path so the guardianscrape package can be imported
SRC_PATH = Path(__file__).resolve().parent / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import typer  # noqa: E402

from guardianscrape.cli import scrape  # noqa: E402  (import after path setup)


def main() -> None:
    """Run the ``scrape`` command directly, without the sub-command name."""

    typer.run(scrape)


if __name__ == "__main__":
    main()
