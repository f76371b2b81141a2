"""Markov chain writer that assembles pseudo-articles from search results.

A chain maps each prefix of ``prefix_len`` words to the words seen directly
after it. Articles are separated by :data:`END` so that generation can start at
the beginning of an article and, in single mode, stop at the end of one.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, Iterable, List, Sequence, Tuple

from guardianscrape.models import GeneratedArticle, SearchResult
from guardianscrape.services.client import WRITER_FIELDS
from guardianscrape.services.text import NoResultsError, collect_field

__all__ = [
    "DEFAULT_PREFIX_LENGTH",
    "DEFAULT_WORD_LENGTH",
    "END",
    "Chain",
    "build_chain",
    "write_article",
]

logger = logging.getLogger(__name__)

END = "<end/>"
TRUNCATED = "[...]"
DEFAULT_WORD_LENGTH = 2000
DEFAULT_PREFIX_LENGTH = 2

Prefix = Tuple[str, ...]


class Chain:
    """Prefix to suffix table."""

    def __init__(self, prefix_len: int = DEFAULT_PREFIX_LENGTH) -> None:
        if prefix_len < 1:
            raise ValueError("prefix_len must be at least 1")
        self.prefix_len = prefix_len
        self.chain: Dict[Prefix, List[str]] = {}

    def build(self, words: Iterable[str]) -> None:
        prefix: List[str] = [""] * self.prefix_len
        for word in words:
            self.chain.setdefault(tuple(prefix), []).append(word)
            prefix = prefix[1:] + [word]

    def start_prefixes(self) -> List[Prefix]:
        """Prefixes that sit at the beginning of an article."""

        return sorted(key for key in self.chain if key[-1] in ("", END))

    def generate(self, n: int, single: bool = True, rng: random.Random | None = None) -> str:
        """Return at most ``n`` generated words joined by spaces.

        When the word limit is hit, ``[...]`` is appended.
        """

        rng = rng or random.Random()
        starts = self.start_prefixes()
        if not starts:
            return ""

        prefix = list(rng.choice(starts))
        words: List[str] = []
        for i in range(n):
            choices = self.chain.get(tuple(prefix))
            if not choices:
                logger.debug("No choices for prefix %r", prefix)
                break
            word = rng.choice(choices)
            if word == END:
                if single:
                    logger.debug("Reached end of article after %d words", len(words))
                    break
            else:
                words.append(word)
            if i == n - 1:
                logger.debug("Reached word limit of %d", n)
                words.append(TRUNCATED)
            prefix = prefix[1:] + [word]
        return " ".join(words)


def build_chain(texts: Iterable[str], prefix_len: int = DEFAULT_PREFIX_LENGTH) -> Chain:
    """Build a chain from a sequence of article texts."""

    chain = Chain(prefix_len)
    words: List[str] = []
    for text in texts:
        words.extend(text.split())
        words.append(END)
    chain.build(words)
    return chain


def write_article(
    results: Sequence[SearchResult],
    word_length: int = DEFAULT_WORD_LENGTH,
    prefix_length: int = DEFAULT_PREFIX_LENGTH,
    rng: random.Random | None = None,
    *,
    single: bool = True,
) -> GeneratedArticle:
    """Generate a headline, trail text, body and main block from ``results``.

    With ``single`` false each part may run on across several source articles.
    """

    if len(results) < 1:
        raise NoResultsError()

    rng = rng or random.Random()
    parts: Dict[str, str] = {}
    for field in WRITER_FIELDS:
        logger.info("Building %s", field)
        chain = build_chain(collect_field(results, field), prefix_length)
        parts[field] = chain.generate(word_length, single=single, rng=rng)

    return GeneratedArticle(
        headline=parts["headline"],
        trail_text=parts["trailText"],
        body=parts["body"],
        main=parts["main"],
    )
