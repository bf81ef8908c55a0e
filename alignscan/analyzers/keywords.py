"""Vocabulary keyword counting."""

from __future__ import annotations

from typing import Dict, Sequence

from .base import KEYWORDS, ExtractionRule
from ..vocabulary import KEYWORDS as DEFAULT_KEYWORDS


class KeywordRule(ExtractionRule):
    """Counts case-insensitive substring occurrences of each vocabulary term.

    Matching is not word-bounded, so ``flights`` counts toward ``flight``.
    Terms with no occurrences are left out of the result.
    """

    name = "keywords"
    fact_field = KEYWORDS

    def __init__(self, keywords: Sequence[str] = DEFAULT_KEYWORDS) -> None:
        self.keywords = tuple(term.lower() for term in keywords if term)

    def extract(self, content: str) -> Dict[str, int]:
        lowered = content.lower()
        hits: Dict[str, int] = {}
        for keyword in self.keywords:
            count = lowered.count(keyword)
            if count > 0:
                hits[keyword] = count
        return hits


__all__ = ["KeywordRule"]
