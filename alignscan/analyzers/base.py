"""Base classes for extraction rules."""

from abc import ABC, abstractmethod
from typing import Any, FrozenSet, Optional

SYMBOLS = "declared_symbols"
IMPORTS = "imported_modules"
KEYWORDS = "keyword_hits"
PURPOSE_STATEMENTS = "purpose_statements"

FACT_FIELDS = frozenset({SYMBOLS, IMPORTS, KEYWORDS, PURPOSE_STATEMENTS})


class ExtractionRule(ABC):
    """Contract for pattern rules that pull one kind of fact out of file text.

    ``fact_field`` names the ProjectFact field the rule contributes to. List
    fields are concatenated in rule order; ``keyword_hits`` results are merged.
    ``extensions`` limits the rule to certain file types; ``None`` means all.
    """

    name: str = ""
    fact_field: str = ""
    extensions: Optional[FrozenSet[str]] = None

    def supports(self, extension: str) -> bool:
        """Return True when this rule should run for files with ``extension``."""
        return self.extensions is None or extension in self.extensions

    @abstractmethod
    def extract(self, content: str) -> Any:
        """Return the rule's matches; never raises on malformed content."""
