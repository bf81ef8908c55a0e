"""Turns file content into ProjectFact records."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence

from .analyzers import ExtractionRule, discover_rules
from .analyzers.base import IMPORTS, KEYWORDS, PURPOSE_STATEMENTS, SYMBOLS
from .analyzers.utils import count_lines
from .logging import get_logger
from .models import ProjectFact

logger = get_logger("extractor")


class FileExtractor:
    """Runs every applicable extraction rule over a file's text."""

    def __init__(self, rules: Sequence[ExtractionRule] | None = None) -> None:
        self.rules = list(rules) if rules is not None else discover_rules()

    def build_fact(self, relative_path: str, content: str, extension: str) -> ProjectFact:
        """Return the facts for ``content``; a failing rule contributes nothing."""
        buckets: Dict[str, List] = {SYMBOLS: [], IMPORTS: [], PURPOSE_STATEMENTS: []}
        keyword_hits: Dict[str, int] = {}

        for rule in self.rules:
            if not rule.supports(extension):
                continue
            try:
                result = rule.extract(content)
            except Exception as exc:
                logger.debug(
                    "Extraction rule %s failed on %s, skipping its facts: %s",
                    rule.name,
                    relative_path,
                    exc,
                )
                continue
            if rule.fact_field == KEYWORDS:
                for keyword, count in result.items():
                    keyword_hits[keyword] = keyword_hits.get(keyword, 0) + count
            else:
                buckets[rule.fact_field].extend(result)

        return ProjectFact(
            relative_path=relative_path,
            extension=extension,
            line_count=count_lines(content),
            declared_symbols=buckets[SYMBOLS],
            imported_modules=buckets[IMPORTS],
            keyword_hits=keyword_hits,
            purpose_statements=buckets[PURPOSE_STATEMENTS],
        )

    def extract_file(self, path: Path, relative_path: str, extension: str) -> ProjectFact:
        """Read ``path`` and extract it; unreadable files degrade to an empty fact."""
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Unable to read %s, recording empty facts: %s", relative_path, exc)
            return ProjectFact(relative_path=relative_path, extension=extension, line_count=0)
        return self.build_fact(relative_path, content, extension)
