"""Purpose/description/overview comment extraction."""

from __future__ import annotations

import re
from typing import List, Tuple

from .base import PURPOSE_STATEMENTS, ExtractionRule
from .utils import line_number_at
from ..models import PurposeStatement

_LABEL_PATTERNS = (
    re.compile(r"purpose[:\t ]+([^\n]+)", re.IGNORECASE),
    re.compile(r"(?<!@)description[:\t ]+([^\n]+)", re.IGNORECASE),
    re.compile(r"overview[:\t ]+([^\n]+)", re.IGNORECASE),
    re.compile(r"@description[\t ]+([^\n]+)", re.IGNORECASE),
)


class PurposeStatementRule(ExtractionRule):
    """Captures the rest of the line after a purpose-like label."""

    name = "purpose_statements"
    fact_field = PURPOSE_STATEMENTS

    def extract(self, content: str) -> List[PurposeStatement]:
        found: List[Tuple[int, int, PurposeStatement]] = []
        for index, pattern in enumerate(_LABEL_PATTERNS):
            for match in pattern.finditer(content):
                text = match.group(1).strip()
                if not text:
                    continue
                statement = PurposeStatement(
                    text=text, line_number=line_number_at(content, match.start())
                )
                found.append((match.start(), index, statement))
        found.sort(key=lambda item: (item[0], item[1]))
        return [statement for _, _, statement in found]


__all__ = ["PurposeStatementRule"]
