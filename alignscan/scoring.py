"""Per-file alignment scoring."""

from __future__ import annotations

from typing import List

from .models import AlignmentVerdict, ProjectFact, PurposeProfile
from .vocabulary import CUSTOMER_SERVICE_DOMAIN, DEFAULT_VOCABULARY, Vocabulary

MATCHED_KEYWORD_BONUS = 0.3
IRRELEVANT_KEYWORD_PENALTY = 0.4
ORCHESTRATION_SYMBOL_BONUS = 0.4
IRRELEVANT_SYMBOL_PENALTY = 0.3
# Added after accumulation: a file with no evidence either way scores 0.5.
BASE_OFFSET = 0.5


class AlignmentScorer:
    """Scores how well a file's facts fit a purpose profile.

    The score starts at 0 and is adjusted per keyword hit, then per declared
    symbol. ``BASE_OFFSET`` is added at the end and the result is clamped to
    [0, 1]. Scoring is deterministic.
    """

    def __init__(self, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> None:
        self.vocabulary = vocabulary

    def score(self, fact: ProjectFact, profile: PurposeProfile) -> AlignmentVerdict:
        running = 0.0
        reasons: List[str] = []
        purpose_served: List[str] = []

        objective_text = profile.objective_text
        off_domain = profile.domain_focus != CUSTOMER_SERVICE_DOMAIN

        for keyword in fact.keyword_hits:
            if keyword in objective_text:
                running += MATCHED_KEYWORD_BONUS
                purpose_served.append(f"contains_{keyword}")
            elif keyword in self.vocabulary.domain_specific_keywords and off_domain:
                running -= IRRELEVANT_KEYWORD_PENALTY
                reasons.append(f"contains_irrelevant_{keyword}_functionality")

        # "orchestration" maps to the "workflow coordination" tag, so the
        # triggering keywords are checked alongside the tag text.
        orchestration_purpose = "orchestration" in objective_text or any(
            "orchestration" in keyword for keyword in profile.objective_keywords
        )
        for symbol in fact.declared_symbols:
            name = symbol.name.lower()
            if orchestration_purpose and "orchestrat" in name:
                running += ORCHESTRATION_SYMBOL_BONUS
                purpose_served.append("orchestration_functionality")
            elif off_domain and any(
                term in name for term in self.vocabulary.domain_specific_symbol_terms
            ):
                running -= IRRELEVANT_SYMBOL_PENALTY
                reasons.append(f"irrelevant_function_{symbol.name}")

        final = max(0.0, min(1.0, running + BASE_OFFSET))
        return AlignmentVerdict(score=final, reasons=reasons, purpose_served=purpose_served)


__all__ = ["AlignmentScorer", "BASE_OFFSET"]
