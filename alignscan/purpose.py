"""Derives a PurposeProfile from a free-text purpose statement."""

from __future__ import annotations

from typing import List, Tuple

from .models import PurposeProfile
from .vocabulary import DEFAULT_DOMAIN, DEFAULT_VOCABULARY, Vocabulary


class PurposeAnalyzer:
    """Classifies a purpose statement by objective, domain and technology."""

    def __init__(self, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> None:
        self.vocabulary = vocabulary

    def analyze(self, stated_purpose: str) -> PurposeProfile:
        lowered = (stated_purpose or "").lower()
        objectives, keywords = self.core_objectives(lowered)
        return PurposeProfile(
            raw_text=stated_purpose,
            core_objectives=objectives,
            domain_focus=self.domain(lowered),
            technologies=self.technologies(lowered),
            success_criteria=list(self.vocabulary.success_criteria),
            objective_keywords=keywords,
        )

    def core_objectives(self, lowered: str) -> Tuple[List[str], List[str]]:
        """Return objective tags and the keywords that triggered them, in table order."""
        objectives: List[str] = []
        keywords: List[str] = []
        for keyword, objective in self.vocabulary.objectives:
            if keyword not in lowered:
                continue
            keywords.append(keyword)
            if objective not in objectives:
                objectives.append(objective)
        return objectives, keywords

    def domain(self, lowered: str) -> str:
        for patterns, domain in self.vocabulary.domains:
            if any(pattern in lowered for pattern in patterns):
                return domain
        return DEFAULT_DOMAIN

    def technologies(self, lowered: str) -> List[str]:
        return [tech for tech in self.vocabulary.technologies if tech in lowered]


__all__ = ["PurposeAnalyzer"]
