"""Keyword, objective, domain and technology tables used by the analyzers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Mapping, Sequence, Tuple

KEYWORDS: Tuple[str, ...] = (
    "orchestration",
    "agent",
    "customer",
    "service",
    "flight",
    "booking",
    "deployment",
    "security",
    "monitoring",
    "performance",
    "optimization",
    "intelligent",
    "alignment",
    "engineering",
)

OBJECTIVE_RULES: Tuple[Tuple[str, str], ...] = (
    ("orchestration", "workflow coordination"),
    ("deploy", "application deployment"),
    ("security", "security implementation"),
    ("monitoring", "system monitoring"),
    ("optimization", "performance optimization"),
    ("intelligence", "intelligent automation"),
    ("analysis", "data analysis"),
    ("management", "resource management"),
)

# Evaluated in order; the first group with a matching pattern decides the domain.
DOMAIN_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("customer service", "airline"), "customer_service"),
    (("orchestration", "workflow"), "workflow_orchestration"),
    (("deployment", "infrastructure"), "infrastructure"),
    (("security",), "security"),
)

DEFAULT_DOMAIN = "general"
CUSTOMER_SERVICE_DOMAIN = "customer_service"

TECHNOLOGIES: Tuple[str, ...] = (
    "amazon q",
    "aws",
    "node.js",
    "python",
    "javascript",
    "docker",
    "kubernetes",
    "mcp",
    "api",
    "database",
    "postgresql",
    "redis",
)

DOMAIN_SPECIFIC_KEYWORDS: Tuple[str, ...] = ("customer", "flight", "booking", "airline")
DOMAIN_SPECIFIC_SYMBOL_TERMS: Tuple[str, ...] = ("customer", "flight", "booking")

SUCCESS_CRITERIA: Tuple[str, ...] = (
    "implementation_matches_stated_purpose",
    "no_irrelevant_functionality",
    "all_components_serve_core_objectives",
)


@dataclass(frozen=True)
class Vocabulary:
    """Bundle of lookup tables so tests and configs can substitute their own."""

    keywords: Tuple[str, ...] = KEYWORDS
    objectives: Tuple[Tuple[str, str], ...] = OBJECTIVE_RULES
    domains: Tuple[Tuple[Tuple[str, ...], str], ...] = DOMAIN_RULES
    technologies: Tuple[str, ...] = TECHNOLOGIES
    domain_specific_keywords: Tuple[str, ...] = DOMAIN_SPECIFIC_KEYWORDS
    domain_specific_symbol_terms: Tuple[str, ...] = DOMAIN_SPECIFIC_SYMBOL_TERMS
    success_criteria: Tuple[str, ...] = field(default=SUCCESS_CRITERIA)

    def with_overrides(
        self,
        *,
        keywords: Sequence[str] | None = None,
        technologies: Sequence[str] | None = None,
        objectives: Mapping[str, str] | None = None,
    ) -> "Vocabulary":
        """Return a copy with the given tables replaced; empty overrides are ignored."""
        changes = {}
        if keywords:
            changes["keywords"] = tuple(term.lower() for term in keywords)
        if technologies:
            changes["technologies"] = tuple(term.lower() for term in technologies)
        if objectives:
            changes["objectives"] = tuple(
                (pattern.lower(), tag) for pattern, tag in objectives.items()
            )
        if not changes:
            return self
        return replace(self, **changes)


DEFAULT_VOCABULARY = Vocabulary()

__all__ = [
    "CUSTOMER_SERVICE_DOMAIN",
    "DEFAULT_DOMAIN",
    "DEFAULT_VOCABULARY",
    "Vocabulary",
]
