"""Extraction rule implementations and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Iterable, List, Sequence, Set

from .base import FACT_FIELDS, ExtractionRule
from .imports import JavaScriptImportRule, PythonImportRule
from .keywords import KeywordRule
from .statements import PurposeStatementRule
from .symbols import JavaScriptSymbolRule, PythonSymbolRule
from ..vocabulary import DEFAULT_VOCABULARY, Vocabulary

_ENTRY_POINT_GROUP = "alignscan.extractors"

_BUILTIN_FACTORIES: dict[str, Callable[[Vocabulary], ExtractionRule]] = {
    "javascript_symbols": lambda _vocabulary: JavaScriptSymbolRule(),
    "python_symbols": lambda _vocabulary: PythonSymbolRule(),
    "javascript_imports": lambda _vocabulary: JavaScriptImportRule(),
    "python_imports": lambda _vocabulary: PythonImportRule(),
    "keywords": lambda vocabulary: KeywordRule(vocabulary.keywords),
    "purpose_statements": lambda _vocabulary: PurposeStatementRule(),
}


def discover_rules(
    enabled: Sequence[str] | None = None,
    *,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> List[ExtractionRule]:
    """Return instantiated extraction rules, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}

    rules: List[ExtractionRule] = []
    seen: Set[str] = set()

    def _add(name: str, factory: Callable[[], ExtractionRule]) -> None:
        key = name.lower()
        if enabled_set is not None and key not in enabled_set:
            return
        if key in seen:
            return
        instance = factory()
        if not isinstance(instance, ExtractionRule):
            raise TypeError(f"Rule factory for '{name}' did not return an ExtractionRule instance")
        if instance.fact_field not in FACT_FIELDS:
            raise TypeError(f"Rule '{name}' targets unknown fact field '{instance.fact_field}'")
        rules.append(instance)
        seen.add(key)
        if enabled_set is not None:
            enabled_set.discard(key)

    for name, builtin in _BUILTIN_FACTORIES.items():
        _add(name, lambda builtin=builtin: builtin(vocabulary))

    for entry in _iter_entry_points():
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(f"Failed to load extraction rule entry point '{entry.name}': {exc}") from exc
        _add(entry.name, lambda obj=loaded: _coerce_rule(obj))

    if enabled_set:
        missing = ", ".join(sorted(enabled_set))
        raise ValueError(f"Unknown extraction rules requested: {missing}")

    return rules


def _coerce_rule(obj: object) -> ExtractionRule:
    if isinstance(obj, ExtractionRule):
        return obj
    if isinstance(obj, type) and issubclass(obj, ExtractionRule):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, ExtractionRule):
            return instance
    raise TypeError("Extraction rule entry point must be an ExtractionRule subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "ExtractionRule",
    "JavaScriptImportRule",
    "JavaScriptSymbolRule",
    "KeywordRule",
    "PurposeStatementRule",
    "PythonImportRule",
    "PythonSymbolRule",
    "discover_rules",
]
