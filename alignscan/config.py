"""Configuration loading for alignscan (.alignscan.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

CONFIG_FILENAME = ".alignscan.yml"

DEFAULT_THRESHOLD = 0.5
DEFAULT_EXTENSIONS: tuple[str, ...] = (".js", ".ts", ".py", ".md", ".json", ".yaml", ".yml")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ScoringConfig:
    """Classification settings."""

    threshold: float = DEFAULT_THRESHOLD


@dataclass
class ScanConfig:
    """Traversal filters."""

    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    ignore_names: List[str] = field(default_factory=list)
    exclude_paths: List[str] = field(default_factory=list)


@dataclass
class VocabularyConfig:
    """Optional replacements for the built-in lookup tables."""

    keywords: List[str] = field(default_factory=list)
    technologies: List[str] = field(default_factory=list)
    objectives: Dict[str, str] = field(default_factory=dict)


@dataclass
class ReportConfig:
    templates_dir: Optional[Path] = None


@dataclass
class AlignConfig:
    """Represents the settings defined in .alignscan.yml."""

    root: Path
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    vocabulary: VocabularyConfig = field(default_factory=VocabularyConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

    def build_vocabulary(self, base: Vocabulary = DEFAULT_VOCABULARY) -> Vocabulary:
        return base.with_overrides(
            keywords=self.vocabulary.keywords,
            technologies=self.vocabulary.technologies,
            objectives=self.vocabulary.objectives,
        )


def load_config(config_path: Path) -> AlignConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return AlignConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    scoring = ScoringConfig()
    scoring_data = _as_dict(data.get("scoring"))
    threshold = _as_float(scoring_data.get("threshold"))
    if threshold is not None:
        if not 0.0 <= threshold <= 1.0:
            raise ConfigError("scoring.threshold must be between 0 and 1")
        scoring.threshold = threshold

    scan = ScanConfig()
    scan_data = _as_dict(data.get("scan"))
    extensions = _as_str_list(scan_data.get("extensions"))
    if extensions:
        scan.extensions = [_normalise_extension(ext) for ext in extensions]
    scan.ignore_names = _as_str_list(scan_data.get("ignore_names"))
    scan.exclude_paths = _as_str_list(scan_data.get("exclude_paths"))

    vocabulary = VocabularyConfig()
    vocabulary_data = _as_dict(data.get("vocabulary"))
    vocabulary.keywords = _as_str_list(vocabulary_data.get("keywords"))
    vocabulary.technologies = _as_str_list(vocabulary_data.get("technologies"))
    vocabulary.objectives = {
        str(key): str(value)
        for key, value in _as_dict(vocabulary_data.get("objectives")).items()
        if _as_str(value) is not None
    }

    report = ReportConfig()
    report_data = _as_dict(data.get("report"))
    templates_dir = _as_str(report_data.get("templates_dir"))
    if templates_dir:
        report.templates_dir = root / templates_dir

    return AlignConfig(
        root=root,
        scoring=scoring,
        scan=scan,
        vocabulary=vocabulary,
        report=report,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _normalise_extension(value: str) -> str:
    value = value.strip().lower()
    return value if value.startswith(".") else f".{value}"


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
