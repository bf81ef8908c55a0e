"""Pipeline wiring scan -> extract -> score -> plan for one project."""

from __future__ import annotations

import os
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Dict, List

from .analyzers import discover_rules
from .analyzers.utils import load_project_dependencies
from .config import CONFIG_FILENAME, AlignConfig, ConfigError, load_config
from .detector import CleanupPlanner, MisalignmentDetector, calculate_confidence
from .extractor import FileExtractor
from .logging import get_logger
from .models import DeclaredSymbol, ProjectAnalysis, ProjectFact, as_payload
from .purpose import PurposeAnalyzer
from .repo_scanner import RepoScanner, TraversalError
from .scoring import AlignmentScorer

CODE_EXTENSIONS = frozenset({".js", ".ts", ".py"})
CONFIG_EXTENSIONS = frozenset({".json", ".yaml", ".yml"})
DOC_EXTENSIONS = frozenset({".md"})


def _timestamp() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


class AlignmentEngine:
    """Compares a project's files against a stated purpose.

    Collaborators left as ``None`` are built per call from the project's
    ``.alignscan.yml`` so that no state is shared between analyses.
    """

    def __init__(
        self,
        scanner: RepoScanner | None = None,
        extractor: FileExtractor | None = None,
        purpose_analyzer: PurposeAnalyzer | None = None,
        detector: MisalignmentDetector | None = None,
        planner: CleanupPlanner | None = None,
        *,
        threshold: float | None = None,
    ) -> None:
        self._scanner = scanner
        self._extractor = extractor
        self._purpose_analyzer = purpose_analyzer
        self._detector = detector
        self.planner = planner or CleanupPlanner()
        self.threshold = threshold
        self.logger = get_logger("engine")

    def engineer_alignment(
        self, project_path: str | os.PathLike[str], stated_purpose: str
    ) -> Dict[str, Any]:
        """Return the full alignment report, or an error object if traversal fails."""
        try:
            return self.run(project_path, stated_purpose)
        except TraversalError as exc:
            self.logger.error("Alignment analysis failed for %s: %s", project_path, exc)
            return {
                "error": f"Alignment analysis failed: {exc}",
                "timestamp": _timestamp(),
            }

    def run(self, project_path: str | os.PathLike[str], stated_purpose: str) -> Dict[str, Any]:
        """Like ``engineer_alignment`` but lets ``TraversalError`` propagate."""
        repo_path = Path(project_path).expanduser()
        self.logger.info("Starting alignment analysis for %s", repo_path)
        config = self._load_config(repo_path)

        project = self.analyze_project(repo_path, config)
        purpose_analyzer = self._purpose_analyzer or PurposeAnalyzer(config.build_vocabulary())
        profile = purpose_analyzer.analyze(stated_purpose)
        self.logger.debug(
            "Purpose classified as %s with objectives: %s",
            profile.domain_focus,
            ", ".join(profile.core_objectives) or "(none)",
        )

        detector = self._detector or MisalignmentDetector(
            AlignmentScorer(config.build_vocabulary()),
            threshold=self.threshold if self.threshold is not None else config.scoring.threshold,
        )
        analysis = detector.detect(project.file_analysis, profile)
        cleanup_plan = self.planner.plan(analysis)
        execution_plan = self.planner.execution_plan(analysis, cleanup_plan)
        self.logger.info(
            "Alignment %d%% across %d components (%d misaligned)",
            analysis.alignment_percentage,
            analysis.total_components,
            len(analysis.misaligned_components),
        )

        return {
            "timestamp": _timestamp(),
            "project_path": str(project_path),
            "stated_purpose": stated_purpose,
            "project_analysis": as_payload(project),
            "purpose_analysis": {
                "stated_purpose": profile.raw_text,
                "core_objectives": list(profile.core_objectives),
                "key_technologies": list(profile.technologies),
                "domain_focus": profile.domain_focus,
                "success_criteria": list(profile.success_criteria),
            },
            "alignment_analysis": as_payload(analysis),
            "cleanup_plan": as_payload(cleanup_plan),
            "execution_plan": as_payload(execution_plan),
            "confidence": calculate_confidence(analysis),
        }

    def analyze_project(self, repo_path: Path, config: AlignConfig) -> ProjectAnalysis:
        scanner = self._scanner or RepoScanner(
            ignore_names=[*config.scan.ignore_names, CONFIG_FILENAME],
            exclude_paths=config.scan.exclude_paths,
        )
        extractor = self._extractor or FileExtractor(
            discover_rules(vocabulary=config.build_vocabulary())
        )
        supported = set(config.scan.extensions)

        scan = scanner.scan(repo_path)
        file_analysis: Dict[str, ProjectFact] = {}
        code_files: List[str] = []
        config_files: List[str] = []
        documentation_files: List[str] = []
        functionality: List[DeclaredSymbol] = []

        for scanned in scan.files:
            extension = scanned.extension
            if extension not in supported:
                continue
            fact = extractor.extract_file(scanned.path, scanned.relative_path, extension)
            file_analysis[scanned.relative_path] = fact

            if extension in CODE_EXTENSIONS:
                code_files.append(scanned.relative_path)
                functionality.extend(fact.declared_symbols)
            elif extension in CONFIG_EXTENSIONS:
                config_files.append(scanned.relative_path)
            elif extension in DOC_EXTENSIONS:
                documentation_files.append(scanned.relative_path)

        self.logger.debug(
            "Extracted facts for %d of %d files", len(file_analysis), len(scan.files)
        )
        return ProjectAnalysis(
            root=str(scan.root),
            total_files=len(scan.files),
            code_files=code_files,
            config_files=config_files,
            documentation_files=documentation_files,
            functionality_detected=functionality,
            dependencies=load_project_dependencies(scan.root),
            file_analysis=file_analysis,
            scan_errors=list(scan.errors),
        )

    def _load_config(self, repo_path: Path) -> AlignConfig:
        if not repo_path.is_dir():
            return AlignConfig(root=repo_path)
        try:
            return load_config(repo_path)
        except ConfigError as exc:
            self.logger.warning("Ignoring invalid configuration in %s: %s", repo_path, exc)
            return AlignConfig(root=repo_path.resolve())


def analyze_alignment(
    project_root_path: str | os.PathLike[str],
    stated_purpose: str,
    *,
    threshold: float | None = None,
) -> Dict[str, Any]:
    """Analyze ``project_root_path`` against ``stated_purpose``.

    Returns a JSON-serializable report, or ``{"error", "timestamp"}`` when the
    project root cannot be traversed.
    """
    return AlignmentEngine(threshold=threshold).engineer_alignment(
        project_root_path, stated_purpose
    )


__all__ = ["AlignmentEngine", "analyze_alignment"]
