"""Project-wide misalignment detection and cleanup planning."""

from __future__ import annotations

import math
from typing import List, Mapping

from .config import DEFAULT_THRESHOLD
from .logging import get_logger
from .models import (
    AlignedComponent,
    AlignmentAnalysis,
    CleanupAction,
    CleanupPlan,
    ExecutionPlan,
    ExecutionStep,
    MisalignedComponent,
    ProjectFact,
    PurposeProfile,
)
from .scoring import AlignmentScorer

logger = get_logger("detector")

REMOVE_OR_REFACTOR = "remove_or_refactor"


class MisalignmentDetector:
    """Scores every file and partitions the project by the alignment threshold."""

    def __init__(
        self,
        scorer: AlignmentScorer | None = None,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> None:
        self.scorer = scorer or AlignmentScorer()
        self.threshold = threshold

    def detect(
        self, file_analysis: Mapping[str, ProjectFact], profile: PurposeProfile
    ) -> AlignmentAnalysis:
        misaligned: List[MisalignedComponent] = []
        aligned: List[AlignedComponent] = []

        for file_path, fact in file_analysis.items():
            verdict = self.scorer.score(fact, profile)
            if verdict.score < self.threshold:
                logger.debug("%s misaligned (score %.2f)", file_path, verdict.score)
                misaligned.append(
                    MisalignedComponent(
                        file=file_path,
                        alignment_score=verdict.score,
                        reasons=list(verdict.reasons),
                        functions=list(fact.declared_symbols),
                    )
                )
            else:
                aligned.append(
                    AlignedComponent(
                        file=file_path,
                        alignment_score=verdict.score,
                        purpose_served=list(verdict.purpose_served),
                    )
                )

        total = len(file_analysis)
        percentage = alignment_percentage(total, len(misaligned))
        # severity bands apply to the unrounded share
        exact = 100 * (total - len(misaligned)) / total if total else 100.0
        return AlignmentAnalysis(
            alignment_percentage=percentage,
            misaligned_components=misaligned,
            aligned_components=aligned,
            total_components=total,
            cleanup_required=bool(misaligned),
            severity=severity_for(exact),
            threshold=self.threshold,
        )


def alignment_percentage(total: int, misaligned: int) -> int:
    """Share of aligned files, rounded half up; an empty project is fully aligned."""
    if total == 0:
        return 100
    return int(math.floor(100 * (total - misaligned) / total + 0.5))


def severity_for(percentage: float) -> str:
    if percentage < 50:
        return "high"
    if percentage < 80:
        return "medium"
    return "low"


def effort_for(action_count: int) -> str:
    if action_count > 5:
        return "high"
    if action_count > 2:
        return "medium"
    return "low"


def calculate_confidence(analysis: AlignmentAnalysis) -> float:
    """Blend how aligned the project is with how much evidence was scanned."""
    total = analysis.total_components
    if total == 0:
        return 0.5
    alignment_score = analysis.alignment_percentage / 100
    coverage = min(total / 10, 1.0)
    return alignment_score * 0.7 + coverage * 0.3


class CleanupPlanner:
    """Builds remediation actions for misaligned components."""

    def plan(self, analysis: AlignmentAnalysis) -> CleanupPlan:
        actions = [
            CleanupAction(
                action=REMOVE_OR_REFACTOR,
                target=component.file,
                reason=f"Alignment score: {component.alignment_score:.2f}",
                details=list(component.reasons),
                functions_affected=[symbol.name for symbol in component.functions],
            )
            for component in analysis.misaligned_components
        ]
        return CleanupPlan(actions=actions, estimated_effort=effort_for(len(actions)))

    def execution_plan(self, analysis: AlignmentAnalysis, plan: CleanupPlan) -> ExecutionPlan:
        steps = [
            ExecutionStep(1, "backup_current_state", "Create backup before changes"),
            ExecutionStep(
                2,
                "remove_misaligned_components",
                "Remove or refactor components that don't serve the core purpose",
                targets=[action.target for action in plan.actions],
            ),
            ExecutionStep(
                3,
                "preserve_aligned_components",
                "Ensure aligned components remain functional",
                targets=[component.file for component in analysis.aligned_components],
            ),
            ExecutionStep(4, "update_configurations", "Update configs to reflect changes"),
            ExecutionStep(5, "run_validation_tests", "Confirm alignment and functionality"),
            ExecutionStep(6, "update_documentation", "Update docs to reflect the cleaned implementation"),
        ]
        return ExecutionPlan(
            execution_steps=steps,
            rollback_plan={
                "backup_location": "backup/",
                "rollback_steps": ["restore_from_backup", "verify_restoration", "run_original_tests"],
                "rollback_triggers": ["validation_failure", "functionality_loss", "user_request"],
            },
            validation_plan={
                "tests_to_run": ["functionality_test", "integration_test", "alignment_verification"],
                "success_criteria": ["all_tests_pass", "alignment_percentage_100", "no_functionality_loss"],
            },
            success_criteria=[
                "alignment_percentage_reaches_100",
                "all_core_functionality_preserved",
                "no_misaligned_components_remain",
                "documentation_updated",
                "tests_pass",
            ],
        )


__all__ = [
    "CleanupPlanner",
    "MisalignmentDetector",
    "alignment_percentage",
    "calculate_confidence",
    "severity_for",
]
