"""Core data models shared across alignscan components."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class DeclaredSymbol:
    """Function or class declaration found in a source file."""

    name: str
    kind: str
    line_number: int


@dataclass(frozen=True)
class PurposeStatement:
    """Comment-style purpose/description/overview line."""

    text: str
    line_number: int


@dataclass(frozen=True)
class ProjectFact:
    """Extraction result for one scanned file."""

    relative_path: str
    extension: str
    line_count: int
    declared_symbols: List[DeclaredSymbol] = field(default_factory=list)
    imported_modules: List[str] = field(default_factory=list)
    keyword_hits: Dict[str, int] = field(default_factory=dict)
    purpose_statements: List[PurposeStatement] = field(default_factory=list)


@dataclass(frozen=True)
class PurposeProfile:
    """Structured interpretation of a free-text purpose statement."""

    raw_text: str
    core_objectives: List[str]
    domain_focus: str
    technologies: List[str]
    success_criteria: List[str] = field(default_factory=list)
    # purpose keywords that produced ``core_objectives``
    objective_keywords: List[str] = field(default_factory=list)

    @property
    def objective_text(self) -> str:
        """Joined, lower-cased objectives used for substring comparisons."""
        return " ".join(self.core_objectives).lower()


@dataclass(frozen=True)
class AlignmentVerdict:
    """Score and signal tags comparing a ProjectFact to a PurposeProfile."""

    score: float
    reasons: List[str]
    purpose_served: List[str]


@dataclass
class MisalignedComponent:
    file: str
    alignment_score: float
    reasons: List[str]
    functions: List[DeclaredSymbol]


@dataclass
class AlignedComponent:
    file: str
    alignment_score: float
    purpose_served: List[str]


@dataclass
class AlignmentAnalysis:
    """Project-wide partition of files by alignment score."""

    alignment_percentage: int
    misaligned_components: List[MisalignedComponent]
    aligned_components: List[AlignedComponent]
    total_components: int
    cleanup_required: bool
    severity: str
    threshold: float


@dataclass
class CleanupAction:
    action: str
    target: str
    reason: str
    details: List[str]
    functions_affected: List[str]


@dataclass
class CleanupPlan:
    """Actions suggested for every misaligned component."""

    actions: List[CleanupAction]
    estimated_effort: str
    risk_level: str = "low"
    backup_recommended: bool = True


@dataclass
class ExecutionStep:
    step: int
    action: str
    description: str
    targets: List[str] = field(default_factory=list)


@dataclass
class ExecutionPlan:
    """Ordered steps for carrying out a cleanup plan."""

    execution_steps: List[ExecutionStep]
    rollback_plan: Dict[str, Any]
    validation_plan: Dict[str, Any]
    success_criteria: List[str]


@dataclass
class ProjectAnalysis:
    """Normalized view of a scanned project."""

    root: str
    total_files: int
    code_files: List[str]
    config_files: List[str]
    documentation_files: List[str]
    functionality_detected: List[DeclaredSymbol]
    dependencies: List[str]
    file_analysis: Dict[str, ProjectFact]
    scan_errors: List[str] = field(default_factory=list)


def as_payload(model: Any) -> Dict[str, Any]:
    """Return a JSON-serializable mapping for any alignscan dataclass."""
    return asdict(model)
