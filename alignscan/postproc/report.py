"""Markdown rendering for alignment reports."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping

from jinja2 import Environment, FileSystemLoader

DEFAULT_TEMPLATE = "report.md.j2"
ERROR_TEMPLATE = "error.md.j2"


class ReportRenderer:
    """Renders engine output with Jinja templates.

    Templates found in ``templates_dir`` take precedence over the bundled ones.
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.env = self._create_env(templates_dir)

    def render(self, report: Mapping[str, Any]) -> str:
        if "error" in report:
            template = self.env.get_template(ERROR_TEMPLATE)
            return template.render(report=report).strip() + "\n"
        template = self.env.get_template(DEFAULT_TEMPLATE)
        return template.render(report=report, summary=_summary(report)).strip() + "\n"

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        env = Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)
        env.filters["score"] = lambda value: f"{float(value):.2f}"
        return env


def _summary(report: Mapping[str, Any]) -> Dict[str, Any]:
    analysis = report.get("alignment_analysis", {})
    return {
        "percentage": analysis.get("alignment_percentage", 100),
        "severity": analysis.get("severity", "low"),
        "total": analysis.get("total_components", 0),
        "misaligned": len(analysis.get("misaligned_components", [])),
        "aligned": len(analysis.get("aligned_components", [])),
        "confidence": round(float(report.get("confidence", 0.0)), 2),
    }


__all__ = ["ReportRenderer"]
