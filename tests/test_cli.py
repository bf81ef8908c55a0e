"""CLI parser and entrypoint tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from alignscan.cli import _build_parser, main
from tests._fixtures.repo_builder import RepoBuilder


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "analyze", "-p", "anything"])
    assert args.verbose is True
    assert args.command == "analyze"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["analyze", "-p", "anything", "--verbose"])
    assert args.verbose is True
    assert args.path == "."


def test_cli_analyze_defaults() -> None:
    args = _build_parser().parse_args(["analyze", "project", "--purpose", "anything"])
    assert args.path == "project"
    assert args.purpose == "anything"
    assert args.format == "json"
    assert args.threshold is None
    assert args.output is None


def test_cli_requires_purpose() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["analyze", "project"])


@pytest.mark.parametrize("value", ["1.5", "-0.1", "high"])
def test_cli_rejects_invalid_threshold(value: str) -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["analyze", "-p", "x", "--threshold", value])


def test_cli_serve_options() -> None:
    args = _build_parser().parse_args(["serve", "--port", "9000"])
    assert args.command == "serve"
    assert args.host == "127.0.0.1"
    assert args.port == 9000


def test_main_prints_json_report(repo_builder: RepoBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    repo_builder.write({"src/booking.js": "function processCustomerBooking() {}\n"})

    main(["analyze", str(repo_builder.path()), "-p", "deploy a secure API", "--threshold", "0.3"])

    report = json.loads(capsys.readouterr().out)
    assert report["alignment_analysis"]["threshold"] == 0.3
    # booking.js scores 0.0: two irrelevant keywords and one irrelevant function
    assert report["alignment_analysis"]["alignment_percentage"] == 0


def test_main_writes_markdown_to_output_file(
    repo_builder: RepoBuilder, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    repo_builder.write({"src/orchestrator.js": "function runOrchestration() {}\n"})
    target = tmp_path / "report.md"

    main(
        [
            "analyze",
            str(repo_builder.path()),
            "-p",
            "build an orchestration platform",
            "--format",
            "markdown",
            "-o",
            str(target),
        ]
    )

    assert f"Report written to {target}" in capsys.readouterr().out
    content = target.read_text(encoding="utf-8")
    assert content.startswith("# Alignment report")
    assert "`src/orchestrator.js` | 0.90 | orchestration_functionality" in content
    assert "No cleanup required." in content


def test_main_renders_markdown_despite_unreadable_config(
    repo_builder: RepoBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    repo_builder.write({"src/orchestrator.js": "function runOrchestration() {}\n"})
    (repo_builder.path() / ".alignscan.yml").write_bytes(b"\xff\xfe\x00bad")

    main(["analyze", str(repo_builder.path()), "-p", "anything", "--format", "markdown"])

    assert capsys.readouterr().out.startswith("# Alignment report")


def test_main_exits_with_error_for_missing_project(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    missing = tmp_path / "missing"

    with pytest.raises(SystemExit) as excinfo:
        main(["analyze", str(missing), "-p", "anything"])

    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert json.loads(captured.out)["error"].startswith("Alignment analysis failed")
    assert "Project path not found" in captured.err


def test_main_quiet_suppresses_info_logs(
    repo_builder: RepoBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    main(["analyze", str(repo_builder.path()), "-p", "anything", "--quiet"])

    captured = capsys.readouterr()
    assert "INFO" not in captured.err
    assert json.loads(captured.out)["alignment_analysis"]["alignment_percentage"] == 100


def test_main_writes_log_file(repo_builder: RepoBuilder, tmp_path: Path) -> None:
    log_file = tmp_path / "alignscan.log"

    main(["--log-file", str(log_file), "analyze", str(repo_builder.path()), "-p", "anything"])

    assert "Starting alignment analysis" in log_file.read_text(encoding="utf-8")
