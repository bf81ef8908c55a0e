"""CLI entrypoints for alignscan commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .engine import AlignmentEngine
from .logging import configure_logging
from .postproc.report import ReportRenderer


def _add_log_options(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    default = argparse.SUPPRESS if suppress_default else False
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Log debug detail for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=default,
        help="Only log warnings and errors.",
    )


def _threshold(value: str) -> float:
    try:
        threshold = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid threshold: {value}") from exc
    if not 0.0 <= threshold <= 1.0:
        raise argparse.ArgumentTypeError("threshold must be between 0 and 1")
    return threshold


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alignscan",
        description="Score how well a project's files match its stated purpose.",
    )
    _add_log_options(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Analyze a project directory against a purpose statement.",
    )
    _add_log_options(analyze_parser, suppress_default=True)
    analyze_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    analyze_parser.add_argument(
        "-p",
        "--purpose",
        required=True,
        help="Free-text statement of what the project is for.",
    )
    analyze_parser.add_argument(
        "--format",
        choices=("json", "markdown"),
        default="json",
        help="Output format (default: json).",
    )
    analyze_parser.add_argument(
        "--threshold",
        type=_threshold,
        default=None,
        help="Score below which a file counts as misaligned (overrides .alignscan.yml).",
    )
    analyze_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the report to this file instead of stdout.",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP service.")
    _add_log_options(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for alignscan commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
    )

    if args.command == "analyze":
        engine = AlignmentEngine(threshold=args.threshold)
        report = engine.engineer_alignment(args.path, args.purpose)

        if args.format == "markdown":
            output = ReportRenderer(_templates_dir(Path(args.path))).render(report)
        else:
            output = json.dumps(report, indent=2) + "\n"

        if args.output is not None:
            args.output.write_text(output, encoding="utf-8")
            print(f"Report written to {args.output}")
        else:
            sys.stdout.write(output)

        if "error" in report:
            parser.exit(1, f"{report['error']}\n")
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _templates_dir(project_path: Path) -> Path | None:
    if not project_path.is_dir():
        return None
    try:
        return load_config(project_path).report.templates_dir
    except ConfigError:
        return None


if __name__ == "__main__":
    main(sys.argv[1:])
