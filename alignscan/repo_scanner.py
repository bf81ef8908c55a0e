"""Project traversal producing the list of candidate files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, List, Sequence

from .logging import get_logger

DEFAULT_IGNORE_NAMES = frozenset(
    {
        "node_modules",
        ".git",
        ".vscode",
        "dist",
        "build",
        ".DS_Store",
        "coverage",
        ".nyc_output",
        "logs",
    }
)

logger = get_logger("scanner")


class TraversalError(RuntimeError):
    """Raised when the project root cannot be listed."""


@dataclass(frozen=True)
class ScannedFile:
    """A file discovered under the project root."""

    path: Path
    relative_path: str

    @property
    def extension(self) -> str:
        return self.path.suffix


@dataclass
class ScanResult:
    root: Path
    files: List[ScannedFile]
    errors: List[str] = field(default_factory=list)


@dataclass
class IgnoreRule:
    """Glob rule from the `scan.exclude_paths` config entry."""

    pattern: str
    directory_only: bool
    anchored: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            if fnmatchcase(rel_path, self.pattern):
                return True
            return self.directory_only and rel_path.startswith(f"{self.pattern}/")

        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def build_ignore_rule(pattern: str) -> IgnoreRule | None:
    pattern = pattern.strip()
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        has_slash="/" in pattern,
    )


class RepoScanner:
    """Walks a project directory, skipping ignored names and unreadable subdirectories."""

    def __init__(
        self,
        ignore_names: Iterable[str] = (),
        exclude_paths: Sequence[str] = (),
    ) -> None:
        self.ignore_names = DEFAULT_IGNORE_NAMES.union(ignore_names)
        self._rules = [
            rule for rule in (build_ignore_rule(pattern) for pattern in exclude_paths) if rule
        ]

    def scan(self, root: str | os.PathLike[str]) -> ScanResult:
        """Return every non-ignored file under `root` in deterministic order."""
        root_path = Path(root).expanduser()
        if not root_path.exists():
            raise TraversalError(f"Project path not found: {root}")
        if not root_path.is_dir():
            raise TraversalError(f"Project path is not a directory: {root}")
        try:
            os.listdir(root_path)
        except OSError as exc:
            raise TraversalError(f"Unable to read project directory {root}: {exc.strerror or exc}") from exc

        root_path = root_path.resolve()
        errors: List[str] = []

        def _on_error(exc: OSError) -> None:
            message = f"Error reading directory {exc.filename}: {exc.strerror or exc}"
            logger.warning("Skipping directory: %s", message)
            errors.append(message)

        files: List[ScannedFile] = []
        for dirpath, dirnames, filenames in os.walk(root_path, onerror=_on_error):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(root_path).as_posix() if current_dir != root_path else ""

            dirnames[:] = sorted(
                name
                for name in dirnames
                if not self._is_ignored(_join(rel_dir, name), name, is_dir=True)
            )

            for filename in sorted(filenames):
                rel_path = _join(rel_dir, filename)
                if self._is_ignored(rel_path, filename, is_dir=False):
                    continue
                files.append(ScannedFile(path=current_dir / filename, relative_path=rel_path))

        logger.debug("Traversal of %s found %d files", root_path, len(files))
        return ScanResult(root=root_path, files=files, errors=errors)

    def _is_ignored(self, rel_path: str, name: str, *, is_dir: bool) -> bool:
        if name in self.ignore_names:
            return True
        return any(rule.matches(rel_path, is_dir) for rule in self._rules)


def _join(rel_dir: str, name: str) -> str:
    return f"{rel_dir}/{name}" if rel_dir else name


__all__ = ["RepoScanner", "ScanResult", "ScannedFile", "TraversalError", "DEFAULT_IGNORE_NAMES"]
