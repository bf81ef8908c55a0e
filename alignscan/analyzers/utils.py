"""Shared helper utilities for extraction rules and project analysis."""

from __future__ import annotations

import json
import re
import tomllib
from pathlib import Path
from typing import Dict, List


def line_number_at(content: str, offset: int) -> int:
    """Return the 1-based line number of ``offset`` within ``content``."""
    return content.count("\n", 0, offset) + 1


def count_lines(content: str) -> int:
    return len(content.split("\n"))


def load_project_dependencies(root: Path) -> List[str]:
    """Collect dependency names from package.json, requirements.txt and pyproject.toml."""
    names: List[str] = []
    node = load_node_dependencies(root)
    names.extend(node["dependencies"])
    names.extend(node["devDependencies"])

    requirements = root / "requirements.txt"
    if requirements.is_file():
        names.extend(_parse_requirements(requirements))

    pyproject = root / "pyproject.toml"
    if pyproject.is_file():
        names.extend(_parse_pyproject(pyproject))

    # dict preserves first-seen order
    return list(dict.fromkeys(names))


def load_node_dependencies(root: Path) -> Dict[str, List[str]]:
    """Return Node.js dependencies separated into runtime/dev lists."""
    empty: Dict[str, List[str]] = {"dependencies": [], "devDependencies": []}
    package_json = root / "package.json"
    if not package_json.is_file():
        return empty

    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return empty
    if not isinstance(data, dict):
        return empty

    def _extract(key: str) -> List[str]:
        deps = data.get(key, {})
        if isinstance(deps, dict):
            return list(deps.keys())
        return []

    return {
        "dependencies": _extract("dependencies"),
        "devDependencies": _extract("devDependencies"),
    }


def _parse_requirements(path: Path) -> List[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []
    packages: List[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(("#", "-")):
            continue
        name = re.split(r"[<>=!~;\[ ]", stripped, maxsplit=1)[0].strip()
        if name:
            packages.append(name)
    return packages


def _parse_pyproject(path: Path) -> List[str]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        return []

    dependencies: List[object] = []
    project = data.get("project")
    if isinstance(project, dict):
        dependencies.extend(project.get("dependencies", []) or [])
        optional = project.get("optional-dependencies", {}) or {}
        for values in optional.values():
            dependencies.extend(values or [])

    tool = data.get("tool")
    poetry = tool.get("poetry", {}) if isinstance(tool, dict) else {}
    if isinstance(poetry, dict):
        dependencies.extend((poetry.get("dependencies", {}) or {}).keys())

    packages: List[str] = []
    for dep in dependencies:
        if not isinstance(dep, str):
            continue
        name = re.split(r"[<>=!~;\[ ]", dep, maxsplit=1)[0].strip()
        if name and name.lower() != "python":
            packages.append(name)
    return packages
