"""Rules that find imported module names."""

from __future__ import annotations

import re
from typing import List

from .base import IMPORTS, ExtractionRule

_JS_IMPORT = re.compile(
    r"""import\s+.*?\s+from\s+['"]([^'"]+)['"]|require\(['"]([^'"]+)['"]\)"""
)
_PY_IMPORT = re.compile(
    r"^[ \t]*(?:from[ \t]+([\w.]+)[ \t]+import\b|import[ \t]+([\w.]+(?:[ \t]*,[ \t]*[\w.]+)*))",
    re.MULTILINE,
)


class JavaScriptImportRule(ExtractionRule):
    """ES module ``import ... from '<m>'`` and CommonJS ``require('<m>')``."""

    name = "javascript_imports"
    fact_field = IMPORTS
    extensions = frozenset({".js", ".ts"})

    def extract(self, content: str) -> List[str]:
        return [match.group(1) or match.group(2) for match in _JS_IMPORT.finditer(content)]


class PythonImportRule(ExtractionRule):
    """Line-anchored ``import a.b`` and ``from a.b import c`` statements."""

    name = "python_imports"
    fact_field = IMPORTS
    extensions = frozenset({".py"})

    def extract(self, content: str) -> List[str]:
        modules: List[str] = []
        for match in _PY_IMPORT.finditer(content):
            if match.group(1):
                modules.append(match.group(1))
                continue
            modules.extend(part.strip() for part in match.group(2).split(",") if part.strip())
        return modules


__all__ = ["JavaScriptImportRule", "PythonImportRule"]
