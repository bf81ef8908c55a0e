"""Rules that find function and class declarations."""

from __future__ import annotations

import re
from typing import List, Pattern

from .base import SYMBOLS, ExtractionRule
from .utils import line_number_at
from ..models import DeclaredSymbol

# function foo / foo = function / foo: async function / class Foo
_JS_DECLARATION = re.compile(
    r"function\s+(\w+)|(\w+)\s*[:=]\s*(?:async\s+)?function|class\s+(\w+)"
)
_PY_DECLARATION = re.compile(r"def\s+(\w+)|class\s+(\w+)")


class _DeclarationRule(ExtractionRule):
    fact_field = SYMBOLS
    pattern: Pattern[str]
    class_group: int

    def extract(self, content: str) -> List[DeclaredSymbol]:
        symbols: List[DeclaredSymbol] = []
        for match in self.pattern.finditer(content):
            name = next((group for group in match.groups() if group), None)
            if not name:
                continue
            kind = "class" if match.group(self.class_group) else "function"
            symbols.append(
                DeclaredSymbol(
                    name=name,
                    kind=kind,
                    line_number=line_number_at(content, match.start()),
                )
            )
        return symbols


class JavaScriptSymbolRule(_DeclarationRule):
    """Named functions, function expressions bound to a name, and classes."""

    name = "javascript_symbols"
    extensions = frozenset({".js", ".ts"})
    pattern = _JS_DECLARATION
    class_group = 3


class PythonSymbolRule(_DeclarationRule):
    name = "python_symbols"
    extensions = frozenset({".py"})
    pattern = _PY_DECLARATION
    class_group = 2


__all__ = ["JavaScriptSymbolRule", "PythonSymbolRule"]
