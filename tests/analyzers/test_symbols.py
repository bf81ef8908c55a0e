"""Tests for declaration extraction rules."""

from __future__ import annotations

from alignscan.analyzers.symbols import JavaScriptSymbolRule, PythonSymbolRule
from alignscan.models import DeclaredSymbol


def test_javascript_rule_finds_declarations_expressions_and_classes() -> None:
    source = (
        "import x from 'y';\n"
        "function runOrchestration() {}\n"
        "const handler = async function () {};\n"
        "class Planner {\n"
        "  build: function () {}\n"
        "}\n"
    )

    symbols = JavaScriptSymbolRule().extract(source)

    assert symbols == [
        DeclaredSymbol(name="runOrchestration", kind="function", line_number=2),
        DeclaredSymbol(name="handler", kind="function", line_number=3),
        DeclaredSymbol(name="Planner", kind="class", line_number=4),
        DeclaredSymbol(name="build", kind="function", line_number=5),
    ]


def test_javascript_rule_keeps_duplicate_names() -> None:
    source = "function load() {}\nfunction load(a) {}\n"

    symbols = JavaScriptSymbolRule().extract(source)

    assert [symbol.name for symbol in symbols] == ["load", "load"]
    assert [symbol.line_number for symbol in symbols] == [1, 2]


def test_python_rule_finds_defs_and_classes() -> None:
    source = "class Booking:\n    def confirm(self):\n        pass\n\nasync def fetch():\n    pass\n"

    symbols = PythonSymbolRule().extract(source)

    assert symbols == [
        DeclaredSymbol(name="Booking", kind="class", line_number=1),
        DeclaredSymbol(name="confirm", kind="function", line_number=2),
        DeclaredSymbol(name="fetch", kind="function", line_number=5),
    ]


def test_rules_degrade_to_empty_lists_on_unrecognised_content() -> None:
    assert JavaScriptSymbolRule().extract("}}}{{ not code ((") == []
    assert PythonSymbolRule().extract("") == []


def test_rules_only_support_their_language_family() -> None:
    assert JavaScriptSymbolRule().supports(".ts")
    assert not JavaScriptSymbolRule().supports(".py")
    assert PythonSymbolRule().supports(".py")
    assert not PythonSymbolRule().supports(".md")
