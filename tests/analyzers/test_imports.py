"""Tests for import extraction rules."""

from __future__ import annotations

from alignscan.analyzers.imports import JavaScriptImportRule, PythonImportRule


def test_javascript_rule_records_import_and_require_verbatim() -> None:
    source = (
        "import fs from 'fs/promises';\n"
        'import { join } from "../lib/path.js";\n'
        "const express = require('express');\n"
    )

    assert JavaScriptImportRule().extract(source) == [
        "fs/promises",
        "../lib/path.js",
        "express",
    ]


def test_javascript_rule_ignores_side_effect_imports() -> None:
    assert JavaScriptImportRule().extract("import './polyfill';\n") == []


def test_python_rule_records_module_paths() -> None:
    source = (
        "import os\n"
        "import json, re\n"
        "from pathlib import Path\n"
        "from .models import Signal\n"
        "    import yaml\n"
        "x = 'we import nothing here'\n"
    )

    assert PythonImportRule().extract(source) == [
        "os",
        "json",
        "re",
        "pathlib",
        ".models",
        "yaml",
    ]
