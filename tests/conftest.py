"""Shared fixtures for skill-hooks tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def write_rules(tmp_path: Path) -> Callable[[Any], Path]:
    """Return a helper that writes skill-rules.json under tmp_path."""

    def _write(content: Any) -> Path:
        rules_file = tmp_path / ".claude" / "skills" / "skill-rules.json"
        rules_file.parent.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content)
        rules_file.write_text(text, encoding="utf-8")
        return rules_file

    return _write


@pytest.fixture
def typescript_project(tmp_path: Path) -> Path:
    """Create package.json and node_modules/.bin/tsc under tmp_path."""
    (tmp_path / "package.json").write_text("{}", encoding="utf-8")
    tsc = tmp_path / "node_modules" / ".bin" / "tsc"
    tsc.parent.mkdir(parents=True)
    tsc.write_text("#!/bin/sh\n", encoding="utf-8")
    return tmp_path
