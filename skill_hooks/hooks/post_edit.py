"""PostToolUse hook: type check after Edit/Write.

Reads {"tool_name": ..., "tool_input": {...}} from stdin. For edit tools in a
project set up for a supported checker, runs the checker and prints a short
report if it found errors. Always exits 0; errors only go to stderr.
"""

from __future__ import annotations

import json
from pathlib import Path

from skill_hooks.hooks.result import Fail, HookResult, Skip, Success
from skill_hooks.typecheck.checkers import CHECKERS, DEFAULT_TIMEOUT, Checker, probe
from skill_hooks.typecheck.report import format_report

EDIT_TOOLS = ("Edit", "Write")
ERROR_PREFIX = "Type check hook error"


def _check(raw_input: str, project_dir: Path, timeout: float, checkers: tuple[Checker, ...]) -> HookResult:
    data = json.loads(raw_input)
    if not isinstance(data, dict):
        raise ValueError("Hook input must be a JSON object")

    if data.get("tool_name") not in EDIT_TOOLS:
        return Skip()

    checker = probe(project_dir, checkers)
    if checker is None:
        return Skip()

    outcome = checker.run(project_dir, timeout=timeout)
    if outcome.is_clean:
        return Skip()

    report = format_report(list(outcome.lines), checker)
    return Success(report) if report else Skip()


def handle_post_edit(
    raw_input: str,
    project_dir: Path,
    timeout: float = DEFAULT_TIMEOUT,
    checkers: tuple[Checker, ...] = CHECKERS,
) -> HookResult:
    """Decide whether and what to report after a tool call.

    Returns:
        Success with a report, Skip when there is nothing to report, or Fail
        with a reason. Callers must not let Fail change the exit status.
    """
    try:
        return _check(raw_input, project_dir, timeout, checkers)
    except Exception as e:
        return Fail(f"{type(e).__name__}: {e}")
