"""Turn checker diagnostics into a short, bounded report."""

from __future__ import annotations

from skill_hooks.banner import render_banner
from skill_hooks.typecheck.checkers import Checker

TITLE = "🔍 TYPE CHECK"
SUMMARY_THRESHOLD = 5
PREVIEW_COUNT = 3


def _fenced(lines: list[str]) -> list[str]:
    return ["```", *lines, "```"]


def format_report(lines: list[str], checker: Checker) -> str | None:
    """Format diagnostic lines for display after an edit.

    Below SUMMARY_THRESHOLD every line is shown. At or above it, only the
    total count, a pointer to the full build and the first PREVIEW_COUNT
    lines are shown.

    Returns:
        The bordered report, or None if there are no lines.
    """
    if not lines:
        return None

    if len(lines) < SUMMARY_THRESHOLD:
        body = [f"⚠️ {checker.display_name} errors detected:", ""]
        body.extend(_fenced(lines))
        body.append("")
        body.append("Please fix these errors before continuing.")
    else:
        body = [
            f"📋 {len(lines)} {checker.display_name} Errors Detected",
            "",
            f"Run `{checker.full_build_command}` to see the complete list.",
            "",
            f"First {PREVIEW_COUNT} errors:",
        ]
        body.extend(_fenced(lines[:PREVIEW_COUNT]))

    return render_banner(TITLE, body)
