"""Bordered banner blocks shared by the prompt and post-edit hooks."""

from __future__ import annotations

BORDER = "━" * 39


def render_banner(title: str, body: list[str]) -> str:
    """Wrap body lines in a fixed-width bordered block with a title row."""
    lines = [BORDER, title, BORDER, ""]
    lines.extend(body)
    lines.append("")
    lines.append(BORDER)
    return "\n".join(lines)
