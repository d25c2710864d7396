"""Render matched skills into the activation banner prepended to a prompt."""

from __future__ import annotations

from skill_hooks.banner import render_banner
from skill_hooks.rules.store import SkillRule

TITLE = "🎯 SKILL ACTIVATION CHECK"
SEPARATOR = "\n\n---\n\n"

PRIORITY_RANK = {"high": 3, "medium": 2, "low": 1}
PRIORITY_MARKER = {"high": "🔴", "medium": "🟡"}
DEFAULT_MARKER = "🟢"


def sort_by_priority(names: list[str], rules: dict[str, SkillRule]) -> list[str]:
    """Order names high > medium > low > unknown, keeping ties in input order."""
    return sorted(names, key=lambda name: -PRIORITY_RANK.get(rules[name].priority, 0))


def build_reminder(names: list[str], rules: dict[str, SkillRule]) -> str:
    """Build the banner text for one or more matched skills."""
    body: list[str] = []

    if len(names) == 1:
        rule = rules[names[0]]
        body.append(f"📋 Detected context: {rule.description}")
        body.append("")
        body.append(f"💡 Recommended Skill: **{rule.name}**")
        body.append("")
        body.append("Please reference this skill's guidelines for best practices and patterns.")
    else:
        body.append(f"📋 Detected {len(names)} relevant skill contexts:")
        body.append("")
        for name in sort_by_priority(names, rules):
            rule = rules[name]
            marker = PRIORITY_MARKER.get(rule.priority, DEFAULT_MARKER)
            body.append(f"{marker} **{name}** - {rule.description}")
        body.append("")
        body.append("Please reference these skills' guidelines for best practices and patterns.")

    return render_banner(TITLE, body)


def compose(prompt: str, matched: list[str], rules: dict[str, SkillRule]) -> str:
    """Prepend the activation banner to the prompt.

    Returns the prompt unchanged when nothing matched.
    """
    if not matched:
        return prompt
    return f"{build_reminder(matched, rules)}{SEPARATOR}{prompt}"
