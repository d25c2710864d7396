"""Decide which skill rules a prompt activates."""

from __future__ import annotations

import re

from skill_hooks.rules.store import SkillRule


def _intent_matches(pattern: str, prompt: str) -> bool:
    """Check one intent regex; a pattern that does not compile never matches."""
    try:
        return re.search(pattern, prompt, re.IGNORECASE) is not None
    except re.error:
        return False


def _matches_lowered(lowered: str, rule: SkillRule) -> bool:
    has_keyword = any(keyword.lower() in lowered for keyword in rule.keywords)
    if has_keyword:
        return True

    return any(_intent_matches(pattern, lowered) for pattern in rule.intent_patterns)


def rule_matches(prompt: str, rule: SkillRule) -> bool:
    """Return True if a keyword or an intent pattern of the rule hits the prompt."""
    return _matches_lowered(prompt.lower(), rule)


def match_rules(prompt: str, rules: dict[str, SkillRule]) -> list[str]:
    """Get names of all rules activated by the prompt, in rule-table order.

    Only prompt triggers are evaluated; file triggers are ignored here.
    """
    lowered = prompt.lower()
    return [name for name, rule in rules.items() if _matches_lowered(lowered, rule)]
