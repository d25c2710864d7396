"""Skill rule loading, matching and rendering.

Usage:
    from skill_hooks.rules import load_rules, match_rules, compose
    rules = load_rules(rules_path(Path.cwd()))
    matched = match_rules(prompt, rules or {})
    text = compose(prompt, matched, rules or {})
"""

from skill_hooks.rules.composer import compose
from skill_hooks.rules.matcher import match_rules, rule_matches
from skill_hooks.rules.store import RULES_RELATIVE_PATH, RuleConfigError, SkillRule, load_rules, rules_path

__all__ = [
    "RULES_RELATIVE_PATH",
    "RuleConfigError",
    "SkillRule",
    "compose",
    "load_rules",
    "match_rules",
    "rule_matches",
    "rules_path",
]
