"""Static checks for skill-rules.json."""

from __future__ import annotations

import re
from dataclasses import dataclass

from skill_hooks.rules.composer import PRIORITY_RANK
from skill_hooks.rules.store import SkillRule

ERROR = "error"
WARNING = "warning"
INFO = "info"


@dataclass
class Issue:
    """A single finding about one rule."""

    rule: str
    level: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary."""
        return {"rule": self.rule, "level": self.level, "message": self.message}

    def __str__(self) -> str:
        return f"[{self.level}] {self.rule}: {self.message}"


def _bad_patterns(patterns: tuple[str, ...]) -> list[tuple[str, str]]:
    bad = []
    for pattern in patterns:
        try:
            re.compile(pattern)
        except re.error as e:
            bad.append((pattern, str(e)))
    return bad


def lint_rule(rule: SkillRule) -> list[Issue]:
    """Check one rule for patterns that never compile or triggers that never fire."""
    issues = []

    if not rule.has_prompt_triggers:
        issues.append(Issue(rule.name, WARNING, "no keywords or intentPatterns; rule can never activate"))

    if rule.priority not in PRIORITY_RANK:
        issues.append(Issue(rule.name, WARNING, f"unknown priority {rule.priority!r}; sorted after 'low'"))

    for pattern, reason in _bad_patterns(rule.intent_patterns):
        issues.append(Issue(rule.name, ERROR, f"invalid intent pattern {pattern!r}: {reason}"))

    for pattern, reason in _bad_patterns(rule.content_patterns):
        issues.append(Issue(rule.name, ERROR, f"invalid content pattern {pattern!r}: {reason}"))

    if rule.path_patterns or rule.content_patterns:
        issues.append(Issue(rule.name, INFO, "fileTriggers are not evaluated at prompt time"))

    return issues


def lint_rules(rules: dict[str, SkillRule]) -> list[Issue]:
    """Check every rule in table order."""
    issues = []
    for rule in rules.values():
        issues.extend(lint_rule(rule))
    return issues


def has_errors(issues: list[Issue]) -> bool:
    return any(issue.level == ERROR for issue in issues)
