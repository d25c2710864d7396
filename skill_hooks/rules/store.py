"""Load skill trigger rules from the project's skill-rules.json.

The file maps skill name to a rule object:

    {
      "convex-backend": {
        "type": "domain",
        "enforcement": "suggest",
        "priority": "high",
        "description": "Convex queries, mutations and schema",
        "promptTriggers": {"keywords": ["query"], "intentPatterns": ["(create|add).*?table"]},
        "fileTriggers": {"pathPatterns": ["convex/**/*.ts"], "contentPatterns": ["defineSchema"]}
      }
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

RULES_RELATIVE_PATH = Path(".claude") / "skills" / "skill-rules.json"


class RuleConfigError(ValueError):
    """Raised when skill-rules.json exists but cannot be used."""


@dataclass(frozen=True)
class SkillRule:
    """Trigger conditions bound to one skill."""

    name: str
    activation: str = "domain"
    enforcement: str = "suggest"
    priority: str = ""
    description: str = ""
    keywords: tuple[str, ...] = ()
    intent_patterns: tuple[str, ...] = ()
    # Parsed for completeness; prompt matching never reads these.
    path_patterns: tuple[str, ...] = ()
    content_patterns: tuple[str, ...] = ()

    @property
    def has_prompt_triggers(self) -> bool:
        """Return True if the rule can ever activate from prompt text."""
        return bool(self.keywords or self.intent_patterns)

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the on-disk rule shape."""
        data: dict[str, Any] = {
            "type": self.activation,
            "enforcement": self.enforcement,
            "priority": self.priority,
            "description": self.description,
            "promptTriggers": {
                "keywords": list(self.keywords),
                "intentPatterns": list(self.intent_patterns),
            },
        }
        if self.path_patterns or self.content_patterns:
            data["fileTriggers"] = {
                "pathPatterns": list(self.path_patterns),
                "contentPatterns": list(self.content_patterns),
            }
        return data


def rules_path(project_dir: Path) -> Path:
    """Get the skill-rules.json location for a project."""
    return project_dir / RULES_RELATIVE_PATH


class _Pairs(list):
    """Key/value pairs of one JSON object, in source order."""


def _to_plain(value: Any) -> Any:
    """Turn parsed pairs back into dicts; a repeated key keeps its last value."""
    if isinstance(value, _Pairs):
        return {key: _to_plain(item) for key, item in value}
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    return value


def _rule_entries(pairs: _Pairs) -> dict[str, Any]:
    """Map rule names to entries, rejecting a rule name that appears twice."""
    entries: dict[str, Any] = {}
    for name, entry in pairs:
        if name in entries:
            raise RuleConfigError(f"Duplicate rule name in skill rules: {name!r}")
        entries[name] = _to_plain(entry)
    return entries


def _string_list(value: Any, where: str) -> tuple[str, ...]:
    """Validate a JSON array of strings."""
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise RuleConfigError(f"{where} must be a list of strings")
    return tuple(value)


def _section(data: dict[str, Any], key: str, name: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise RuleConfigError(f"Rule {name!r}: {key} must be an object")
    return value


def parse_rule(name: str, data: Any) -> SkillRule:
    """Build a SkillRule from one entry of the rules file.

    Raises:
        RuleConfigError: If the entry does not have the expected shape.
    """
    if not isinstance(data, dict):
        raise RuleConfigError(f"Rule {name!r} must be an object")

    prompt_triggers = _section(data, "promptTriggers", name)
    file_triggers = _section(data, "fileTriggers", name)

    return SkillRule(
        name=name,
        activation=str(data.get("type") or "domain"),
        enforcement=str(data.get("enforcement") or "suggest"),
        priority=str(data.get("priority") or ""),
        description=str(data.get("description") or ""),
        keywords=_string_list(prompt_triggers.get("keywords"), f"Rule {name!r}: promptTriggers.keywords"),
        intent_patterns=_string_list(
            prompt_triggers.get("intentPatterns"), f"Rule {name!r}: promptTriggers.intentPatterns"
        ),
        path_patterns=_string_list(file_triggers.get("pathPatterns"), f"Rule {name!r}: fileTriggers.pathPatterns"),
        content_patterns=_string_list(
            file_triggers.get("contentPatterns"), f"Rule {name!r}: fileTriggers.contentPatterns"
        ),
    )


def parse_rules(content: str) -> dict[str, SkillRule]:
    """Parse the text of a rules file into a name-keyed table.

    Raises:
        RuleConfigError: If the text is not a JSON object of rule objects.
    """
    try:
        data = json.loads(content, object_pairs_hook=_Pairs)
    except json.JSONDecodeError as e:
        raise RuleConfigError(f"Invalid JSON in skill rules: {e}") from e

    if not isinstance(data, _Pairs):
        raise RuleConfigError("Skill rules must be a JSON object keyed by skill name")

    return {name: parse_rule(name, entry) for name, entry in _rule_entries(data).items()}


def load_rules(path: Path) -> dict[str, SkillRule] | None:
    """Load the rule table from disk.

    Args:
        path: Path to skill-rules.json.

    Returns:
        Rules keyed by skill name in file order, or None if the file does not exist.

    Raises:
        RuleConfigError: If the file exists but is unreadable or malformed.
    """
    if not path.exists():
        return None

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RuleConfigError(f"Cannot read skill rules {path}: {e}") from e

    return parse_rules(content)
