"""UserPromptSubmit hook: skill auto-activation.

Reads {"prompt": "..."} from stdin and writes the prompt to stdout, prefixed
with a skill activation banner when any rule in
.claude/skills/skill-rules.json matches.

Exit code 0 means stdout holds the prompt to use. Any failure (malformed
rules, malformed input) exits 1 with nothing on stdout.
"""

from __future__ import annotations

import json
from pathlib import Path

from skill_hooks.hooks.result import Fail, HookResult, Success
from skill_hooks.rules.composer import compose
from skill_hooks.rules.matcher import match_rules
from skill_hooks.rules.store import load_rules, rules_path

ERROR_PREFIX = "Skill activation hook error"


def _activate(raw_input: str, project_dir: Path) -> str:
    data = json.loads(raw_input)
    if not isinstance(data, dict):
        raise ValueError("Hook input must be a JSON object")

    prompt = data.get("prompt") or ""
    if not isinstance(prompt, str):
        raise ValueError("'prompt' must be a string")

    rules = load_rules(rules_path(project_dir))
    if rules is None:
        return prompt

    matched = match_rules(prompt, rules)
    return compose(prompt, matched, rules)


def handle_prompt_submit(raw_input: str, project_dir: Path) -> HookResult:
    """Compute the prompt to hand back to the host CLI.

    Args:
        raw_input: Raw stdin contents (a JSON object with a "prompt" field).
        project_dir: Project root holding .claude/skills/skill-rules.json.

    Returns:
        Success with the (possibly augmented) prompt, or Fail on any error.
    """
    try:
        return Success(_activate(raw_input, project_dir))
    except Exception as e:
        return Fail(f"{type(e).__name__}: {e}")
