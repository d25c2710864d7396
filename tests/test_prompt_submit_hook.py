"""Tests for the UserPromptSubmit skill activation hook."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from skill_hooks.hooks.prompt_submit import handle_prompt_submit
from skill_hooks.hooks.result import Fail, Success
from tests.helpers import SAMPLE_RULES, run_cli


def envelope(prompt: Any, **extra: Any) -> str:
    return json.dumps({"prompt": prompt, **extra})


# =============================================================================
# Pure core: handle_prompt_submit()
# =============================================================================


class TestHandlePromptSubmit:
    """Tests for handle_prompt_submit()."""

    def test_rules_absent_passes_prompt_through(self, tmp_path: Path) -> None:
        assert handle_prompt_submit(envelope("add a query"), tmp_path) == Success("add a query")

    def test_no_match_passes_prompt_through(self, tmp_path: Path, write_rules: Callable[[Any], Path]) -> None:
        write_rules(SAMPLE_RULES)
        assert handle_prompt_submit(envelope("fix typo"), tmp_path) == Success("fix typo")

    def test_match_prepends_banner(self, tmp_path: Path, write_rules: Callable[[Any], Path]) -> None:
        write_rules(SAMPLE_RULES)
        prompt = "How do I write a backend query?"
        result = handle_prompt_submit(envelope(prompt), tmp_path)

        assert isinstance(result, Success)
        assert "💡 Recommended Skill: **convex-backend**" in result.text
        assert result.text.endswith(f"\n\n---\n\n{prompt}")

    def test_extra_envelope_fields_ignored(self, tmp_path: Path) -> None:
        raw = envelope("hello", session_id="abc", cwd="/somewhere", hook_event_name="UserPromptSubmit")
        assert handle_prompt_submit(raw, tmp_path) == Success("hello")

    @pytest.mark.parametrize("raw", ["{}", '{"prompt": null}', '{"prompt": ""}'])
    def test_missing_prompt_is_empty(self, tmp_path: Path, raw: str) -> None:
        assert handle_prompt_submit(raw, tmp_path) == Success("")

    def test_malformed_rules_fail(self, tmp_path: Path, write_rules: Callable[[Any], Path]) -> None:
        write_rules('{"bad json"')
        result = handle_prompt_submit(envelope("query"), tmp_path)

        assert isinstance(result, Fail)
        assert "RuleConfigError" in result.reason

    def test_repeated_inner_key_still_activates(self, tmp_path: Path, write_rules: Callable[[Any], Path]) -> None:
        write_rules(
            '{"r": {"priority": "low", "priority": "high", "description": "d", '
            '"promptTriggers": {"keywords": ["query"]}}}'
        )
        result = handle_prompt_submit(envelope("a query"), tmp_path)

        assert isinstance(result, Success)
        assert "💡 Recommended Skill: **r**" in result.text

    def test_rules_path_is_directory_fails(self, tmp_path: Path) -> None:
        (tmp_path / ".claude" / "skills" / "skill-rules.json").mkdir(parents=True)
        result = handle_prompt_submit(envelope("query"), tmp_path)

        assert isinstance(result, Fail)
        assert "Cannot read skill rules" in result.reason

    @pytest.mark.parametrize("raw", ["not valid json", "", "[1, 2]", '{"prompt": 42}'])
    def test_bad_envelope_fails(self, tmp_path: Path, raw: str) -> None:
        assert isinstance(handle_prompt_submit(raw, tmp_path), Fail)

    def test_unexpected_error_fails(self, tmp_path: Path, write_rules: Callable[[Any], Path]) -> None:
        write_rules(SAMPLE_RULES)
        with patch("skill_hooks.hooks.prompt_submit.compose", side_effect=RuntimeError("boom")):
            result = handle_prompt_submit(envelope("query"), tmp_path)

        assert result == Fail("RuntimeError: boom")


# =============================================================================
# Process behaviour: skill-hooks hook prompt-submit
# =============================================================================


class TestPromptSubmitCommand:
    """End-to-end tests running the hook command as a subprocess."""

    def test_single_skill_scenario(self, tmp_path: Path, write_rules: Callable[[Any], Path]) -> None:
        write_rules(SAMPLE_RULES)
        result = run_cli(["hook", "prompt-submit"], stdin=envelope("How do I write a backend query?"), cwd=tmp_path)

        assert result.returncode == 0
        assert result.stdout.startswith("━" * 39 + "\n🎯 SKILL ACTIVATION CHECK")
        assert "**convex-backend**" in result.stdout
        assert result.stdout.endswith("How do I write a backend query?")

    def test_no_match_output_is_exact(self, tmp_path: Path, write_rules: Callable[[Any], Path]) -> None:
        """No trailing newline or wrapper is added to a pass-through prompt."""
        write_rules(SAMPLE_RULES)
        result = run_cli(["hook", "prompt-submit"], stdin=envelope("fix typo"), cwd=tmp_path)

        assert result.returncode == 0
        assert result.stdout == "fix typo"

    def test_project_dir_option(self, tmp_path: Path, write_rules: Callable[[Any], Path]) -> None:
        write_rules(SAMPLE_RULES)
        result = run_cli(["hook", "prompt-submit", "--project-dir", str(tmp_path)], stdin=envelope("react component"))

        assert result.returncode == 0
        assert "**frontend-dev**" in result.stdout

    def test_multiple_skills_sorted(self, tmp_path: Path, write_rules: Callable[[Any], Path]) -> None:
        write_rules(SAMPLE_RULES)
        prompt = "write a query for the react component"
        result = run_cli(["hook", "prompt-submit"], stdin=envelope(prompt), cwd=tmp_path)

        assert result.returncode == 0
        assert "📋 Detected 2 relevant skill contexts:" in result.stdout
        assert result.stdout.index("🔴 **frontend-dev**") < result.stdout.index("🟢 **convex-backend**")

    def test_malformed_rules_exit_nonzero_with_empty_stdout(
        self, tmp_path: Path, write_rules: Callable[[Any], Path]
    ) -> None:
        write_rules('{"bad json"')
        result = run_cli(["hook", "prompt-submit"], stdin=envelope("query"), cwd=tmp_path)

        assert result.returncode != 0
        assert result.stdout == ""
        assert "Skill activation hook error" in result.stderr

    def test_invalid_input_json(self, tmp_path: Path) -> None:
        result = run_cli(["hook", "prompt-submit"], stdin="not valid json", cwd=tmp_path)

        assert result.returncode != 0
        assert result.stdout == ""
        assert "JSONDecodeError" in result.stderr
