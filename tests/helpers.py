"""Shared test data and a runner for the skill-hooks CLI."""

import os
import subprocess
import sys
from pathlib import Path
from typing import Any

REPO_ROOT = Path(__file__).parent.parent

SAMPLE_RULES: dict[str, Any] = {
    "convex-backend": {
        "type": "domain",
        "enforcement": "suggest",
        "priority": "low",
        "description": "Convex queries, mutations and schema design",
        "promptTriggers": {
            "keywords": ["query", "mutation", "convex"],
            "intentPatterns": [r"(create|add).*?(table|schema)"],
        },
        "fileTriggers": {"pathPatterns": ["convex/**/*.ts"], "contentPatterns": ["defineSchema"]},
    },
    "frontend-dev": {
        "type": "domain",
        "enforcement": "suggest",
        "priority": "high",
        "description": "React components and styling",
        "promptTriggers": {
            "keywords": ["component", "react"],
            "intentPatterns": [r"(build|make).*?(page|form)"],
        },
    },
    "task-management-dev": {
        "type": "domain",
        "enforcement": "suggest",
        "priority": "medium",
        "description": "PBI and task workflow",
        "promptTriggers": {"keywords": ["pbi", "backlog"], "intentPatterns": []},
    },
}


def run_cli(
    args: list[str],
    stdin: str = "",
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run `python -m skill_hooks.cli` with the repo on PYTHONPATH.

    Args:
        args: CLI arguments after the program name.
        stdin: Text piped to the command.
        cwd: Working directory for the command.
        env: Extra environment variables, applied over the current environment.
    """
    run_env = dict(os.environ)
    run_env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), run_env.get("PYTHONPATH", "")]))
    run_env["PYTHONIOENCODING"] = "utf-8"
    if env:
        run_env.update(env)
    return subprocess.run(
        [sys.executable, "-m", "skill_hooks.cli", *args],
        input=stdin,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=30,
        cwd=cwd,
        env=run_env,
    )
