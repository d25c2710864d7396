"""Hook CLI commands.

Configure in .claude/settings.json, for example:

    "UserPromptSubmit": [{"hooks": [{"type": "command", "command": "skill-hooks hook prompt-submit"}]}],
    "PostToolUse": [{"matcher": "Edit|Write", "hooks": [{"type": "command", "command": "skill-hooks hook post-edit"}]}]
"""

import sys
from pathlib import Path

import click

from skill_hooks.hooks.post_edit import ERROR_PREFIX as POST_EDIT_ERROR
from skill_hooks.hooks.post_edit import handle_post_edit
from skill_hooks.hooks.prompt_submit import ERROR_PREFIX as PROMPT_SUBMIT_ERROR
from skill_hooks.hooks.prompt_submit import handle_prompt_submit
from skill_hooks.hooks.result import Fail, Success
from skill_hooks.typecheck.checkers import DEFAULT_TIMEOUT

project_dir_option = click.option(
    "--project-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory)",
)


def _read_stdin() -> str:
    """Read the whole hook envelope from stdin as UTF-8."""
    return click.get_binary_stream("stdin").read().decode("utf-8")


def _write_stdout(text: str, newline: bool) -> None:
    click.echo(text.encode("utf-8"), nl=newline)


@click.group()
def hook() -> None:
    """Claude Code hook handlers (read a JSON envelope from stdin)."""


@hook.command("prompt-submit")
@project_dir_option
def hook_prompt_submit(project_dir: Path | None) -> None:
    """UserPromptSubmit: prepend skill recommendations to the prompt.

    Writes the prompt (augmented or unchanged) to stdout and exits 0.
    On any error writes nothing to stdout and exits 1.
    """
    try:
        raw_input = _read_stdin()
    except Exception as e:
        click.echo(f"{PROMPT_SUBMIT_ERROR}: {type(e).__name__}: {e}", err=True)
        sys.exit(1)

    result = handle_prompt_submit(raw_input, project_dir or Path.cwd())

    if isinstance(result, Fail):
        click.echo(f"{PROMPT_SUBMIT_ERROR}: {result.reason}", err=True)
        sys.exit(1)

    if isinstance(result, Success):
        _write_stdout(result.text, newline=False)
    sys.exit(0)


@hook.command("post-edit")
@project_dir_option
@click.option(
    "--timeout",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Seconds before the type checker is abandoned",
)
def hook_post_edit(project_dir: Path | None, timeout: float) -> None:
    """PostToolUse: type check after Edit/Write and report errors.

    Always exits 0. Prints a report only when the checker found errors.
    """
    try:
        raw_input = _read_stdin()
        result = handle_post_edit(raw_input, project_dir or Path.cwd(), timeout=timeout)

        if isinstance(result, Fail):
            click.echo(f"{POST_EDIT_ERROR}: {result.reason}", err=True)
        elif isinstance(result, Success):
            _write_stdout(result.text, newline=True)
    except Exception as e:
        # Never block the host workflow
        click.echo(f"{POST_EDIT_ERROR}: {type(e).__name__}: {e}", err=True)

    sys.exit(0)
