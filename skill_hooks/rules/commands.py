"""Skill rule CLI commands."""

import json
import sys
from pathlib import Path

import click

from skill_hooks.rules.lint import has_errors, lint_rules
from skill_hooks.rules.matcher import match_rules
from skill_hooks.rules.store import RuleConfigError, SkillRule, load_rules, rules_path

project_dir_option = click.option(
    "--project-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root containing .claude/skills/skill-rules.json (default: current directory)",
)


def _load_or_exit(project_dir: Path | None) -> dict[str, SkillRule]:
    """Load the project's rules, exiting with status 1 if absent or malformed."""
    path = rules_path(project_dir or Path.cwd())
    try:
        rules = load_rules(path)
    except RuleConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if rules is None:
        click.echo(f"Error: Skill rules not found: {path}", err=True)
        sys.exit(1)
    return rules


def _format_table(rows: list[dict[str, str]], columns: list[str]) -> str:
    """Format rows as a left-aligned plain-text table."""
    if not rows:
        return "No rules defined."

    widths = {col: max(len(col), *(len(row[col]) for row in rows)) for col in columns}
    header = "  ".join(col.ljust(widths[col]) for col in columns)
    rule_line = "  ".join("-" * widths[col] for col in columns)
    body = ["  ".join(row[col].ljust(widths[col]) for col in columns).rstrip() for row in rows]
    return "\n".join([header.rstrip(), rule_line, *body])


@click.group()
def rules() -> None:
    """Skill rule inspection commands."""


@rules.command("list")
@project_dir_option
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def rules_list(project_dir: Path | None, output_json: bool) -> None:
    """List the skill rules defined for the project."""
    table = _load_or_exit(project_dir)

    if output_json:
        click.echo(json.dumps({name: rule.to_dict() for name, rule in table.items()}, indent=2))
        return

    rows = [
        {
            "name": rule.name,
            "priority": rule.priority,
            "enforcement": rule.enforcement,
            "description": rule.description,
        }
        for rule in table.values()
    ]
    click.echo(_format_table(rows, ["name", "priority", "enforcement", "description"]))


@rules.command("match")
@click.argument("prompt")
@project_dir_option
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def rules_match(prompt: str, project_dir: Path | None, output_json: bool) -> None:
    """Show which skills a prompt would activate.

    Examples:

        # Plain list, one skill per line
        skill-hooks rules match "add a query for users"

        # JSON array
        skill-hooks rules match "add a query for users" --json
    """
    table = _load_or_exit(project_dir)
    matched = match_rules(prompt, table)

    if output_json:
        click.echo(json.dumps(matched))
    elif matched:
        for name in matched:
            click.echo(name)
    else:
        click.echo("No skills matched.")


@rules.command("validate")
@project_dir_option
def rules_validate(project_dir: Path | None) -> None:
    """Check skill rules for invalid patterns and rules that can never activate.

    Exits with status 1 if any error-level issue is found.
    """
    table = _load_or_exit(project_dir)
    issues = lint_rules(table)

    for issue in issues:
        click.echo(str(issue))

    if has_errors(issues):
        sys.exit(1)

    if not issues:
        click.echo(f"OK: {len(table)} rule(s) validated")
