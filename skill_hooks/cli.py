"""Main CLI entry point for skill-hooks."""

import click

from skill_hooks.hooks import commands as hook_commands
from skill_hooks.rules import commands as rules_commands
from skill_hooks.typecheck import commands as typecheck_commands


@click.group()
@click.version_option(package_name="skill-hooks")
def cli() -> None:
    """Skill activation and type-check hooks for Claude Code."""
    pass


cli.add_command(hook_commands.hook, name="hook")
cli.add_command(rules_commands.rules, name="rules")
cli.add_command(typecheck_commands.typecheck, name="typecheck")


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
