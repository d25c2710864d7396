"""Type check CLI commands."""

import sys
from pathlib import Path

import click

from skill_hooks.typecheck.checkers import CHECKERS, DEFAULT_TIMEOUT, Status, probe
from skill_hooks.typecheck.report import format_report


@click.group()
def typecheck() -> None:
    """Type checker probing and manual runs."""


@typecheck.command("probe")
@click.option(
    "--project-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory)",
)
def typecheck_probe(project_dir: Path | None) -> None:
    """Show which checker the post-edit hook would run.

    Exits with status 1 if the project is not set up for any checker.
    """
    root = project_dir or Path.cwd()
    checker = probe(root)

    if checker is None:
        click.echo("No eligible checker. Looked for:")
        for candidate in CHECKERS:
            click.echo(f"  {candidate.name}: {candidate.manifest} + {candidate.binary}")
        sys.exit(1)

    click.echo(f"{checker.name}: {' '.join(checker.command)}")


@typecheck.command("run")
@click.option(
    "--project-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory)",
)
@click.option("--timeout", type=float, default=DEFAULT_TIMEOUT, show_default=True, help="Checker timeout in seconds")
def typecheck_run(project_dir: Path | None, timeout: float) -> None:
    """Run the eligible checker and print the report the hook would show.

    Exits with status 1 if errors were found or no checker is eligible.
    """
    root = project_dir or Path.cwd()
    checker = probe(root)
    if checker is None:
        click.echo("Error: No eligible checker for this project", err=True)
        sys.exit(1)

    outcome = checker.run(root, timeout=timeout)
    if outcome.status == Status.INCONCLUSIVE:
        click.echo(f"{checker.display_name} check timed out after {timeout:g}s")
        return
    if outcome.is_clean:
        click.echo(f"{checker.display_name} check passed")
        return

    click.echo(format_report(list(outcome.lines), checker))
    sys.exit(1)
