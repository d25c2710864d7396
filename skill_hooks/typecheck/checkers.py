"""Type checker backends and project eligibility probing.

Each backend names the files that mark a project as set up for it, the
command to run, and the regex identifying a diagnostic line in its output.
"""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DEFAULT_TIMEOUT = 10.0


class Status(Enum):
    """Result category of one checker run."""

    CLEAN = "clean"
    INCONCLUSIVE = "inconclusive"
    ERRORS = "errors"


@dataclass(frozen=True)
class CompilerOutcome:
    """Outcome of running a checker once."""

    status: Status
    lines: tuple[str, ...] = ()

    @property
    def is_clean(self) -> bool:
        """Timed-out runs report nothing, same as clean ones."""
        return self.status in (Status.CLEAN, Status.INCONCLUSIVE)


CLEAN = CompilerOutcome(Status.CLEAN)
INCONCLUSIVE = CompilerOutcome(Status.INCONCLUSIVE)


@dataclass(frozen=True)
class Checker:
    """An external type checker invoked from a project root."""

    name: str
    display_name: str
    manifest: str
    binary: str
    command: tuple[str, ...]
    diagnostic_pattern: str
    full_build_command: str

    def is_eligible(self, project_dir: Path) -> bool:
        """Check that the project has both the manifest and the local checker binary."""
        return (project_dir / self.manifest).is_file() and (project_dir / self.binary).exists()

    def extract_diagnostics(self, output: str) -> list[str]:
        """Get lines containing the diagnostic marker, in original order."""
        marker = re.compile(self.diagnostic_pattern)
        return [line for line in output.splitlines() if marker.search(line)]

    def run(self, project_dir: Path, timeout: float = DEFAULT_TIMEOUT) -> CompilerOutcome:
        """Run the checker and classify its result.

        Args:
            project_dir: Working directory for the checker.
            timeout: Seconds before the checker is killed.

        Returns:
            CLEAN on success or when no diagnostic lines are found, INCONCLUSIVE
            on timeout, otherwise an ERRORS outcome carrying the diagnostic lines.

        Raises:
            OSError: If the command cannot be started.
        """
        try:
            result = subprocess.run(
                list(self.command),
                cwd=project_dir,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding="utf-8",
                errors="replace",
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            return INCONCLUSIVE

        if result.returncode == 0:
            return CLEAN

        lines = self.extract_diagnostics(result.stdout or "")
        if not lines:
            return CLEAN
        return CompilerOutcome(Status.ERRORS, tuple(lines))


TYPESCRIPT = Checker(
    name="typescript",
    display_name="TypeScript",
    manifest="package.json",
    binary="node_modules/.bin/tsc",
    command=("npx", "tsc", "--noEmit"),
    diagnostic_pattern=r"error TS\d+",
    full_build_command="npm run build",
)

PYRIGHT = Checker(
    name="pyright",
    display_name="Pyright",
    manifest="pyproject.toml",
    binary=".venv/bin/pyright",
    command=(".venv/bin/pyright",),
    diagnostic_pattern=r" - error: ",
    full_build_command="pyright",
)

CHECKERS: tuple[Checker, ...] = (TYPESCRIPT, PYRIGHT)


def probe(project_dir: Path, checkers: tuple[Checker, ...] = CHECKERS) -> Checker | None:
    """Find the first checker the project is set up for.

    Returns:
        The eligible checker, or None if the project has no supported setup.
    """
    for checker in checkers:
        if checker.is_eligible(project_dir):
            return checker
    return None
