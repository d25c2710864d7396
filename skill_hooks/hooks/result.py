"""Outcome of a hook run, independent of how it reaches the host CLI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Success:
    """Hook produced text for stdout."""

    text: str


@dataclass(frozen=True)
class Skip:
    """Hook had nothing to say."""


@dataclass(frozen=True)
class Fail:
    """Hook hit an error; reason goes to stderr."""

    reason: str


HookResult = Success | Skip | Fail
