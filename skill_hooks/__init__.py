"""Skill activation and type-check hooks for Claude Code."""
