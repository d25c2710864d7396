"""Hook entry points driven by Claude Code lifecycle events."""
