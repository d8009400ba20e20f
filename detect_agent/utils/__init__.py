"""Display and logging helpers for the detect-agent CLI."""
