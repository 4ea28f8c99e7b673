"""Core setup steps, run context, settings and logging."""
