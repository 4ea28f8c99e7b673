"""Base exception for fatal setup failures.

Core modules raise subclasses of SetupError after logging the failure;
the CLI turns them into a non-zero exit status.
"""


class SetupError(Exception):
    """Base exception for failures that abort a setup run."""
