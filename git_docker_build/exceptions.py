"""Custom exceptions for Git Docker Build."""


class ConfigurationError(Exception):
    """Raised when the build cannot be configured (before any side effect)."""


class ExternalToolError(Exception):
    """Raised when a git or docker command fails."""

    def __init__(self, message: str, command: list = None, output: str = None):
        self.command = command
        self.output = output
        super().__init__(message)
