# File: jarpack/core/exceptions.py

class JarpackError(Exception):
    """Base class for errors the CLI reports and turns into exit code 1."""


class RootNotFound(FileNotFoundError):
    """The scan root does not exist. Fatal for the whole validation run."""

    def __init__(self, root):
        self.root = root
        super().__init__(f"Source directory '{root}' not found!")


class ConfigError(JarpackError):
    pass


class InvalidVersion(JarpackError):
    pass


class VersionControlError(JarpackError):
    pass


class DeployError(JarpackError):
    """
    Raised when a deployment has to stop.
    Carries the individual problems (e.g. validation errors) for display.
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.details = list(details or [])
