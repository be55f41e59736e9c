"""Error taxonomy for the resource compiler."""

from pathlib import Path


class ResourceCompilerError(Exception):
    """Base class for every error that aborts a compile run."""


class UsageError(ResourceCompilerError):
    """Bad or missing command-line arguments."""


class InputDirectoryMissing(ResourceCompilerError):
    """The directory holding the root manifest does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"No directory found at path {path}")


class ConfigError(ResourceCompilerError):
    """Invalid compiler configuration file."""


class ManifestParseError(ResourceCompilerError):
    """A manifest is not valid JSON or lacks a required field."""

    def __init__(self, path: Path, reason: str, name: str | None = None) -> None:
        self.path = path
        self.reason = reason
        self.name = name
        message = f"Invalid manifest {path}: {reason}"
        if name:
            message += f" (resource {name})"
        super().__init__(message)


class AssetNotFound(ResourceCompilerError):
    """A referenced asset or nested manifest does not exist."""

    def __init__(self, path: Path, name: str | None = None) -> None:
        self.path = path
        self.name = name
        message = f"No file found at address: {path}"
        if name:
            message += f" for name {name}"
        super().__init__(message)


class CompilerIOError(ResourceCompilerError):
    """Reading, writing or deleting a file failed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
