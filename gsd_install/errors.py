from pathlib import Path
from typing import Iterable


class InstallerError(Exception):
    """Base user-facing application error."""


class InstallerConfigError(InstallerError):
    """Invalid option combination, detected before any file I/O."""


class UnknownPlatformError(InstallerConfigError):
    def __init__(self, identifier: str, available: Iterable[str]) -> None:
        self.identifier = identifier
        self.available = list(available)
        super().__init__(
            f"Unknown platform: {identifier} (available: {', '.join(self.available)})"
        )


class ConflictingScopeError(InstallerConfigError):
    def __init__(self) -> None:
        super().__init__("Cannot specify both --global and --local")


class IncompatibleOptionsError(InstallerConfigError):
    def __init__(self, message: str) -> None:
        super().__init__(message)


class InstallerFileError(InstallerError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingSourceError(InstallerFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing template source directory")
