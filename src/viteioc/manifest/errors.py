"""Exceptions raised while loading a Vite manifest or resolving its entries."""

from pathlib import Path
from typing import Optional, Union


class ManifestError(RuntimeError):
    """Base class for manifest related failures."""


class ManifestUnavailable(ManifestError):
    """Raised when the manifest file cannot be read or parsed."""

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None) -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Vite manifest \"{self.path}\" is unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EntryNotFound(ManifestError, KeyError):
    """Raised when a requested manifest key has no entry or no output file."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"File \"{key}\" not found in Vite manifest.")

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return self.args[0]
