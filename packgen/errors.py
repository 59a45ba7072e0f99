"""Error types raised while generating package artifacts."""

from __future__ import annotations

from pathlib import Path


class GenerationError(RuntimeError):
    """Base error carrying the file and operation that failed."""

    operation = "generate"

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        message = super().__str__()
        if self.path is None:
            return f"{self.operation}: {message}"
        return f"{self.operation} {self.path}: {message}"


class DirectoryCreateFailed(GenerationError):
    """Raised when the target directory cannot be created."""

    operation = "create directory"


class MalformedManifest(GenerationError):
    """Raised when an existing manifest cannot be parsed."""

    operation = "read manifest"


class FileWriteFailed(GenerationError):
    """Raised when writing or reading an artifact fails with an I/O error."""

    operation = "write file"


class InvalidPathRelation(GenerationError):
    """Raised when one path cannot be expressed relative to another."""

    operation = "relative path"


__all__ = [
    "DirectoryCreateFailed",
    "FileWriteFailed",
    "GenerationError",
    "InvalidPathRelation",
    "MalformedManifest",
]
