"""Scaffold and maintain package manifest, README and changelog files."""

from .errors import (
    DirectoryCreateFailed,
    FileWriteFailed,
    GenerationError,
    InvalidPathRelation,
    MalformedManifest,
)
from .models import PackageFields
from .orchestrator import GenerationResult, Orchestrator
from .paths import relative_path

__version__ = "0.1.0"

__all__ = [
    "DirectoryCreateFailed",
    "FileWriteFailed",
    "GenerationError",
    "GenerationResult",
    "InvalidPathRelation",
    "MalformedManifest",
    "Orchestrator",
    "PackageFields",
    "relative_path",
]
