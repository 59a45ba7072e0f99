"""Core data models shared across packgen components."""

from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class PackageFields:
    """User-entered values that drive every generated artifact."""

    company: str
    framework: str
    package_name: str
    author: str
    version: str
    description: str
    platform_version: str

    @classmethod
    def defaults(cls) -> "PackageFields":
        return cls(
            company="YourCompanyName",
            framework="YourFrameworkName",
            package_name="MyCustomPackage",
            author="Your Name",
            version="0.0.1",
            description="A custom package for Unity.",
            platform_version="XXXX.X",
        )

    @property
    def manifest_name(self) -> str:
        """Reverse-domain identifier; only this value is lower-cased."""
        return (
            f"com.{self.company.lower()}.{self.framework.lower()}."
            f"{self.package_name.lower()}"
        )

    @property
    def display_name(self) -> str:
        return f"{self.framework}.{self.package_name}"

    def merged(self, overrides: Mapping[str, Any]) -> "PackageFields":
        """Return a copy with every non-None override applied."""
        known = {item.name for item in fields(self)}
        changes = {
            key: str(value)
            for key, value in overrides.items()
            if key in known and value is not None
        }
        return replace(self, **changes) if changes else self

    def as_dict(self) -> Dict[str, str]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


class Outcome(str, Enum):
    """What a single artifact operation did to the file on disk."""

    CREATED = "created"
    UPDATED = "updated"
    PREPENDED = "prepended"
    UNCHANGED = "unchanged"


@dataclass
class ArtifactResult:
    """Path and outcome for one generated artifact."""

    kind: str
    path: Path
    outcome: Outcome
