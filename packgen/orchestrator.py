"""Pipeline orchestration for package artifact generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .artifacts import (
    Clock,
    ensure_changelog,
    ensure_manifest,
    fields_from_manifest,
    load_manifest_if_exists,
    local_today,
    prepend_entry,
    write_readme,
)
from .config import PackGenConfig
from .logging import get_logger
from .models import ArtifactResult, Outcome, PackageFields
from .paths import relative_path
from .stores import ensure_directory


@dataclass
class GenerationResult:
    """Artifacts touched by one generation run, in the order they were handled."""

    target_dir: Path
    directory_created: bool = False
    artifacts: List[ArtifactResult] = field(default_factory=list)

    def outcome_for(self, kind: str) -> Optional[Outcome]:
        """Return the last change recorded for ``kind``.

        UNCHANGED when every recorded outcome for ``kind`` is UNCHANGED, and
        None when ``kind`` was never handled.
        """
        outcomes = [result.outcome for result in self.artifacts if result.kind == kind]
        if not outcomes:
            return None
        changed = [outcome for outcome in outcomes if outcome is not Outcome.UNCHANGED]
        return changed[-1] if changed else Outcome.UNCHANGED


class Orchestrator:
    """Keeps a package directory's manifest, README and changelog in sync."""

    def __init__(
        self,
        config: PackGenConfig | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self.config = config or PackGenConfig(root=Path.cwd())
        self.clock = clock or local_today
        self.logger = get_logger("orchestrator")

    def manifest_path(self, target_dir: Path | str) -> Path:
        return Path(target_dir) / self.config.files.manifest

    def readme_path(self, target_dir: Path | str) -> Path:
        return Path(target_dir) / self.config.files.readme

    def changelog_path(self, target_dir: Path | str) -> Path:
        return Path(target_dir) / self.config.files.changelog

    def load_fields(
        self, target_dir: Path | str, base: PackageFields | None = None
    ) -> PackageFields:
        """Return form fields seeded from the manifest, or ``base`` when there is none."""
        base = base or self.config.defaults
        path = self.manifest_path(target_dir)
        document = load_manifest_if_exists(path)
        if document is None:
            self.logger.debug("No manifest at %s; using defaults", path)
            return base
        return fields_from_manifest(
            document,
            base,
            platform_key=self.config.manifest.platform_key,
            path=path,
        )

    def generate(
        self,
        target_dir: Path | str,
        fields: PackageFields,
        note: Optional[str] = None,
    ) -> GenerationResult:
        """Create or update every artifact in ``target_dir``.

        Stops at the first error; files already written stay written.
        """
        target = Path(target_dir)
        self.logger.info("Generating package files in %s", target)
        result = GenerationResult(target_dir=target)
        result.directory_created = ensure_directory(target)

        changelog = self.changelog_path(target)
        if note and note.strip():
            outcome = prepend_entry(changelog, fields, note, clock=self.clock)
            result.artifacts.append(ArtifactResult("changelog", changelog, outcome))

        manifest = self.manifest_path(target)
        outcome = ensure_manifest(manifest, fields, settings=self.config.manifest)
        result.artifacts.append(ArtifactResult("manifest", manifest, outcome))

        readme = self.readme_path(target)
        outcome = write_readme(readme, fields)
        result.artifacts.append(ArtifactResult("readme", readme, outcome))

        # The note was already consumed above; passing it again would duplicate the entry.
        outcome = ensure_changelog(
            changelog, fields, clock=self.clock, settings=self.config.changelog
        )
        result.artifacts.append(ArtifactResult("changelog", changelog, outcome))

        return result

    def relative_path(self, absolute_path: Path | str, base_path: Path | str) -> str:
        return relative_path(absolute_path, base_path)


__all__ = ["GenerationResult", "Orchestrator"]
