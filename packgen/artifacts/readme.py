"""README generation. The file is fully derived from the current fields."""

from __future__ import annotations

from pathlib import Path

from ..logging import get_logger
from ..models import Outcome, PackageFields
from ..stores import write_text_atomic

logger = get_logger("readme")


def render_readme(fields: PackageFields) -> str:
    return f"# {fields.package_name}\n\n{fields.description}\n"


def write_readme(path: Path, fields: PackageFields) -> Outcome:
    """Overwrite the README; previous content is not read."""
    outcome = Outcome.UPDATED if path.exists() else Outcome.CREATED
    write_text_atomic(path, render_readme(fields))
    logger.info("README %s: %s", outcome.value, path)
    return outcome


__all__ = ["render_readme", "write_readme"]
