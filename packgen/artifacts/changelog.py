"""Create the changelog and prepend version entries to it."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Callable, Optional

from ..config import ChangelogConfig
from ..logging import get_logger
from ..models import Outcome, PackageFields
from ..stores import read_text_if_exists, write_text_atomic

logger = get_logger("changelog")

Clock = Callable[[], date]


def local_today() -> date:
    """Default clock: the host's local calendar date."""
    return date.today()


def format_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def render_changelog(
    fields: PackageFields,
    today: date,
    *,
    settings: ChangelogConfig | None = None,
) -> str:
    """Return a fresh changelog holding only the seed entry."""
    settings = settings or ChangelogConfig()
    return (
        f"# {settings.title}\n"
        "\n"
        f"## {fields.version} - {format_date(today)}\n"
        "\n"
        f"- {settings.initial_note}\n"
    )


def render_entry(version: str, today: date, note: Optional[str] = None) -> str:
    """Return one entry block, ending with a blank line."""
    entry = f"## {version} - {format_date(today)}\n\n"
    body = (note or "").strip()
    if body:
        entry += f"{body}\n\n"
    return entry


def prepend_entry(
    path: Path,
    fields: PackageFields,
    note: Optional[str],
    *,
    clock: Clock = local_today,
) -> Outcome:
    """Insert a new entry before every existing byte of the changelog.

    Only runs when the changelog exists and ``note`` has text. Existing
    content is never parsed, so entries are neither reordered nor merged,
    even when the version repeats.
    """
    if not _has_text(note):
        return Outcome.UNCHANGED
    current = read_text_if_exists(path)
    if current is None:
        logger.debug("No changelog at %s; skipping new entry", path)
        return Outcome.UNCHANGED
    write_text_atomic(path, render_entry(fields.version, clock(), note) + current)
    logger.info("Changelog entry %s added: %s", fields.version, path)
    return Outcome.PREPENDED


def ensure_changelog(
    path: Path,
    fields: PackageFields,
    note: Optional[str] = None,
    *,
    clock: Clock = local_today,
    settings: ChangelogConfig | None = None,
) -> Outcome:
    """Create the changelog when absent, otherwise prepend ``note`` if given."""
    if not path.exists():
        write_text_atomic(path, render_changelog(fields, clock(), settings=settings))
        logger.info("Changelog created: %s", path)
        return Outcome.CREATED
    return prepend_entry(path, fields, note, clock=clock)


def _has_text(note: Optional[str]) -> bool:
    return bool(note and note.strip())


__all__ = [
    "Clock",
    "ensure_changelog",
    "format_date",
    "local_today",
    "prepend_entry",
    "render_changelog",
    "render_entry",
]
