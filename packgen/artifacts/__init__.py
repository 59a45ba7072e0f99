"""Writers for the three package artifacts."""

from .changelog import Clock, ensure_changelog, local_today, prepend_entry
from .manifest import ensure_manifest, fields_from_manifest, load_manifest_if_exists
from .readme import write_readme

__all__ = [
    "Clock",
    "ensure_changelog",
    "ensure_manifest",
    "fields_from_manifest",
    "load_manifest_if_exists",
    "local_today",
    "prepend_entry",
    "write_readme",
]
