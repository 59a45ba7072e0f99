"""Filesystem persistence helpers."""

from .files import (
    TEXT_ENCODING,
    ensure_directory,
    read_bytes_if_exists,
    read_text_if_exists,
    write_text_atomic,
)

__all__ = [
    "TEXT_ENCODING",
    "ensure_directory",
    "read_bytes_if_exists",
    "read_text_if_exists",
    "write_text_atomic",
]
