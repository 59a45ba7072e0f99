"""Text file persistence for generated artifacts."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional

from ..errors import DirectoryCreateFailed, FileWriteFailed

_DEFAULT_MODE = 0o644

# utf-8-sig also accepts files without a BOM
TEXT_ENCODING = "utf-8-sig"


def ensure_directory(path: Path) -> bool:
    """Create ``path`` and any missing parents. Returns True when it was created."""
    if path.is_dir():
        return False
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateFailed(exc.strerror or str(exc), path=path) from exc
    return True


def read_bytes_if_exists(path: Path) -> Optional[bytes]:
    """Return the raw file contents, or None when the file does not exist."""
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise FileWriteFailed(f"cannot read: {exc.strerror or exc}", path=path) from exc


def read_text_if_exists(path: Path) -> Optional[str]:
    """Return the file decoded as UTF-8, or None when the file does not exist.

    A leading byte-order mark is dropped.
    """
    data = read_bytes_if_exists(path)
    if data is None:
        return None
    try:
        return data.decode(TEXT_ENCODING)
    except UnicodeDecodeError as exc:
        raise FileWriteFailed(
            f"not valid UTF-8 ({exc.reason} at byte {exc.start})", path=path
        ) from exc


def write_text_atomic(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` via a temporary file in the same directory."""
    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp",
        )
        os.close(fd)
        tmp = Path(tmp_path)
        try:
            # newline="" keeps "\n" on every platform
            with tmp.open("w", encoding="utf-8", newline="") as handle:
                handle.write(content)
            # mkstemp creates 0600 files; keep the mode of the file being replaced
            mode = path.stat().st_mode & 0o777 if path.exists() else _DEFAULT_MODE
            os.chmod(tmp, mode)
            os.replace(tmp, path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise
    except OSError as exc:
        raise FileWriteFailed(exc.strerror or str(exc), path=path) from exc


__all__ = [
    "TEXT_ENCODING",
    "ensure_directory",
    "read_bytes_if_exists",
    "read_text_if_exists",
    "write_text_atomic",
]
