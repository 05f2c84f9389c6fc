"""ts_baselines.io.fs

Atomic artifact writers and the single baseline reader.

Why this module exists
----------------------
The extraction run must never leave a half-written artifact behind: either
every selected baseline was read and the artifact is replaced in one step, or
the previous artifact stays untouched. Writing to a temp file in the target
directory followed by ``os.replace`` gives us that.

Reads go through :func:`read_baseline_text` so every caller reports unreadable
files the same way (:class:`~ts_baselines.io.layout.BaselineReadError`).
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from .layout import BaselineReadError


def _atomic_write_text(
    path: Path,
    write_fn,
    *,
    encoding: str = "utf-8",
    newline: Optional[str] = None,
) -> None:
    """Write a file atomically by writing to a temp file and os.replace()."""

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f"{p.name}.", suffix=".tmp", dir=str(p.parent))
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding=encoding, newline=newline) as f:
            write_fn(f)
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp_path, p)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


def write_text_atomic(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    """Write text atomically, byte for byte (no newline translation)."""

    def _write(f) -> None:
        f.write(text)

    _atomic_write_text(Path(path), _write, encoding=encoding, newline="")


def write_json_atomic(
    path: Path,
    data: Any,
    *,
    indent: int = 2,
    ensure_ascii: bool = False,
    encoding: str = "utf-8",
) -> None:
    """Write JSON atomically, keeping the caller's key order."""

    def _write(f) -> None:
        json.dump(data, f, indent=indent, ensure_ascii=ensure_ascii)

    _atomic_write_text(Path(path), _write, encoding=encoding, newline="")


def read_json(path: Path, *, encoding: str = "utf-8") -> Any:
    with Path(path).open("r", encoding=encoding) as f:
        return json.load(f)


def read_baseline_text(baselines_dir: Path, rel_path: str) -> str:
    """Read one baseline as UTF-8 text.

    Raises
    ------
    BaselineReadError if the file is missing or unreadable.
    """
    path = Path(baselines_dir) / rel_path
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BaselineReadError(rel_path, str(e)) from e
