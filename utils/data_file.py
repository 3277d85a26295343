'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import json
import os
import uuid
from pathlib import Path
from typing import Any, List, Union

Pathish = Union[str, Path]

__all__ = ["fsync_dir", "atomic_write_bytes", "load_data", "save_data"]


def fsync_dir(dir_path: Pathish) -> None:
    """
    Fsync a directory to persist metadata updates (e.g., renames).
    Safe no-op if the directory doesn't exist.
    """
    d = Path(dir_path)
    if not d.exists():
        return
    fd = os.open(str(d), os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def atomic_write_bytes(dst: Pathish, data: bytes) -> None:
    """
    Atomically write bytes to dst:
      - write a temp file in dst's directory
      - fsync it
      - os.replace over dst
      - fsync the directory
    """
    dst_path = Path(dst)
    dst_dir = dst_path.parent
    dst_dir.mkdir(parents=True, exist_ok=True)
    tmp_path = dst_dir / f".{dst_path.name}.tmp-{os.getpid()}-{uuid.uuid4().hex[:8]}"

    try:
        with open(tmp_path, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, dst_path)
        fsync_dir(dst_dir)
    except Exception:
        # Don't leave the temp file behind
        if tmp_path.exists():
            tmp_path.unlink()
        raise


def load_data(path: Pathish) -> List[Any]:
    """
    Read a hierarchical data list from a JSON file.
    Raises ValueError if the file is not valid JSON or not a JSON list.
    """
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed JSON in {p}: {e}") from e
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list in {p}, found {type(data).__name__}")
    return data


def save_data(path: Pathish, data: List[Any]) -> None:
    """Write a hierarchical data list to `path` as indented JSON, atomically."""
    text = json.dumps(data, indent=2) + "\n"
    atomic_write_bytes(path, text.encode("utf-8"))
