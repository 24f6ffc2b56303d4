"""Atomic JSON settings writes guarded by a per-file in-process lock."""

from __future__ import annotations

import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

_path_locks: dict[Path, threading.RLock] = {}
_path_locks_guard = threading.Lock()


@contextmanager
def locked_path(path: Path) -> Iterator[None]:
    """Hold the lock shared by every reader and writer of ``path``."""
    key = path.resolve()
    with _path_locks_guard:
        lock = _path_locks.setdefault(key, threading.RLock())
    with lock:
        yield


def atomic_write_json(path: Path, payload: Any, *, indent: int | None = 2) -> None:
    """
    Replace ``path`` with the JSON encoding of ``payload``.

    The document is written to a sibling temp file, flushed to disk and then
    moved over the target, so readers see either the old or the new file.
    """
    text = json.dumps(payload, indent=indent, sort_keys=True)
    path.parent.mkdir(parents=True, exist_ok=True)
    with locked_path(path):
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, path)
        finally:
            # Only left behind when the write or replace failed
            tmp_path.unlink(missing_ok=True)
