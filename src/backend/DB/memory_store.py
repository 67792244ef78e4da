# backend/DB/memory_store.py
from __future__ import annotations
from typing import Dict, Iterator
from .api import SessionStore
from ..buffer import TextBuffer

class MemoryStore(SessionStore):
    """In-memory session table: session id -> its own TextBuffer."""
    def __init__(self) -> None:
        self._rows: Dict[str, TextBuffer] = {}

    # C
    def create(self, sid: str, buf: TextBuffer) -> None:
        if sid in self._rows:
            raise KeyError(f"session already exists: {sid}")
        self._rows[sid] = buf

    # R
    def read(self, sid: str) -> TextBuffer:
        try:
            return self._rows[sid]
        except KeyError:
            raise KeyError(sid)

    def ids(self) -> Iterator[str]:
        return iter(list(self._rows))

    def count(self) -> int:
        return len(self._rows)

    # D
    def delete(self, sid: str) -> None:
        self._rows.pop(sid, None)

    def close(self) -> None:
        self._rows.clear()
