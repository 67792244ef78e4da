# backend/DB/api.py
from __future__ import annotations
from typing import Protocol, Iterator

from ..buffer import TextBuffer


class SessionStore(Protocol):
    # Create
    def create(self, sid: str, buf: TextBuffer) -> None: ...
    # Read
    def read(self, sid: str) -> TextBuffer: ...
    def ids(self) -> Iterator[str]: ...
    def count(self) -> int: ...
    # Delete
    def delete(self, sid: str) -> None: ...
    # lifecycle
    def close(self) -> None: ...


def make_store(dsn: str) -> SessionStore:
    """
    Factory:
      - memory:// -> MemoryStore (one TextBuffer per session id)
    Buffers are never written to disk, so no other scheme is accepted.
    """
    if dsn.startswith("memory://"):
        from .memory_store import MemoryStore
        return MemoryStore()

    raise ValueError(f"Unsupported store DSN: {dsn}")
