# backend/engine.py
from __future__ import annotations

import os
import uuid
import logging
import threading
from typing import Dict, List, Optional

from . import config as CFG
from .buffer import TextBuffer
from .commands import parse_command, apply_command
from .models import CommandResult, Snapshot
from .DB.api import SessionStore, make_store

log = logging.getLogger(__name__)

if os.environ.get(CFG.VERBOSE_ENV) == "1":
    logging.basicConfig(level=logging.INFO)


class Engine:
    """
    Thin orchestration layer that glues together:
      - session storage via a SessionStore (in-memory),
      - one TextBuffer per session,
      - the command pipeline (commands.parse_command / apply_command).

    Public API (used by the REPL, Flask and the desktop GUI):
      * start(...):          attach a session store
      * open_session(sid):   create an empty buffer, return its id
      * execute(sid, line):  run one command line, return a CommandResult
      * snapshot(sid):       current (text, cursor) of a session
      * close_session(sid):  drop a session
      * shutdown():          release the store
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self._store: Optional[SessionStore] = None
        # one lock per session; execute() holds it for parse + apply
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def start(self, *, db_dsn: Optional[str] = None, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ[CFG.VERBOSE_ENV] = "1"

        dsn = db_dsn or CFG.DEFAULT_STORE_DSN
        log.info("Initializing session store: %s", dsn)
        self._store = make_store(dsn)

    @property
    def started(self) -> bool:
        return self._store is not None

    # ------------- sessions -------------

    def open_session(self, sid: Optional[str] = None) -> str:
        store = self._require_store()
        sid = sid or uuid.uuid4().hex
        store.create(sid, TextBuffer())
        with self._locks_guard:
            self._locks[sid] = threading.Lock()
        log.info("Opened session %s (open sessions=%d)", sid, store.count())
        return sid

    def close_session(self, sid: str) -> None:
        store = self._require_store()
        store.delete(sid)
        with self._locks_guard:
            self._locks.pop(sid, None)
        log.info("Closed session %s", sid)

    def sessions(self) -> List[str]:
        return list(self._require_store().ids())

    def buffer(self, sid: str) -> TextBuffer:
        return self._require_store().read(sid)

    def snapshot(self, sid: str) -> Snapshot:
        buf = self.buffer(sid)
        with self._session_lock(sid):
            return buf.snapshot()

    # ------------- commands -------------

    # /* ~~~ Run one command line against a session's buffer ~~~ */
    def execute(self, sid: str, line: str) -> Optional[CommandResult]:
        """Returns None for an empty line (nothing to do)."""
        buf = self.buffer(sid)
        with self._session_lock(sid):
            cmd = parse_command(line)
            if cmd is None:
                return None
            result = apply_command(buf, cmd)
        log.info("[%s] %r -> ok=%s text=%r cursor=%d",
                 sid, line, result.ok, result.snapshot.text, result.snapshot.cursor_position)
        return result

    # ------------- teardown -------------

    def shutdown(self) -> None:
        try:
            if self._store:
                self._store.close()
        finally:
            self._store = None
            with self._locks_guard:
                self._locks.clear()
            log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_store(self) -> SessionStore:
        if self._store is None:
            raise RuntimeError("Engine not started. Call start() first.")
        return self._store

    def _session_lock(self, sid: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(sid)
            if lock is None:
                lock = self._locks[sid] = threading.Lock()
            return lock
