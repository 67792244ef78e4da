"""Module-level API over a single default editing session."""
from __future__ import annotations
from backend.engine import Engine
from backend.models import CommandResult, Snapshot

_engine: Engine | None = None
_sid: str | None = None

def initialize(verbose: bool = False, db: str | None = None) -> None:
    """
    Start a fresh engine with one empty session. Calling it again discards
    the previous session.
    """
    global _engine, _sid
    if _engine is not None:
        _engine.shutdown()
    eng = Engine()
    eng.start(db_dsn=db, verbose=verbose)
    _sid = eng.open_session()
    _engine = eng

def execute(line: str) -> CommandResult | None:
    """Run one command line on the default session."""
    if _engine is None or _sid is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine.execute(_sid, line)

def snapshot() -> Snapshot:
    if _engine is None or _sid is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine.snapshot(_sid)

def shutdown() -> None:
    """Release the default engine. Safe to call when nothing is initialized."""
    global _engine, _sid
    try:
        if _engine is not None:
            _engine.shutdown()
    finally:
        _engine = None
        _sid = None
