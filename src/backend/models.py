# backend/models.py
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view of a buffer: its text and where the cursor sits."""
    text: str
    cursor_position: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Command:
    """
    One parsed command line.

    Attributes
    ----------
    name : str
        The command letter (see config.CMD_*), or "" for an unrecognized line.
    args : tuple[str, ...]
        Positional arguments: ("x",) for insert, (pattern, replacement)
        for replace, () otherwise.
    raw : str
        The line exactly as typed.
    """
    name: str
    args: Tuple[str, ...] = ()
    raw: str = ""


@dataclass(frozen=True, slots=True)
class CommandResult:
    ok: bool
    snapshot: Snapshot
    quit: bool = False
    message: Optional[str] = None
    command: Optional[Command] = field(default=None, compare=False)

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "quit": self.quit,
            "message": self.message,
            "text": self.snapshot.text,
            "cursor_position": self.snapshot.cursor_position,
        }
