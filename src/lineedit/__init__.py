"""
Line Editor Module

This module provides a minimal in-memory line editor: a single line of text
with a cursor, one-letter editing commands, literal search-and-replace, and a
character trie with exact and wildcard (`.`) lookups.

The module is designed with a clean separation of concerns:
- TextBuffer: the line and its cursor (insert, delete, move, replace)
- PatternTrie: word membership and wildcard lookup, plus replace_all()
- Command parsing: one input line -> one buffer operation
- Engine: independent editing sessions for the REPL, web and desktop front ends

Main Objects:
    TextBuffer(): an empty line with the cursor at 0
    PatternTrie(): an empty trie
    replace_all(text, pattern, replacement): literal, non-rescanning replace
    run_line(buffer, line): execute one command line against a buffer

Example Usage:
    from lineedit import TextBuffer, run_line

    buf = TextBuffer()
    for line in ("i h", "i i", "l", "d"):
        run_line(buf, line)

    snap = buf.snapshot()
    print(f"{snap.text!r} @ {snap.cursor_position}")   # 'i' @ 0

Run `python -m lineedit` for the interactive editor.

Version: 1.0.0
"""

# src/lineedit/__init__.py
from backend.buffer import TextBuffer
from backend.trie import PatternTrie, TrieNode, replace_all
from backend.commands import parse_command, apply_command, run_line
from backend.engine import Engine
from backend.errors import EditorError, InvalidArgument
from backend.models import Snapshot, Command, CommandResult  # re-export

__version__ = "1.0.0"
__all__ = [
    "TextBuffer",
    "PatternTrie",
    "TrieNode",
    "replace_all",
    "parse_command",
    "apply_command",
    "run_line",
    "Engine",
    "EditorError",
    "InvalidArgument",
    "Snapshot",
    "Command",
    "CommandResult",
]
