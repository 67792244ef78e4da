# backend/errors.py
from __future__ import annotations


class EditorError(Exception):
    """Base class for errors raised by the editor core."""


class InvalidArgument(EditorError, ValueError):
    """
    Raised when an operation is handed input it cannot accept:
      - an empty search pattern (the literal scan could never advance)
      - an empty word for the trie
      - anything other than a single character for insert_char()
    """
