"""
Buffer module for the line editor.

Defines TextBuffer: a single flat line of text with a cursor. Characters are
inserted at the cursor and deleted just before it, the cursor moves one step
at a time, and search_and_replace() rewrites the whole line literally.
"""
from __future__ import annotations

from .errors import InvalidArgument
from .models import Snapshot
from .trie import PatternTrie


class TextBuffer:
    """A cursor-addressed line of text."""

    def __init__(self) -> None:
        self.text = ""
        self.cursor_position = 0

    def _cursor(self) -> int:
        """
        Cursor clamped to the text. search_and_replace() may leave the stored
        cursor past the end when the text shrinks; reads go through here.
        """
        return min(self.cursor_position, len(self.text))

    def insert_char(self, ch: str) -> None:
        """Insert a single character at the cursor and move the cursor past it."""
        if not isinstance(ch, str) or len(ch) != 1:
            raise InvalidArgument(f"insert_char() takes exactly one character, got {ch!r}")
        pos = self._cursor()
        self.text = self.text[:pos] + ch + self.text[pos:]
        self.cursor_position = pos + 1

    def delete_char_before_cursor(self) -> None:
        """Remove the character left of the cursor. No-op at the start of the line."""
        pos = self._cursor()
        if pos == 0:
            return
        self.text = self.text[:pos - 1] + self.text[pos:]
        self.cursor_position = pos - 1

    def move_cursor_left(self) -> None:
        pos = self._cursor()
        if pos > 0:
            self.cursor_position = pos - 1

    def move_cursor_right(self) -> None:
        if self.cursor_position < len(self.text):
            self.cursor_position += 1

    def search_and_replace(self, pattern: str, replacement: str) -> None:
        """
        Replace every literal occurrence of `pattern` with `replacement`.
        The stored cursor is left where it was, even if the line
        is now shorter; snapshot() reports it clamped.
        """
        self.text = PatternTrie.replace_all(self.text, pattern, replacement)

    def snapshot(self) -> Snapshot:
        return Snapshot(text=self.text, cursor_position=self._cursor())

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return f"TextBuffer(text={self.text!r}, cursor_position={self.cursor_position})"
