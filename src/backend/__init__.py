from .engine import Engine
from .buffer import TextBuffer
from .trie import PatternTrie, TrieNode, replace_all
from .errors import EditorError, InvalidArgument

__all__ = [
    "Engine",
    "TextBuffer",
    "PatternTrie",
    "TrieNode",
    "replace_all",
    "EditorError",
    "InvalidArgument",
]
