# backend/config.py
WILDCARD: str = "."

# /* ~~~ one-letter command grammar: only the first character is looked at ~~~ */
CMD_INSERT: str = "i"
CMD_DELETE: str = "d"
CMD_LEFT: str = "l"
CMD_RIGHT: str = "r"
CMD_REPLACE: str = "s"
CMD_QUIT: str = "q"

# Index of the inserted character in "i <c>"
INSERT_CHAR_INDEX: int = 2

# User-facing text
PROMPT: str = "Enter command: "
WELCOME: str = "Welcome to the Text Editor!"
GOODBYE: str = "Exiting Text Editor. Goodbye!"
INVALID_COMMAND: str = "Invalid command. Please try again."
HELP_LINES: list[str] = [
    "Commands:",
    "- i <char>: Insert character",
    "- d: Delete character at cursor position",
    "- l: Move cursor left",
    "- r: Move cursor right",
    "- s <pattern> <replacement>: Search and replace",
    "- q: Quit",
]

# Session storage ("memory://" is the only backend)
DEFAULT_STORE_DSN: str = "memory://"

# Web UI
WEB_HOST: str = "127.0.0.1"
WEB_PORT: int = 8000

# Set LINEEDIT_VERBOSE=1 to turn on INFO logging
VERBOSE_ENV: str = "LINEEDIT_VERBOSE"
