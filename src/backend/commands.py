"""
Command parsing and execution for the line editor.

A command is one line of input whose first character picks the operation:

    i <c>                       insert <c> at the cursor
    d                           delete the character before the cursor
    l / r                       move the cursor left / right
    s <pattern> <replacement>   replace every <pattern> with <replacement>
    q                           quit

Only the first character is inspected ("delete" works as "d"). For "s",
the pattern is the text between the first and second space and the
replacement is everything after the second space, spaces included.
"""
from __future__ import annotations

import logging
from typing import Optional

from . import config as CFG
from .buffer import TextBuffer
from .errors import InvalidArgument
from .models import Command, CommandResult

log = logging.getLogger(__name__)

INVALID = ""


def _parse_replace(line: str) -> tuple[str, ...]:
    first = line.find(" ")
    if first == -1 or len(line) <= first + 1:
        return ()
    second = line.find(" ", first + 1)
    if second == -1 or len(line) <= second + 1:
        return ()
    return (line[first + 1:second], line[second + 1:])


def parse_command(line: str) -> Optional[Command]:
    """Turn one input line into a Command. Returns None for an empty line."""
    if not line:
        return None
    letter = line[0]

    if letter == CFG.CMD_INSERT:
        args = (line[CFG.INSERT_CHAR_INDEX],) if len(line) > CFG.INSERT_CHAR_INDEX else ()
        return Command(letter, args, line)
    if letter == CFG.CMD_REPLACE:
        return Command(letter, _parse_replace(line), line)
    if letter in (CFG.CMD_DELETE, CFG.CMD_LEFT, CFG.CMD_RIGHT, CFG.CMD_QUIT):
        return Command(letter, (), line)
    return Command(INVALID, (), line)


def apply_command(buf: TextBuffer, cmd: Command) -> CommandResult:
    """
    Run a parsed command against a buffer.

    Incomplete "i" and "s" lines do nothing, as do boundary moves. An
    unrecognized letter, or a replace with an empty pattern, comes back
    with ok=False and a message; the buffer is untouched in both cases.
    """
    name, args = cmd.name, cmd.args

    if name == CFG.CMD_QUIT:
        return CommandResult(ok=True, snapshot=buf.snapshot(), quit=True, command=cmd)

    if name == CFG.CMD_INSERT:
        if args:
            buf.insert_char(args[0])
    elif name == CFG.CMD_DELETE:
        buf.delete_char_before_cursor()
    elif name == CFG.CMD_LEFT:
        buf.move_cursor_left()
    elif name == CFG.CMD_RIGHT:
        buf.move_cursor_right()
    elif name == CFG.CMD_REPLACE:
        if args:
            pattern, replacement = args
            try:
                buf.search_and_replace(pattern, replacement)
            except InvalidArgument as exc:
                log.warning("Rejected replace %r: %s", cmd.raw, exc)
                return CommandResult(ok=False, snapshot=buf.snapshot(), message=str(exc), command=cmd)
    else:
        log.warning("Invalid command: %r", cmd.raw)
        return CommandResult(ok=False, snapshot=buf.snapshot(), message=CFG.INVALID_COMMAND, command=cmd)

    return CommandResult(ok=True, snapshot=buf.snapshot(), command=cmd)


def run_line(buf: TextBuffer, line: str) -> Optional[CommandResult]:
    """parse_command() + apply_command(); None when the line is empty."""
    cmd = parse_command(line)
    if cmd is None:
        return None
    return apply_command(buf, cmd)
