"""Commands of the todo list and the menu that picks one."""

from __future__ import annotations

import enum
import sys
from typing import TextIO


class Command(enum.Enum):
    """An action the user can ask the todo list for."""

    LIST = enum.auto()
    ADD = enum.auto()
    IN_PROGRESS = enum.auto()
    DONE = enum.auto()
    SAVE = enum.auto()
    NIL = enum.auto()


MENU_OPTIONS = ("List", "Add", "Done", "Progress", "Save")

_KEYWORDS = {
    "list": Command.LIST,
    "done": Command.DONE,
    "add": Command.ADD,
    "progress": Command.IN_PROGRESS,
    "save": Command.SAVE,
}


def cmd(text: str) -> Command:
    """Map a command name, in any case, to its Command; unknown names give NIL."""
    return _KEYWORDS.get(text.lower(), Command.NIL)


def get_command(reader: TextIO | None = None, writer: TextIO | None = None) -> Command:
    """Show the command menu and read the user's choice.

    The choice may be the number shown beside an option or its name.
    Anything else gives ``Command.NIL``. Raises EOFError at end of input.
    """
    reader = sys.stdin if reader is None else reader
    writer = sys.stdout if writer is None else writer

    writer.write("\nSelect command: \n")
    for number, option in enumerate(MENU_OPTIONS, start=1):
        writer.write(f"  {number}) {option}\n")
    writer.write("> ")
    writer.flush()

    line = reader.readline()
    if not line:
        raise EOFError("no command given")

    choice = line.strip()
    if choice.isdigit():
        number = int(choice)
        if not 1 <= number <= len(MENU_OPTIONS):
            return Command.NIL
        choice = MENU_OPTIONS[number - 1]
    return cmd(choice)