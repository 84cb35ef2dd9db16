"""An interactive todo list kept in memory."""

from __future__ import annotations

import enum
import json
import re
import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

from toybox.command_line import Command, get_command
from toybox.prompting import get_text

_INDEX_PATTERN = re.compile(r"\+?[0-9]+")


class Status(enum.Enum):
    """Progress of a todo item; the value is its serialised name."""

    IN_PROGRESS = "InProgres"
    DONE = "Done"


def _describe(status: Status | None) -> str:
    return "None" if status is None else f"Some({status.value})"


@dataclass
class Todo:
    """One item on the list."""

    text: str
    status: Status | None = None

    def __str__(self) -> str:
        text = json.dumps(self.text, ensure_ascii=False)
        return f"Todo {{ text: {text}, status: {_describe(self.status)} }}"

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "status": None if self.status is None else self.status.value,
        }


def _parse_index(raw: str) -> int:
    if not _INDEX_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid item number: {raw!r}")
    return int(raw)


class TodoApp:
    """A list of todos with the operations the interactive loop offers."""

    def __init__(self, todos: Iterable[Todo] = ()) -> None:
        self.todos: list[Todo] = list(todos)

    def list(self) -> list[str]:
        """Return one line per item: its number and its description."""
        return [f"{index} -> {todo}" for index, todo in enumerate(self.todos)]

    def add(self, text: str) -> Todo | None:
        """Append a new item; empty text is ignored and gives None."""
        if not text:
            return None
        todo = Todo(text)
        self.todos.append(todo)
        return todo

    def mark(self, index: int, status: Status) -> Status | None:
        """Set the status of item ``index`` and return its previous status."""
        if not 0 <= index < len(self.todos):
            raise IndexError(f"no todo item number {index}")
        todo = self.todos[index]
        previous = todo.status
        todo.status = status
        return previous

    def to_json(self) -> str:
        """Serialise the list as compact JSON."""
        return json.dumps(
            [todo.to_dict() for todo in self.todos],
            separators=(",", ":"),
            ensure_ascii=False,
        )

    def run(self, reader: TextIO | None = None, writer: TextIO | None = None) -> None:
        """Serve commands from ``reader`` until its input ends."""
        reader = sys.stdin if reader is None else reader
        writer = sys.stdout if writer is None else writer
        while True:
            try:
                command = get_command(reader, writer)
            except EOFError:
                return
            if command is Command.LIST:
                writer.write("List:\n\n")
                for line in self.list():
                    writer.write(line + "\n")
            elif command is Command.DONE:
                writer.write("Mark Item as `Done`:\n\n")
                self._mark_interactively(Status.DONE, reader, writer)
            elif command is Command.IN_PROGRESS:
                writer.write("Mark Item as `In Progress`:\n\n")
                self._mark_interactively(Status.IN_PROGRESS, reader, writer)
            elif command is Command.ADD:
                writer.write("Add New Item:\n\n")
                self.add(get_text("Enter item Text: ", reader, writer))
            elif command is Command.SAVE:
                writer.write(self.to_json() + "\n")

    def _mark_interactively(self, status: Status, reader: TextIO, writer: TextIO) -> None:
        index = _parse_index(get_text("Enter Item Number: ", reader, writer))
        try:
            previous = self.mark(index, status)
        except IndexError:
            return
        todo = self.todos[index]
        writer.write(
            f"{index} -> (text={todo.text} previous={_describe(previous)}"
            f" -> {_describe(todo.status)})\n"
        )


def main(argv: list[str] | None = None) -> int:
    """Run the interactive todo list on standard input and output."""
    TodoApp().run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())