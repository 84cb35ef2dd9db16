"""Reading a line of text from the user after showing a prompt."""

from __future__ import annotations

import sys
from typing import TextIO


def get_text(prompt: str, reader: TextIO | None = None, writer: TextIO | None = None) -> str:
    """Write ``prompt``, read one line and return it without its last character.

    The last character is normally the line ending. At end of input the
    result is an empty string.
    """
    reader = sys.stdin if reader is None else reader
    writer = sys.stdout if writer is None else writer
    writer.write(prompt)
    writer.flush()
    return reader.readline()[:-1]