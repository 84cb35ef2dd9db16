"""An immutable singly linked list of unsigned 32-bit integers."""

from __future__ import annotations

import sys
from typing import Iterator

_MAX_ELEM = 2**32 - 1


class ConsList:
    """A cons list; a fresh instance is the empty list."""

    __slots__ = ("_head", "_tail")

    def __init__(self) -> None:
        self._head: int | None = None
        self._tail: ConsList | None = None

    def prepend(self, elem: int) -> ConsList:
        """Return a new list with ``elem`` in front of this one."""
        if not 0 <= elem <= _MAX_ELEM:
            raise ValueError(f"element out of range for u32: {elem}")
        node = ConsList()
        node._head = elem
        node._tail = self
        return node

    @property
    def is_empty(self) -> bool:
        return self._tail is None

    def __iter__(self) -> Iterator[int]:
        node = self
        while node._tail is not None:
            yield node._head
            node = node._tail

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def stringify(self) -> str:
        """Return the elements separated by commas, ending in ``Nil``."""
        return ", ".join([*map(str, self), "Nil"])

    __str__ = stringify

    def __repr__(self) -> str:
        return f"ConsList({self.stringify()})"


def main(argv: list[str] | None = None) -> int:
    """Build a small list and print its length and contents."""
    items = ConsList()
    for elem in (1, 2, 3, 99):
        items = items.prepend(elem)
    print(f"linked list has length: {len(items)}")
    print(items.stringify())
    return 0


if __name__ == "__main__":
    sys.exit(main())