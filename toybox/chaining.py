"""Early returns through optional values, and errors from parsing."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Sequence

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_ASCII_DIGITS = frozenset("0123456789")


@dataclass
class Bar:
    baz: str


@dataclass
class Foo:
    bar: Bar | None = None


@dataclass
class Data:
    foo: Foo | None = None


class EmptyVecError(Exception):
    """Raised when a sequence that needs a first item is empty."""

    def __init__(self) -> None:
        super().__init__("invalid first item to double")

    def __repr__(self) -> str:
        return "EmptyVec"


class _ParseIntError(ValueError):
    _MESSAGES = {
        "Empty": "cannot parse integer from empty string",
        "InvalidDigit": "invalid digit found in string",
        "PosOverflow": "number too large to fit in target type",
        "NegOverflow": "number too small to fit in target type",
    }

    def __init__(self, kind: str) -> None:
        super().__init__(self._MESSAGES[kind])
        self.kind = kind

    def __repr__(self) -> str:
        return f"ParseIntError {{ kind: {self.kind} }}"


def _parse_i32(text: str) -> int:
    """Parse a signed 32-bit integer: an optional sign, then ASCII digits only."""
    if not text:
        raise _ParseIntError("Empty")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _ASCII_DIGITS:
        raise _ParseIntError("InvalidDigit")
    value = int(text)
    if value > _I32_MAX:
        raise _ParseIntError("PosOverflow")
    if value < _I32_MIN:
        raise _ParseIntError("NegOverflow")
    return value


def _add_i32(first: int, second: int) -> int:
    total = first + second
    if not _I32_MIN <= total <= _I32_MAX:
        raise OverflowError("attempt to add with overflow")
    return total


def _debug_str(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _print_baz(data: Data) -> str | None:
    """Print the nested ``baz`` and return it; stop at the first missing level."""
    foo = data.foo
    if foo is None:
        return None
    bar = foo.bar
    if bar is None:
        return None
    print(f"baz {_debug_str(bar.baz)}")
    return bar.baz


def chaining_fail() -> str | None:
    """Follow a chain whose first level is missing: nothing is printed."""
    return _print_baz(Data())


def chaining_ok() -> str | None:
    """Follow a fully populated chain, print its ``baz`` and return it."""
    return _print_baz(Data(foo=Foo(bar=Bar(baz="baaaazzz!"))))


def try_to_parse() -> int:
    """Parse two numbers and add them; the second is malformed, so this raises."""
    x = _parse_i32("123")
    y = _parse_i32("24a")
    return _add_i32(x, y)


def parse_and_sum() -> int:
    """Parse two well-formed numbers and return their sum."""
    x = _parse_i32("40")
    y = _parse_i32("2")
    return _add_i32(x, y)


def different_errors(n: str, v: Sequence[int]) -> int:
    """Add the number in ``n`` to the first item of ``v``.

    Raises ValueError when ``n`` is not a 32-bit integer and EmptyVecError
    when ``v`` is empty.
    """
    first = _parse_i32(n)
    if not v:
        raise EmptyVecError()
    return _add_i32(first, v[0])


def _report(n: str, v: Sequence[int]) -> None:
    try:
        result = different_errors(n, v)
    except (ValueError, EmptyVecError) as error:
        print(f"Error found: {error!r}")
    else:
        print(f"Result: {result}")


def main(argv: list[str] | None = None) -> int:
    """Run each of the examples and print what they give."""
    chaining_fail()
    chaining_ok()
    try:
        print(f"try_to_parse: Ok({try_to_parse()})")
    except ValueError as error:
        print(f"try_to_parse: Err({error!r})")
    print(f"parse_and_sum: {parse_and_sum()}")
    _report("10", [11])
    _report("10", [])
    return 0


if __name__ == "__main__":
    sys.exit(main())