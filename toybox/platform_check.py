"""Report whether the program is running on Linux."""

from __future__ import annotations

import platform
import sys


def _is_linux(system: str | None) -> bool:
    return (platform.system() if system is None else system) == "Linux"


def are_you_on_linux(system: str | None = None) -> str:
    """Return a message saying whether ``system`` (default: this one) is Linux."""
    if _is_linux(system):
        return "You are running linux!"
    return "You are *not* running linux!"


def main(argv: list[str] | None = None) -> int:
    """Print whether this system is Linux, twice over."""
    linux = _is_linux(None)
    print(are_you_on_linux())
    print("Are you sure?")
    if linux:
        print("Yes. It's definitely linux!")
    else:
        print("Yes. It's definitely *not* linux!")
    return 0


if __name__ == "__main__":
    sys.exit(main())