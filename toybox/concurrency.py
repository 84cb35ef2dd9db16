"""Small demonstrations of awaiting, spawning, joining and selecting."""

from __future__ import annotations

import asyncio
import sys
from typing import Sequence

DELAY = 0.1


async def one() -> None:
    await asyncio.sleep(DELAY)
    print("one...")


async def two() -> None:
    await asyncio.sleep(DELAY)
    print("two...")


async def async_fn(n: int) -> int:
    """Wait briefly, print ``n`` followed by a space, and return it."""
    await asyncio.sleep(DELAY)
    print(f"{n} ", end="")
    return n


async def example_one() -> None:
    """Await two coroutines one after the other."""
    await one()
    await two()


async def example_two() -> list[int]:
    """Spawn a task for each of 0 to 1000 inclusive and await them all."""
    tasks = [asyncio.create_task(async_fn(i)) for i in range(1001)]
    results = [await task for task in tasks]
    print()
    return results


async def example_three() -> list[int]:
    """Run 0 to 999 together as one joined group."""
    results = await asyncio.gather(*(async_fn(i) for i in range(1000)))
    print()
    return list(results)


async def example_four() -> list[int]:
    """Run two coroutines together and wait for both."""
    first, second = await asyncio.gather(async_fn(0), async_fn(1))
    print()
    return [first, second]


async def _select(numbers: Sequence[int]) -> int:
    """Race ``async_fn`` for each number; return the winner and cancel the rest."""
    tasks = {n: asyncio.create_task(async_fn(n)) for n in numbers}
    await asyncio.wait(tasks.values(), return_when=asyncio.FIRST_COMPLETED)
    winner = next(n for n, task in tasks.items() if task.done())
    losers = [task for n, task in tasks.items() if n != winner]
    for task in losers:
        task.cancel()
    await asyncio.gather(*losers, return_exceptions=True)
    return winner


async def select_example() -> int:
    """Race two coroutines and report the one that finished first."""
    winner = await _select((1, 2))
    print(f"async_fn {winner} completed first")
    return winner


async def select_example_two() -> list[int]:
    """Keep racing until each coroutine has won once; return the order of wins."""
    finished: list[int] = []
    while len(finished) < 2:
        remaining = [n for n in (1, 2) if n not in finished]
        winner = await _select(remaining)
        print(f"async_fn {winner} completed first")
        finished.append(winner)
    return finished


async def _run() -> None:
    print("** Example 1: use await to evaluate futures")
    await example_one()
    await asyncio.sleep(1)
    print("** Example 2: execute many tasks in parallel using spawned tasks")
    await example_two()
    print("** Example 3: execute many tasks concurrently using a joined group")
    await example_three()
    print("** Example 4: execute couple concurrently (and quickly), using join")
    await example_four()
    print("****")
    print("****")
    print("****")
    print("SELECT")
    print("** Example 5: use select to execute one of two tasks")
    await select_example()
    print("** Example 6: use select to wait for completion of the two tasks.")
    await select_example_two()


def main(argv: list[str] | None = None) -> int:
    """Run every example in turn."""
    asyncio.run(_run())
    return 0


if __name__ == "__main__":
    sys.exit(main())