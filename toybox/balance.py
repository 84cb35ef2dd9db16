"""Look up the balance of a bitcoin address through a block explorer."""

from __future__ import annotations

import asyncio
import sys
from typing import Any

import httpx

ENDPOINT = "https://btcscan.org/api/address"

ADDRESS = "bc1qwzrryqr3ja8w7hnja2spmkgfdcgvqwp5swz4af4ngsjecfz0w0pqud7k38"

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _as_i64(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if not _I64_MIN <= value <= _I64_MAX:
        return None
    return value


def _chain_stat(document: Any, key: str) -> int:
    """Return ``chain_stats[key]`` as an integer, or 0 if absent or not one."""
    stats = document.get("chain_stats") if isinstance(document, dict) else None
    value = stats.get(key) if isinstance(stats, dict) else None
    found = _as_i64(value)
    return 0 if found is None else found


async def get_address_balance(address: str, endpoint: str = ENDPOINT) -> int:
    """Return funded minus spent satoshis for ``address``.

    Raises httpx.HTTPError when the request fails and ValueError when the
    body is not JSON.
    """
    async with httpx.AsyncClient() as client:
        response = await client.get(f"{endpoint}/{address}")
    document = response.json()
    funded = _chain_stat(document, "funded_txo_sum")
    spent = _chain_stat(document, "spent_txo_sum")
    return funded - spent


def main(argv: list[str] | None = None) -> int:
    """Print the balance of a well-known address, or the error that stopped it."""
    try:
        balance = asyncio.run(get_address_balance(ADDRESS))
    except (httpx.HTTPError, ValueError) as error:
        print(f"Error: {error}")
    else:
        print(f"Balance: {balance}")
    return 0


if __name__ == "__main__":
    sys.exit(main())