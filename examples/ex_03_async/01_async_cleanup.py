"""Awaitable work and asynchronous cleanup."""

from __future__ import annotations

import asyncio

from usingscope import using


class Client:
    def __init__(self) -> None:
        self.closed = False

    async def fetch(self) -> str:
        await asyncio.sleep(0)
        return "200 OK"

    async def close(self) -> None:
        await asyncio.sleep(0)
        self.closed = True


async def main() -> None:
    client = Client()
    pending = using(client, lambda c: c.fetch())
    print(f"closed_before_await={client.closed}")  # => closed_before_await=False
    status = await pending
    print(f"status={status} closed={client.closed}")  # => status=200 OK closed=True

    other = Client()
    length = await using(other, lambda c: len("sync work"))
    print(f"length={length} closed={other.closed}")  # => length=9 closed=True


if __name__ == "__main__":
    asyncio.run(main())
