"""Sequence cleanup policy: waiting for async cleanup from a sync iterator."""

from __future__ import annotations

import asyncio

from usingscope import ScopeExecutor, SequenceCleanupPolicy


class Subscription:
    def __init__(self) -> None:
        self.active = True

    async def unsubscribe(self) -> None:
        await asyncio.sleep(0)
        self.active = False


async def consume_detached() -> None:
    subscription = Subscription()
    executor = ScopeExecutor()
    events = list(executor.run(subscription, lambda sub: iter(["tick", "tock"])))
    print(f"events={events} active={subscription.active}")  # => events=['tick', 'tock'] active=True
    await asyncio.sleep(0)
    await asyncio.sleep(0)
    print(f"after_yield active={subscription.active}")  # => after_yield active=False


def consume_blocking() -> None:
    subscription = Subscription()
    executor = ScopeExecutor(sequence_cleanup_policy=SequenceCleanupPolicy.BLOCK)
    events = list(executor.run(subscription, lambda sub: iter(["tick"])))
    print(f"events={events} active={subscription.active}")  # => events=['tick'] active=False


if __name__ == "__main__":
    asyncio.run(consume_detached())
    consume_blocking()
