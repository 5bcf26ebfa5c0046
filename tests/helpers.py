"""Resource doubles shared by usingscope tests."""

from __future__ import annotations

import asyncio


class Disposable:
    """Resource with a synchronous ``dispose``."""

    def __init__(self) -> None:
        self.is_disposed = False
        self.dispose_calls = 0

    def dispose(self) -> None:
        self.dispose_calls += 1
        self.is_disposed = True


class AsyncDisposable:
    """Resource whose ``dispose`` finishes on a later event loop iteration."""

    def __init__(self) -> None:
        self.is_disposed = False
        self.dispose_calls = 0

    async def dispose(self) -> None:
        self.dispose_calls += 1
        await asyncio.sleep(0)
        self.is_disposed = True


class FailingDisposable:
    """Resource whose ``dispose`` raises."""

    def __init__(self) -> None:
        self.dispose_calls = 0

    def dispose(self) -> None:
        self.dispose_calls += 1
        msg = "dispose failed"
        raise RuntimeError(msg)


class AsyncFailingDisposable:
    """Resource whose asynchronous ``dispose`` raises."""

    def __init__(self) -> None:
        self.dispose_calls = 0

    async def dispose(self) -> None:
        self.dispose_calls += 1
        await asyncio.sleep(0)
        msg = "async dispose failed"
        raise RuntimeError(msg)
