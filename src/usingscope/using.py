from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Coroutine, Iterator
from typing import Any, TypeVar, overload

from usingscope.executor import MaybeDeferred, ScopeExecutor

R = TypeVar("R")
T = TypeVar("T")

_default_executor = ScopeExecutor()


@overload
def using(resource: R, work: Callable[[R], Awaitable[T]]) -> Coroutine[Any, Any, T]: ...


@overload
def using(resource: R, work: Callable[[R], Iterator[T]]) -> Iterator[T]: ...


@overload
def using(resource: R, work: Callable[[R], AsyncIterator[T]]) -> AsyncIterator[T]: ...


@overload
def using(resource: R, work: Callable[[R], T]) -> MaybeDeferred[T]: ...


def using(resource: Any, work: Callable[[Any], Any]) -> Any:
    """Run ``work(resource)`` and dispose of ``resource`` exactly once afterwards.

    The resource is disposed through its first callable ``dispose``, ``close``
    or ``unsubscribe`` method. ``None`` is accepted and disposes of nothing.

    * Plain return values are returned after cleanup. If cleanup returns an
      awaitable, a coroutine is returned instead and must be awaited.
    * Awaitables are wrapped in a coroutine that disposes once they settle.
    * Iterators and async iterators are wrapped so that the resource is
      disposed when iteration finishes or fails.

    A failure raised by cleanup replaces a failure raised by the work.

    Args:
        resource: Object to dispose of, or ``None``.
        work: Callable receiving ``resource`` as its only argument.

    Raises:
        UnsupportedResourceError: If disposal is attempted on a resource that
            has none of the recognized cleanup methods.

    Examples:
        .. code-block:: python

            size = using(open("data.bin", "rb"), lambda fh: len(fh.read()))

            async def fetch(client: Client) -> bytes:
                return await client.get("/status")

            body = await using(Client(), fetch)

            for line in using(open("log.txt"), lambda fh: iter(fh)):
                print(line)

    """
    return _default_executor.run(resource, work)


__all__ = ["using"]
