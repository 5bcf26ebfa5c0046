from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from usingscope._internal.disposal import Disposal, DisposalState
from usingscope._internal.outcomes import Failure, merge_outcomes
from usingscope.policies import SequenceCleanupPolicy

if TYPE_CHECKING:
    from typing_extensions import Self

T = TypeVar("T")


class DisposingIterator(Iterator[T], Generic[T]):
    """Iterator proxy that disposes the scoped resource when the inner one ends.

    Values, ``send`` arguments and ``throw`` arguments pass through unchanged.
    The resource is disposed right before ``StopIteration`` or the inner
    failure reaches the caller, and only once. A sequence abandoned before it
    ends leaves the resource undisposed.
    """

    __slots__ = ("_disposal", "_inner", "_policy")

    def __init__(
        self,
        inner: Iterator[T],
        *,
        disposal: Disposal,
        policy: SequenceCleanupPolicy,
    ) -> None:
        self._inner = inner
        self._disposal = disposal
        self._policy = policy

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> T:
        return self._step(self._inner.__next__)

    def send(self, value: Any) -> T:
        return self._step(self._inner.send, value)  # type: ignore[attr-defined]

    def throw(self, *args: Any) -> T:
        return self._step(self._inner.throw, *args)  # type: ignore[attr-defined]

    def _step(self, advance: Callable[..., T], *args: Any) -> T:
        if self._disposal.state is not DisposalState.PENDING:
            return advance(*args)

        try:
            return advance(*args)
        except BaseException as error:  # noqa: BLE001
            step = Failure(error)

        cleanup = self._disposal.trigger_from_sync(self._policy)
        return merge_outcomes(step, cleanup).unwrap()


class DisposingAsyncIterator(AsyncIterator[T], Generic[T]):
    """Async iterator proxy that disposes the scoped resource when the inner one ends.

    Works like ``DisposingIterator`` around ``__anext__``, ``asend`` and
    ``athrow``. Asynchronous cleanup is awaited before ``StopAsyncIteration``
    or the inner failure reaches the caller.
    """

    __slots__ = ("_disposal", "_inner")

    def __init__(self, inner: AsyncIterator[T], *, disposal: Disposal) -> None:
        self._inner = inner
        self._disposal = disposal

    def __aiter__(self) -> Self:
        return self

    async def __anext__(self) -> T:
        return await self._step(self._inner.__anext__)

    async def asend(self, value: Any) -> T:
        return await self._step(self._inner.asend, value)  # type: ignore[attr-defined]

    async def athrow(self, *args: Any) -> T:
        return await self._step(self._inner.athrow, *args)  # type: ignore[attr-defined]

    async def _step(self, advance: Callable[..., Awaitable[T]], *args: Any) -> T:
        if self._disposal.state is not DisposalState.PENDING:
            return await advance(*args)

        try:
            return await advance(*args)
        except BaseException as error:  # noqa: BLE001
            step = Failure(error)

        cleanup = await self._disposal.atrigger()
        return merge_outcomes(step, cleanup).unwrap()


__all__ = ["DisposingAsyncIterator", "DisposingIterator"]
