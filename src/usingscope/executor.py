from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Coroutine, Iterator, Sequence
from typing import Any, TypeVar, Union, overload

from usingscope._internal.classification import ResultKind, classify
from usingscope._internal.disposal import Disposal
from usingscope._internal.outcomes import Failure, Outcome, Success, capture, merge_outcomes
from usingscope._internal.resolution import DisposalResolver
from usingscope._internal.sequences import DisposingAsyncIterator, DisposingIterator
from usingscope.defaults import DEFAULT_DISPOSE_METHOD_NAMES, DEFAULT_SEQUENCE_CLEANUP_POLICY
from usingscope.policies import SequenceCleanupPolicy

logger = logging.getLogger(__name__)

R = TypeVar("R")
T = TypeVar("T")

MaybeDeferred = Union[T, Coroutine[Any, Any, T]]
"""Plain result, or a coroutine when the resource's cleanup is asynchronous."""


class ScopeExecutor:
    """Run work against a resource and dispose of the resource exactly once.

    The shape of the value returned by the work decides when cleanup happens:

    * a plain value (or a raised exception) is followed by immediate cleanup;
      if the cleanup operation returns an awaitable, the result is promoted to
      a coroutine that awaits cleanup first;
    * an awaitable is wrapped in a coroutine that awaits it, then awaits
      cleanup;
    * an iterator or async iterator is wrapped in a proxy that disposes of the
      resource when iteration ends or fails.

    When both the work and the cleanup fail, the cleanup failure is the one
    that propagates.

    Args:
        dispose_method_names: Cleanup method names looked up on resources, in
            priority order.
        sequence_cleanup_policy: How a synchronous iterator handles an
            asynchronous cleanup operation.

    Examples:
        .. code-block:: python

            executor = ScopeExecutor(dispose_method_names=("release", "close"))
            rows = executor.run(connection, lambda conn: conn.fetch_all())

    """

    __slots__ = ("_resolver", "_sequence_cleanup_policy")

    def __init__(
        self,
        *,
        dispose_method_names: Sequence[str] = DEFAULT_DISPOSE_METHOD_NAMES,
        sequence_cleanup_policy: SequenceCleanupPolicy = DEFAULT_SEQUENCE_CLEANUP_POLICY,
    ) -> None:
        if isinstance(dispose_method_names, str) or not dispose_method_names:
            msg = "dispose_method_names must be a non-empty sequence of method names."
            raise ValueError(msg)
        self._resolver = DisposalResolver(method_names=tuple(dispose_method_names))
        self._sequence_cleanup_policy = SequenceCleanupPolicy(sequence_cleanup_policy)

    @property
    def dispose_method_names(self) -> tuple[str, ...]:
        return self._resolver.method_names

    @property
    def sequence_cleanup_policy(self) -> SequenceCleanupPolicy:
        return self._sequence_cleanup_policy

    @overload
    def run(
        self,
        resource: R,
        work: Callable[[R], Awaitable[T]],
    ) -> Coroutine[Any, Any, T]: ...

    @overload
    def run(self, resource: R, work: Callable[[R], Iterator[T]]) -> Iterator[T]: ...

    @overload
    def run(self, resource: R, work: Callable[[R], AsyncIterator[T]]) -> AsyncIterator[T]: ...

    @overload
    def run(self, resource: R, work: Callable[[R], T]) -> MaybeDeferred[T]: ...

    def run(self, resource: Any, work: Callable[[Any], Any]) -> Any:
        """Call ``work(resource)`` and tie the resource's cleanup to its result.

        Args:
            resource: Object offering ``dispose``/``close``/``unsubscribe`` (or
                the configured names), or ``None`` for no cleanup.
            work: Callable receiving ``resource`` as its only argument.

        Returns:
            The work's value, a coroutine, or a disposing iterator, depending on
            what the work returned and whether cleanup is asynchronous.

        Raises:
            UnsupportedResourceError: If disposal is attempted on a resource
                without a recognized cleanup method.

        """
        disposal = Disposal(resource=resource, resolver=self._resolver)
        produced = capture(work, resource)
        if isinstance(produced, Failure):
            logger.debug("Scoped work raised %r, disposing immediately", produced.error)
            return self._dispose_after_plain(disposal, produced)

        kind = classify(produced.value)
        logger.debug(
            "Scoped work for resource of type %s produced a %s result",
            type(resource).__name__,
            kind.value,
        )
        if kind is ResultKind.DEFERRED:
            return self._dispose_after_deferred(disposal, produced.value)
        if kind is ResultKind.SEQUENCE:
            return DisposingIterator(
                produced.value,
                disposal=disposal,
                policy=self._sequence_cleanup_policy,
            )
        if kind is ResultKind.ASYNC_SEQUENCE:
            return DisposingAsyncIterator(produced.value, disposal=disposal)
        return self._dispose_after_plain(disposal, produced)

    def _dispose_after_plain(self, disposal: Disposal, produced: Outcome[Any]) -> Any:
        cleanup = disposal.trigger()
        if isinstance(cleanup, Success) and inspect.isawaitable(cleanup.value):
            return self._await_cleanup(disposal, produced, cleanup.value)
        return merge_outcomes(produced, cleanup).unwrap()

    async def _await_cleanup(
        self,
        disposal: Disposal,
        produced: Outcome[Any],
        pending: Awaitable[Any],
    ) -> Any:
        cleanup = await disposal.settle(pending)
        return merge_outcomes(produced, cleanup).unwrap()

    async def _dispose_after_deferred(self, disposal: Disposal, deferred: Awaitable[Any]) -> Any:
        try:
            produced: Outcome[Any] = Success(await deferred)
        except BaseException as error:  # noqa: BLE001
            produced = Failure(error)

        cleanup = await disposal.atrigger()
        return merge_outcomes(produced, cleanup).unwrap()


__all__ = ["MaybeDeferred", "ScopeExecutor"]
