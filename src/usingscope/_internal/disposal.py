from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable
from enum import Enum
from typing import Any

from usingscope._internal.outcomes import Failure, Outcome, Success, capture
from usingscope._internal.resolution import DisposalResolver
from usingscope.exceptions import AsyncCleanupInSyncContextError
from usingscope.policies import SequenceCleanupPolicy

logger = logging.getLogger(__name__)

_DETACHED_CLEANUPS: set[asyncio.Task[None]] = set()

_NOTHING_TO_DO: Success[None] = Success(None)


class DisposalState(Enum):
    """Lifecycle of the cleanup attached to one scope invocation."""

    PENDING = "pending"
    """Cleanup has not been attempted yet."""

    TRIGGERED = "triggered"
    """Cleanup was invoked and its awaitable result has not settled yet."""

    SETTLED = "settled"
    """Cleanup finished, successfully or not."""


class Disposal:
    """Trigger a resource's cleanup exactly once for one scope invocation.

    The cleanup operation is resolved lazily on the first trigger, so a
    resource without a recognized cleanup method only fails when disposal is
    actually attempted. Every later trigger is a no-op that reports success.
    """

    __slots__ = ("_resolver", "_resource", "state")

    def __init__(self, *, resource: Any, resolver: DisposalResolver) -> None:
        self._resource = resource
        self._resolver = resolver
        self.state = DisposalState.PENDING

    def trigger(self) -> Outcome[Any]:
        """Resolve and invoke the cleanup operation once.

        Returns:
            ``Failure`` when resolution or the call raised, otherwise
            ``Success`` holding the call's return value. An awaitable return
            value leaves the state at ``TRIGGERED`` until it is settled.

        """
        if self.state is not DisposalState.PENDING:
            return _NOTHING_TO_DO
        self.state = DisposalState.TRIGGERED

        operation = capture(self._resolver.resolve, self._resource)
        if isinstance(operation, Success) and operation.value is not None:
            logger.debug(
                "Disposing resource of type %s via %s()",
                type(self._resource).__name__,
                getattr(operation.value, "__name__", "<cleanup>"),
            )
            outcome = capture(operation.value)
        else:
            outcome = operation

        if isinstance(outcome, Failure) or not inspect.isawaitable(outcome.value):
            self.state = DisposalState.SETTLED
        return outcome

    async def settle(self, pending: Awaitable[Any]) -> Outcome[None]:
        """Await an asynchronous cleanup result and record how it finished."""
        try:
            await pending
        except BaseException as error:  # noqa: BLE001
            return Failure(error)
        else:
            return _NOTHING_TO_DO
        finally:
            self.state = DisposalState.SETTLED

    async def atrigger(self) -> Outcome[None]:
        """Trigger cleanup and await it when it is asynchronous."""
        outcome = self.trigger()
        if isinstance(outcome, Success) and inspect.isawaitable(outcome.value):
            return await self.settle(outcome.value)
        return outcome

    def trigger_from_sync(self, policy: SequenceCleanupPolicy) -> Outcome[None]:
        """Trigger cleanup from synchronous code that cannot ``await``.

        Without a running loop, asynchronous cleanup is driven to completion
        before returning. With a running loop it is handed to that loop under
        ``DETACH``; under ``BLOCK`` it is discarded unrun and the resource stays
        undisposed.
        """
        outcome = self.trigger()
        if isinstance(outcome, Failure) or not inspect.isawaitable(outcome.value):
            return outcome

        pending = outcome.value
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.settle(pending))

        if policy is SequenceCleanupPolicy.BLOCK:
            if inspect.iscoroutine(pending):
                pending.close()
            self.state = DisposalState.SETTLED
            msg = (
                "Cannot block on asynchronous cleanup while an event loop is running. "
                "Use SequenceCleanupPolicy.DETACH or an async generator. "
                "The resource was not disposed."
            )
            return Failure(AsyncCleanupInSyncContextError(msg))

        task = loop.create_task(self._settle_detached(pending))
        _DETACHED_CLEANUPS.add(task)
        task.add_done_callback(_DETACHED_CLEANUPS.discard)
        return _NOTHING_TO_DO

    async def _settle_detached(self, pending: Awaitable[Any]) -> None:
        outcome = await self.settle(pending)
        if isinstance(outcome, Failure):
            logger.error(
                "Detached cleanup of resource of type %s failed",
                type(self._resource).__name__,
                exc_info=outcome.error,
            )


__all__ = ["Disposal", "DisposalState"]
