from __future__ import annotations

from enum import Enum


class SequenceCleanupPolicy(str, Enum):
    """Select how a synchronous sequence handles asynchronous cleanup.

    Applies only when the scoped work returns an iterator and the resource's
    cleanup operation returns an awaitable. Async iterators always await their
    cleanup before reporting completion.
    """

    DETACH = "detach"
    """Report completion without waiting for async cleanup to finish.

    With a running event loop the cleanup awaitable is scheduled as a task.
    Without one it is driven to completion on a fresh loop.
    """

    BLOCK = "block"
    """Drive async cleanup to completion before reporting completion.

    Cannot be used while an event loop is running in the current thread.
    Doing so raises ``AsyncCleanupInSyncContextError`` and discards the
    cleanup awaitable without running it, leaving the resource undisposed.
    """
