from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class UsingScopeError(Exception):
    """Represent a base class for all usingscope-specific failures.

    Catch this type when you want to handle any usingscope error path without
    matching each concrete exception class individually. Failures raised by the
    scoped work or by a resource's own cleanup operation are never wrapped in
    this type; they reach the caller unchanged.
    """


class UnsupportedResourceError(UsingScopeError):
    """Signal that a resource exposes no recognized cleanup operation.

    Raised by ``using`` and ``ScopeExecutor.run`` at the moment disposal is
    attempted, never at scope entry. A ``None`` resource is treated as absent
    and never triggers this error.

    Like any other cleanup failure, this error takes precedence over a failure
    raised by the scoped work.

    Typical fixes include giving the resource a nullary ``dispose``, ``close``
    or ``unsubscribe`` method, or configuring ``dispose_method_names`` on a
    custom ``ScopeExecutor``.
    """

    def __init__(self, resource: Any, method_names: Sequence[str]) -> None:
        self.resource = resource
        self.method_names = tuple(method_names)
        names = ", ".join(f"'{name}'" for name in self.method_names)
        super().__init__(
            f"Object of type '{type(resource).__name__}' provided to using() "
            f"has no callable cleanup method; expected one of {names}.",
        )


class AsyncCleanupInSyncContextError(UsingScopeError):
    """Signal blocking async cleanup requested inside a running event loop.

    Raised when ``SequenceCleanupPolicy.BLOCK`` must drive an awaitable cleanup
    operation to completion from a synchronous iterator step while an event
    loop is already running in the current thread.

    Typical fixes include switching to ``SequenceCleanupPolicy.DETACH``, making
    the scoped work an async generator, or consuming the sequence outside the
    event loop.

    The cleanup awaitable is discarded without running, so the resource is
    left undisposed and will not be disposed again by the same scope.
    """
