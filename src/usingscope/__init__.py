from usingscope.exceptions import (
    AsyncCleanupInSyncContextError,
    UnsupportedResourceError,
    UsingScopeError,
)
from usingscope.executor import ScopeExecutor
from usingscope.policies import SequenceCleanupPolicy
from usingscope.using import using

__all__ = [
    "AsyncCleanupInSyncContextError",
    "ScopeExecutor",
    "SequenceCleanupPolicy",
    "UnsupportedResourceError",
    "UsingScopeError",
    "using",
]
