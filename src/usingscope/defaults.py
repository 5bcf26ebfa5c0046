from usingscope.policies import SequenceCleanupPolicy

DEFAULT_DISPOSE_METHOD_NAMES: tuple[str, ...] = (
    "dispose",
    "close",
    "unsubscribe",
)
"""Cleanup method names, in the order they are looked up on a resource."""

DEFAULT_SEQUENCE_CLEANUP_POLICY = SequenceCleanupPolicy.DETACH
