from __future__ import annotations

import inspect
from enum import Enum


class ResultKind(Enum):
    """Shape of the value returned by scoped work."""

    PLAIN = "plain"
    DEFERRED = "deferred"
    SEQUENCE = "sequence"
    ASYNC_SEQUENCE = "async_sequence"


def _has_callable(value: object, name: str) -> bool:
    return callable(getattr(type(value), name, None))


def classify(value: object) -> ResultKind:
    """Tag a produced value with the path that must dispose of its resource.

    Awaitables win over iterators, so generator-based coroutines are deferred.
    Iterables that are not iterators (lists, dicts, sets) are plain values.

    Args:
        value: Value returned by the scoped work.

    """
    if value is None:
        return ResultKind.PLAIN
    if inspect.isawaitable(value):
        return ResultKind.DEFERRED
    if _has_callable(value, "__next__"):
        return ResultKind.SEQUENCE
    if _has_callable(value, "__anext__"):
        return ResultKind.ASYNC_SEQUENCE
    return ResultKind.PLAIN


__all__ = ["ResultKind", "classify"]
