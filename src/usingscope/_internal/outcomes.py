from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Stage finished and produced ``value``."""

    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    """Stage finished by raising ``error``."""

    error: BaseException

    def unwrap(self) -> Any:
        raise self.error


Outcome: TypeAlias = Union[Success[T], Failure]


def capture(func: Callable[..., T], *args: Any) -> Outcome[T]:
    """Call ``func`` and record how it finished instead of propagating."""
    try:
        return Success(func(*args))
    except BaseException as error:  # noqa: BLE001
        return Failure(error)


def merge_outcomes(work: Outcome[T], cleanup: Outcome[Any]) -> Outcome[T]:
    """Combine the outcome of the scoped work with the outcome of its cleanup.

    A failed cleanup always wins and masks whatever the work produced, the
    same way an exception raised from a ``finally`` block replaces the one
    being propagated. The masked work failure is kept as ``__context__`` of
    the cleanup failure when that slot is still empty. A successful cleanup
    leaves the work outcome untouched and its own value is discarded.

    Args:
        work: Outcome of the scoped work, or of the awaitable or iterator step
            it produced.
        cleanup: Outcome of invoking, and where needed awaiting, the cleanup
            operation.

    """
    if isinstance(cleanup, Failure):
        if (
            isinstance(work, Failure)
            and work.error is not cleanup.error
            and cleanup.error.__context__ is None
        ):
            cleanup.error.__context__ = work.error
        return cleanup
    return work


__all__ = ["Failure", "Outcome", "Success", "capture", "merge_outcomes"]
