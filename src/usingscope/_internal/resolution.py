from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from usingscope.defaults import DEFAULT_DISPOSE_METHOD_NAMES
from usingscope.exceptions import UnsupportedResourceError

CleanupOperation = Callable[[], Any]
"""Nullary bound callable that releases a resource, possibly returning an awaitable."""


@dataclass(frozen=True, slots=True)
class DisposalResolver:
    """Find the cleanup operation a resource supports.

    Names are checked in ``method_names`` order and the first callable attribute
    wins, so a resource exposing both ``dispose`` and ``close`` is disposed
    through ``dispose`` only.
    """

    method_names: tuple[str, ...] = DEFAULT_DISPOSE_METHOD_NAMES

    def resolve(self, resource: Any) -> CleanupOperation | None:
        """Return the bound cleanup operation for a resource.

        Args:
            resource: Object offered to the scope, or ``None`` when absent.

        Returns:
            The bound cleanup callable, or ``None`` when the resource is absent.

        Raises:
            UnsupportedResourceError: If none of the configured names resolves
                to a callable attribute.

        """
        if resource is None:
            return None

        for method_name in self.method_names:
            candidate = getattr(resource, method_name, None)
            if callable(candidate):
                return candidate

        raise UnsupportedResourceError(resource, self.method_names)


__all__ = ["CleanupOperation", "DisposalResolver"]
