"""Tests for the usingscope exception hierarchy."""

import pytest

from usingscope import (
    AsyncCleanupInSyncContextError,
    UnsupportedResourceError,
    UsingScopeError,
    using,
)


class Socketless:
    pass


class TestUnsupportedResourceError:
    def test_is_usingscope_error(self) -> None:
        assert issubclass(UnsupportedResourceError, UsingScopeError)

    def test_carries_resource_and_method_names(self) -> None:
        resource = Socketless()

        with pytest.raises(UnsupportedResourceError) as exc_info:
            using(resource, lambda res: None)

        assert exc_info.value.resource is resource
        assert exc_info.value.method_names == ("dispose", "close", "unsubscribe")

    def test_message_names_type_and_methods(self) -> None:
        error = UnsupportedResourceError(Socketless(), ("dispose", "close"))

        assert "'Socketless'" in str(error)
        assert "'dispose', 'close'" in str(error)

    def test_never_raised_for_none(self) -> None:
        assert using(None, lambda res: 1) == 1


class TestAsyncCleanupInSyncContextError:
    def test_is_usingscope_error(self) -> None:
        assert issubclass(AsyncCleanupInSyncContextError, UsingScopeError)


def test_work_failures_are_not_wrapped() -> None:
    class Resource:
        def close(self) -> None:
            pass

    def work(resource: Resource) -> None:
        raise KeyError("missing")

    with pytest.raises(KeyError) as exc_info:
        using(Resource(), work)

    assert not isinstance(exc_info.value, UsingScopeError)
