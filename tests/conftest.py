"""Shared pytest fixtures for usingscope tests."""

import pytest

from tests.helpers import (
    AsyncDisposable,
    AsyncFailingDisposable,
    Disposable,
    FailingDisposable,
)
from usingscope import ScopeExecutor


@pytest.fixture()
def disposable() -> Disposable:
    return Disposable()


@pytest.fixture()
def async_disposable() -> AsyncDisposable:
    return AsyncDisposable()


@pytest.fixture()
def failing_disposable() -> FailingDisposable:
    return FailingDisposable()


@pytest.fixture()
def async_failing_disposable() -> AsyncFailingDisposable:
    return AsyncFailingDisposable()


@pytest.fixture()
def executor() -> ScopeExecutor:
    """Executor with default configuration."""
    return ScopeExecutor()
