"""Shared fixtures."""

import pytest

from kv_hooks.engine import HookEngine
from kv_hooks.repository import MemoryRepository


class RecordingExecutor:
    """Executor that records dispatches instead of starting a shell."""

    def __init__(self):
        self.calls: list[tuple[str, str, dict[str, str] | None]] = []

    def dispatch(self, command, *, name, context=None):
        self.calls.append((command, name, context))
        return len(self.calls)

    @property
    def commands(self) -> list[str]:
        return [command for command, _, _ in self.calls]


@pytest.fixture
def executor():
    return RecordingExecutor()


@pytest.fixture
def repository():
    return MemoryRepository()


@pytest.fixture
def engine(repository, executor):
    return HookEngine(repository, executor)
