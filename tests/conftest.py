"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import pytest

from commandhandler.command_map import OnlinePlayerCompleter, SimpleCommandMap
from commandhandler.config import HandlerSettings
from commandhandler.host import ConsoleSender, Player


class FakePlugin:
    name = "TestPlugin"


class RecordingExecutor:
    """Executor that records its calls and returns a fixed outcome."""

    def __init__(self, result: bool = True):
        self.result = result
        self.calls: list[tuple[str, str, list[str]]] = []

    def __call__(self, sender, label: str, args: list[str]) -> bool:
        self.calls.append((sender.name, label, list(args)))
        return self.result


@pytest.fixture
def plugin() -> FakePlugin:
    return FakePlugin()


@pytest.fixture
def settings() -> HandlerSettings:
    return HandlerSettings(using_no_perm=True)


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture
def failing_executor() -> RecordingExecutor:
    return RecordingExecutor(result=False)


@pytest.fixture
def player() -> Player:
    return Player(name="Steve")


@pytest.fixture
def admin() -> Player:
    return Player(name="Alex", permissions={"admin"})


@pytest.fixture
def console() -> ConsoleSender:
    return ConsoleSender()


@pytest.fixture
def online_players() -> OnlinePlayerCompleter:
    return OnlinePlayerCompleter(lambda: ["Steve", "Alex", "bob", "Notch"])


@pytest.fixture
def command_map() -> SimpleCommandMap:
    return SimpleCommandMap()
