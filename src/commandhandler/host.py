"""Host-side collaborators of a command handler.

A real plugin host supplies players, the permission authority, the command
registry and the default completion source. These are the minimal shapes the
handler relies on, plus simple in-process senders that record what they are
sent.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from commandhandler.handler import CommandHandler


class CommandSender:
    name: str

    def send_message(self, message: str) -> None:  # pragma: no cover
        raise NotImplementedError


@dataclass
class Player(CommandSender):
    """An interactive actor: can be messaged and permission-checked."""

    name: str
    permissions: set[str] = field(default_factory=set)
    op: bool = False
    messages: list[str] = field(default_factory=list)

    def send_message(self, message: str) -> None:
        self.messages.append(message)


@dataclass
class ConsoleSender(CommandSender):
    name: str = "CONSOLE"
    messages: list[str] = field(default_factory=list)

    def send_message(self, message: str) -> None:
        self.messages.append(message)


def is_interactive(sender: CommandSender | None) -> bool:
    return isinstance(sender, Player)


class PermissionAuthority(Protocol):
    def has_permission(self, subject: CommandSender, name: str) -> bool:  # pragma: no cover
        ...


class DefaultCompleter(Protocol):
    def complete(self, sender: CommandSender, alias: str, args: list[str]) -> list[str]:  # pragma: no cover
        ...


class CommandMap(Protocol):
    def register(self, fallback_prefix: str, command: CommandHandler) -> bool:  # pragma: no cover
        ...
