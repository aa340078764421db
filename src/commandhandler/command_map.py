"""In-process command registry and the default completion source."""
from __future__ import annotations

import logging
from typing import Callable, Iterable

from commandhandler.handler import CommandHandler
from commandhandler.host import CommandSender

logger = logging.getLogger(__name__)


def split_command_line(command_line: str) -> tuple[str, list[str]]:
    """Split "/cmd a b " into ("cmd", ["a", "b", ""]).

    Splits on single spaces and keeps empty words, so a trailing space means
    the next argument has started with nothing typed yet.
    """
    line = command_line[1:] if command_line.startswith("/") else command_line
    parts = line.split(" ")
    return parts[0].lower(), parts[1:]


class OnlinePlayerCompleter:
    """Suggest online player names matching the last word, case-insensitively."""

    def __init__(self, players: Callable[[], Iterable[str]]):
        self._players = players

    def complete(self, sender: CommandSender, alias: str, args: list[str]) -> list[str]:
        if not args:
            return []
        last = args[-1].lower()
        names = [n for n in self._players() if n.lower().startswith(last)]
        return sorted(names, key=str.lower)


class SimpleCommandMap:
    def __init__(self) -> None:
        self._known: dict[str, CommandHandler] = {}

    def register(self, fallback_prefix: str, command: CommandHandler) -> bool:
        """Register under the label, "prefix:label" and each alias.

        Returns False when the label itself is already taken. Clashing
        aliases are skipped.
        """
        label = command.label.lower()
        if label in self._known:
            logger.warning("Command label already registered: %s", label)
            return False

        self._known[label] = command
        prefix = fallback_prefix.strip().lower()
        if prefix:
            self._known.setdefault(f"{prefix}:{label}", command)

        for alias in command.aliases:
            key = alias.lower()
            if key in self._known:
                logger.warning("Alias '%s' for '%s' already taken, skipping", alias, label)
                continue
            self._known[key] = command
        return True

    def get_command(self, name: str) -> CommandHandler | None:
        return self._known.get(name.lower())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._known

    def __len__(self) -> int:
        return len(self._known)

    def dispatch(self, sender: CommandSender, command_line: str) -> bool:
        label, args = split_command_line(command_line)
        command = self._known.get(label)
        if command is None:
            logger.debug("Unknown command: %s", label)
            return False
        return command.execute(sender, label, args)

    def tab_complete(self, sender: CommandSender, command_line: str) -> list[str] | None:
        label, args = split_command_line(command_line)
        command = self._known.get(label)
        if command is None or not args:
            return None
        return command.tab_complete(sender, label, args)
