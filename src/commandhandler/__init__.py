"""Chat command helper for plugin hosts.

Command metadata, permission-checked execution and per-argument tab
completion with permission and preceding-word filters.
"""
from __future__ import annotations

from commandhandler.command_map import OnlinePlayerCompleter, SimpleCommandMap, split_command_line
from commandhandler.completion import CompletionCandidate, CompletionIndex, CompletionResolver
from commandhandler.config import HandlerSettings, get_settings
from commandhandler.handler import CommandExecutor, CommandHandler, CommandSealedError, HandlerState
from commandhandler.host import CommandSender, ConsoleSender, Player, is_interactive
from commandhandler.permissions import NodePermissionAuthority

__all__ = [
    "CommandExecutor",
    "CommandHandler",
    "CommandSealedError",
    "HandlerState",
    "CompletionCandidate",
    "CompletionIndex",
    "CompletionResolver",
    "HandlerSettings",
    "get_settings",
    "CommandSender",
    "ConsoleSender",
    "Player",
    "is_interactive",
    "NodePermissionAuthority",
    "OnlinePlayerCompleter",
    "SimpleCommandMap",
    "split_command_line",
]
