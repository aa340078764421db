from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Iterable

from commandhandler.completion import (
    CommandSealedError,
    CompletionCandidate,
    CompletionIndex,
    CompletionResolver,
)
from commandhandler.config import HandlerSettings, get_settings
from commandhandler.host import (
    CommandMap,
    CommandSender,
    DefaultCompleter,
    PermissionAuthority,
    is_interactive,
)
from commandhandler.permissions import NodePermissionAuthority

logger = logging.getLogger(__name__)

CommandExecutor = Callable[[CommandSender, str, list[str]], bool]


class HandlerState(str, Enum):
    BUILDING = "building"
    SEALED = "sealed"


class CommandHandler:
    """A chat command: metadata, permission-checked execution, tab completion.

    Configure with the chainable ``add_*`` methods, then register it (or call
    ``seal()``). After that the handler is read-only and any further ``add_*``
    call raises CommandSealedError.

        handler = (
            CommandHandler(plugin, "home", run_home)
            .add_description("Teleport home")
            .add_usage("/home [set|del] <name>")
            .add_permission("homes.use")
            .add_completions(0, "set", "del")
        )
        handler.register_command(command_map)
    """

    def __init__(
        self,
        plugin: Any,
        name: str,
        executor: CommandExecutor,
        *,
        permissions: PermissionAuthority | None = None,
        default_completer: DefaultCompleter | None = None,
        settings: HandlerSettings | None = None,
        is_actor: Callable[[CommandSender], bool] = is_interactive,
    ):
        assert plugin is not None
        assert name is not None
        assert len(name) > 0

        self._plugin = plugin
        self._name = name
        self._label = name
        self._executor = executor
        self._permissions: PermissionAuthority = permissions or NodePermissionAuthority()
        self._settings = settings or get_settings()
        self._is_actor = is_actor
        self._state = HandlerState.BUILDING

        self._description = ""
        self._usage = f"/{name}"
        self._permission: str | None = None
        self._permission_message: str | None = None
        self._aliases: tuple[str, ...] = ()

        self._completions = CompletionIndex()
        self._resolver = CompletionResolver(
            self._completions,
            self._permissions,
            fallback=default_completer,
            is_actor=is_actor,
        )

    # --- metadata -----------------------------------------------------------

    def _require_building(self) -> None:
        if self._state is HandlerState.SEALED:
            raise CommandSealedError(f"Command '{self._name}' is sealed and can no longer be modified")

    def add_description(self, description: str | None) -> CommandHandler:
        self._require_building()
        if description:
            self._description = description
        return self

    def add_usage(self, usage: str | None) -> CommandHandler:
        self._require_building()
        if usage:
            self._usage = usage
        return self

    def add_permission(self, permission: str | None) -> CommandHandler:
        self._require_building()
        if permission:
            self._permission = permission
        return self

    def add_permission_message(self, message: str | None) -> CommandHandler:
        self._require_building()
        if message:
            self._permission_message = message
        return self

    def add_aliases(self, *aliases: str) -> CommandHandler:
        self._require_building()
        cleaned = tuple(a for a in aliases if a)
        if cleaned:
            self._aliases = cleaned
        return self

    # --- completions --------------------------------------------------------

    def add_one_completion(
        self, index: int, permission: str | None, text: str, *preceding_words: str
    ) -> CommandHandler:
        """Add one suggestion at argument `index` (0 = first word after the command).

        If `preceding_words` are given, the suggestion only applies when the
        previous word is one of them.
        """
        self._require_building()
        if text and index >= 0:
            self._add_candidates(index, permission, preceding_words, (text,))
        return self

    def add_list_completion(
        self,
        index: int,
        permission: str | None,
        preceding_words: Iterable[str] | None,
        *texts: str,
    ) -> CommandHandler:
        """Add several suggestions at `index` sharing a permission and preceding words."""
        self._require_building()
        if texts and index >= 0:
            self._add_candidates(index, permission, preceding_words, texts)
        return self

    def add_completions(self, index: int, *texts: str, permission: str | None = None) -> CommandHandler:
        return self.add_list_completion(index, permission, None, *texts)

    def _add_candidates(
        self,
        index: int,
        permission: str | None,
        preceding_words: Iterable[str] | None,
        texts: Iterable[str],
    ) -> None:
        if isinstance(preceding_words, str):
            preceding_words = (preceding_words,)
        words = list(preceding_words) if preceding_words is not None else []
        if index == 0 and any(words):
            # Unreachable: there is no word before the first argument.
            logger.warning(
                "Command '%s': ignoring completions %r at index 0 with preceding words %r",
                self._name,
                list(texts),
                words,
            )
            return
        for text in texts:
            if not text:
                continue
            self._completions.add(CompletionCandidate.create(index, text, permission, words))

    # --- lifecycle ----------------------------------------------------------

    def seal(self) -> CommandHandler:
        if self._state is not HandlerState.SEALED:
            self._state = HandlerState.SEALED
            self._completions.freeze()
            logger.debug("Command '%s' sealed", self._name)
        return self

    def register_command(self, command_map: CommandMap) -> bool:
        """Register into `command_map` with an empty namespace; seals on success."""
        if self._state is HandlerState.SEALED:
            logger.warning("Command '%s' is already registered", self._name)
            return False
        if not command_map.register("", self):
            logger.warning("Command map refused to register '%s'", self._name)
            return False
        self.seal()
        logger.info("Registered command '%s' (aliases: %s)", self._name, ", ".join(self._aliases) or "none")
        return True

    # --- accessors ----------------------------------------------------------

    @property
    def plugin(self) -> Any:
        return self._plugin

    @property
    def name(self) -> str:
        return self._name

    @property
    def label(self) -> str:
        return self._label

    @property
    def description(self) -> str:
        return self._description

    @property
    def usage(self) -> str:
        return self._usage

    @property
    def permission(self) -> str | None:
        return self._permission

    @property
    def permission_message(self) -> str | None:
        return self._permission_message

    @property
    def aliases(self) -> tuple[str, ...]:
        return self._aliases

    @property
    def state(self) -> HandlerState:
        return self._state

    @property
    def is_sealed(self) -> bool:
        return self._state is HandlerState.SEALED

    @property
    def completions(self) -> CompletionIndex:
        return self._completions

    # --- host entry points --------------------------------------------------

    def test_permission(self, sender: CommandSender) -> bool:
        if not self._permission:
            return True
        return self._permissions.has_permission(sender, self._permission)

    def execute(self, sender: CommandSender, label: str, args: list[str]) -> bool:
        """Run the command for `sender`. Returns False on any failure."""
        if not self._is_actor(sender):
            logger.debug("Command '%s' ignored for non-interactive sender %r", self._name, sender)
            return False

        if not self.test_permission(sender):
            logger.debug("Command '%s' denied for %s", self._name, getattr(sender, "name", sender))
            if self._settings.using_no_perm:
                sender.send_message(self._permission_message or self._settings.no_permission_message)
            return False

        if self._executor(sender, label, list(args)):
            return True
        sender.send_message(f"{self._settings.usage_color}{self._usage}")
        return False

    def tab_complete(self, sender: CommandSender, alias: str, args: list[str]) -> list[str]:
        return self._resolver.resolve(
            sender,
            list(args),
            alias=alias,
            command_permission=self._permission,
        )

    def __repr__(self) -> str:
        return f"CommandHandler(name={self._name!r}, state={self._state.value})"
