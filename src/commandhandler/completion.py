"""Tab-completion table and resolver.

Candidates are registered per argument position (0 is the first word after
the command name). On each keystroke the resolver looks at the word being
typed, keeps the candidates the sender may see, and hands back to the host's
default completer whenever it has nothing to offer.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from commandhandler.host import CommandSender, DefaultCompleter, PermissionAuthority, is_interactive

logger = logging.getLogger(__name__)


class CommandSealedError(RuntimeError):
    pass


@dataclass(frozen=True)
class CompletionCandidate:
    """One suggestion for one argument position."""

    index: int
    text: str
    permission: str | None = None
    preceding_words: frozenset[str] | None = None  # None = no constraint

    @classmethod
    def create(
        cls,
        index: int,
        text: str,
        permission: str | None = None,
        preceding_words: Iterable[str] | None = None,
    ) -> CompletionCandidate:
        """Build a candidate, normalizing empty constraints to None.

        Empty strings in `preceding_words` are dropped, so a candidate cannot
        be tied to an empty previous word (as typed with a double space). An
        all-empty collection means no constraint.
        """
        if isinstance(preceding_words, str):
            preceding_words = (preceding_words,)
        words = frozenset(w for w in preceding_words if w) if preceding_words is not None else None
        return cls(
            index=index,
            text=text,
            permission=permission or None,
            preceding_words=words or None,
        )

    def follows(self, args: list[str], current: int) -> bool:
        if self.preceding_words is None:
            return True
        # Nothing precedes the first argument.
        if current < 1:
            return False
        return args[current - 1] in self.preceding_words


class CompletionIndex:
    """Argument index -> candidates, in insertion order, duplicates kept."""

    def __init__(self) -> None:
        self._buckets: dict[int, list[CompletionCandidate]] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def add(self, candidate: CompletionCandidate) -> None:
        if self._frozen:
            raise CommandSealedError("Completion index is frozen and can no longer be modified")
        self._buckets.setdefault(candidate.index, []).append(candidate)

    def extend(self, candidates: Iterable[CompletionCandidate]) -> None:
        for candidate in candidates:
            self.add(candidate)

    def bucket(self, index: int) -> tuple[CompletionCandidate, ...]:
        return tuple(self._buckets.get(index, ()))

    def indices(self) -> list[int]:
        return sorted(self._buckets)

    def as_dict(self) -> dict[int, list[CompletionCandidate]]:
        return {i: list(bucket) for i, bucket in self._buckets.items()}

    def __contains__(self, index: object) -> bool:
        return index in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

    def __bool__(self) -> bool:
        return bool(self._buckets)

    def __iter__(self) -> Iterator[CompletionCandidate]:
        for index in self.indices():
            yield from self._buckets[index]


class CompletionResolver:
    def __init__(
        self,
        index: CompletionIndex,
        permissions: PermissionAuthority,
        *,
        fallback: DefaultCompleter | None = None,
        is_actor: Callable[[CommandSender], bool] = is_interactive,
    ):
        self._index = index
        self._permissions = permissions
        self._fallback = fallback
        self._is_actor = is_actor

    def fallback(self, sender: CommandSender, alias: str, args: list[str]) -> list[str]:
        if self._fallback is None:
            return []
        return list(self._fallback.complete(sender, alias, args))

    def resolve(
        self,
        sender: CommandSender,
        args: list[str],
        *,
        alias: str = "",
        command_permission: str | None = None,
    ) -> list[str]:
        """Suggestions for the word currently being typed (the last of `args`).

        Never raises and never returns an empty list of its own: whenever no
        registered candidate matches, the default completer's answer is
        returned instead.
        """
        current = len(args) - 1

        if not self._is_actor(sender):
            return self.fallback(sender, alias, args)
        if command_permission and not self._permissions.has_permission(sender, command_permission):
            return self.fallback(sender, alias, args)
        if not self._index or current not in self._index:
            return self.fallback(sender, alias, args)

        typed = args[current]
        matches = [
            c.text
            for c in self._index.bucket(current)
            if c.follows(args, current)
            and (c.permission is None or self._permissions.has_permission(sender, c.permission))
            and c.text.startswith(typed)
        ]
        logger.debug("Completion at %d for %r: %d match(es)", current, typed, len(matches))

        if not matches:
            return self.fallback(sender, alias, args)
        return matches
