from __future__ import annotations

from dataclasses import dataclass

from commandhandler.host import CommandSender, Player


@dataclass(frozen=True)
class NodePermissionAuthority:
    """Dotted-node permission checks for players.

    A player holds a node if any of these is true:
      - the player is an operator and `ops_have_all` is set
      - the node is granted exactly
      - "*" is granted
      - a parent wildcard is granted ("admin.*" covers "admin" and "admin.ban")

    An explicit negation ("-admin.ban") wins over every wildcard. Senders
    that are not players hold nothing.
    """

    ops_have_all: bool = True

    def has_permission(self, subject: CommandSender, name: str) -> bool:
        if not isinstance(subject, Player):
            return False
        node = name.strip().lower()
        if not node:
            return True

        granted = {p.strip().lower() for p in subject.permissions}
        if f"-{node}" in granted:
            return False
        if self.ops_have_all and subject.op:
            return True
        if node in granted or "*" in granted:
            return True
        return any(f"{parent}.*" in granted for parent in _parents(node))


def _parents(node: str) -> list[str]:
    # "a.b.c" -> ["a.b.c", "a.b", "a"]
    parts = node.split(".")
    return [".".join(parts[:i]) for i in range(len(parts), 0, -1)]
