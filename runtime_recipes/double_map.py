"""Members with per-group scores, where a whole group's scores can be removed at once."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .frame import DispatchError, Origin, System, ensure_signed


@dataclass(frozen=True)
class NewMember:
    account: Any


@dataclass(frozen=True)
class MemberJoinsGroup:
    account: Any
    group: int
    score: int


@dataclass(frozen=True)
class RemoveMember:
    account: Any


@dataclass(frozen=True)
class RemoveGroup:
    group: int


class DoubleMap:
    """Scores keyed by (group, account), each account's group, and the list of all members."""

    def __init__(self, system: System) -> None:
        self.system = system
        self._scores: dict[tuple[int, Any], int] = {}
        self._membership: dict[Any, int] = {}
        self._all_members: list[Any] = []

    @property
    def all_members(self) -> list[Any]:
        return list(self._all_members)

    def is_member(self, account: Any) -> bool:
        return account in self._all_members

    def member_score(self, group: int, account: Any) -> int:
        return self._scores.get((group, account), 0)

    def has_score(self, group: int, account: Any) -> bool:
        return (group, account) in self._scores

    def group_membership(self, account: Any) -> int:
        return self._membership.get(account, 0)

    def join_all_members(self, origin: Origin) -> None:
        new_member = ensure_signed(origin)
        if self.is_member(new_member):
            raise DispatchError("already a member, can't join")
        self._all_members.append(new_member)
        self.system.deposit_event(NewMember(new_member))

    def join_a_group(self, origin: Origin, index: int, score: int) -> None:
        member = ensure_signed(origin)
        if not self.is_member(member):
            raise DispatchError("not a member, can't remove")
        self._scores[(index, member)] = score
        self._membership[member] = index
        self.system.deposit_event(MemberJoinsGroup(member, index, score))

    def remove_member(self, origin: Origin) -> None:
        member = ensure_signed(origin)
        if not self.is_member(member):
            raise DispatchError("not a member, can't remove")
        group_id = self._membership.pop(member, 0)
        self._scores.pop((group_id, member), None)
        self.system.deposit_event(RemoveMember(member))

    def remove_group_score(self, origin: Origin, group: int) -> None:
        """Remove every score in `group`; the caller must belong to it."""
        member = ensure_signed(origin)
        group_id = self.group_membership(member)
        if group_id != group:
            raise DispatchError("member isn't in the group, can't remove it")
        self._scores = {key: v for key, v in self._scores.items() if key[0] != group_id}
        self.system.deposit_event(RemoveGroup(group_id))