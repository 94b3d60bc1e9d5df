"""Access control tied directly to a sorted membership list such as the vec-set pallet's."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from ..frame import DispatchError, Origin, System, ensure_signed


class _SortedMembers(Protocol):
    def members(self) -> Sequence[Any]:
        ...


class NotAMember(DispatchError):
    """The caller is not a member."""


@dataclass(frozen=True)
class IsAMember:
    account: Any


class CheckMembership:
    """Checks callers against the sorted member list of a vec-set pallet."""

    def __init__(self, system: System, vec_set: _SortedMembers) -> None:
        self.system = system
        self.vec_set = vec_set

    def check_membership(self, origin: Origin) -> None:
        """Emit `IsAMember` if the caller is a member; raise `NotAMember` otherwise."""
        caller = ensure_signed(origin)
        members = self.vec_set.members()
        index = bisect_left(members, caller)
        if index == len(members) or members[index] != caller:
            raise NotAMember()
        self.system.deposit_event(IsAMember(caller))