"""Access control against any source of accounts that implements `AccountSet`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Collection, Protocol, runtime_checkable

from ..frame import DispatchError, Origin, System, ensure_signed


@runtime_checkable
class AccountSet(Protocol):
    """Anything that can supply a collection of account identifiers."""

    def accounts(self) -> Collection[Any]:
        """The accounts currently in the set."""
        ...


class NotAMember(DispatchError):
    """The caller is not a member."""


@dataclass(frozen=True)
class IsAMember:
    account: Any


class CheckMembership:
    """Checks callers against a membership source it knows only through `AccountSet`."""

    def __init__(self, system: System, membership_source: AccountSet) -> None:
        self.system = system
        self.membership_source = membership_source

    def check_membership(self, origin: Origin) -> None:
        """Emit `IsAMember` if the caller is in the set; raise `NotAMember` otherwise."""
        caller = ensure_signed(origin)
        if caller not in self.membership_source.accounts():
            raise NotAMember()
        self.system.deposit_event(IsAMember(caller))