"""A token with a fixed total supply that one account claims, then transfers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .frame import DispatchError, Origin, System, ensure_signed

U64_MAX = 2**64 - 1

#: Total supply used when none is given.
DEFAULT_TOTAL_SUPPLY = 21_000_000


class AlreadyInitialized(DispatchError):
    """The token was initialized before."""


class InsufficientFunds(DispatchError):
    """The sender does not hold enough tokens for the transfer."""


@dataclass(frozen=True)
class Initialized:
    account: Any


@dataclass(frozen=True)
class Transfer:
    source: Any
    dest: Any
    value: int


class BasicToken:
    """Balances per account; the first caller of `init` receives the whole supply."""

    def __init__(self, system: System, total_supply: int = DEFAULT_TOTAL_SUPPLY) -> None:
        if not 0 <= total_supply <= U64_MAX:
            raise ValueError(f"total supply out of u64 range: {total_supply}")
        self.system = system
        self.total_supply = total_supply
        self.is_init = False
        self._balances: dict[Any, int] = {}

    def get_balance(self, account: Any) -> int:
        return self._balances.get(account, 0)

    def init(self, origin: Origin) -> None:
        """Give the total supply to the caller; allowed only once."""
        sender = ensure_signed(origin)
        if self.is_init:
            raise AlreadyInitialized()
        self._balances[sender] = self.total_supply
        self.is_init = True

    def transfer(self, origin: Origin, to: Any, value: int) -> None:
        """Move `value` tokens from the caller to `to`."""
        sender = ensure_signed(origin)
        sender_balance = self.get_balance(sender)
        receiver_balance = self.get_balance(to)

        if value < 0 or value > sender_balance:
            raise InsufficientFunds()
        updated_from = sender_balance - value
        updated_to = receiver_balance + value
        if updated_to > U64_MAX:
            raise OverflowError("Entire supply fits in u64")

        self._balances[sender] = updated_from
        self._balances[to] = updated_to

        self.system.deposit_event(Transfer(sender, to, value))