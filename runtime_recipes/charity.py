"""A charity whose pot is owned by the pallet and governed by root."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .currency import Balances, NegativeImbalance
from .frame import DispatchError, Origin, System, ensure_root, ensure_signed

#: Pallet identifier from which the pot account is derived; exactly 8 bytes.
PALLET_ID = b"Charity!"


def _pallet_account(pallet_id: bytes) -> bytes:
    return (b"modl" + pallet_id).ljust(32, b"\0")


@dataclass(frozen=True)
class DonationReceived:
    donor: Any
    amount: int
    pot: int


@dataclass(frozen=True)
class ImbalanceAbsorbed:
    amount: int
    pot: int


@dataclass(frozen=True)
class FundsAllocated:
    dest: Any
    amount: int
    pot: int


class Charity:
    """Holds a pot that takes donations and absorbed imbalances, and pays out on root's order."""

    def __init__(self, system: System, currency: Balances) -> None:
        self.system = system
        self.currency = currency
        self.account_id = _pallet_account(PALLET_ID)
        # Genesis: seed the pot with the minimum balance so it exists.
        currency.make_free_balance_be(self.account_id, currency.existential_deposit)

    def pot(self) -> int:
        """The charity's free balance."""
        return self.currency.free_balance(self.account_id)

    def donate(self, origin: Origin, amount: int) -> None:
        donor = ensure_signed(origin)
        try:
            self.currency.transfer(donor, self.account_id, amount)
        except (DispatchError, ValueError) as err:
            raise DispatchError("Can't make donation") from err
        self.system.deposit_event(DonationReceived(donor, amount, self.pot()))

    def allocate(self, origin: Origin, dest: Any, amount: int) -> None:
        """Send funds from the pot; requires root origin."""
        ensure_root(origin)
        try:
            self.currency.transfer(self.account_id, dest, amount)
        except (DispatchError, ValueError) as err:
            raise DispatchError("Can't make allocation") from err
        self.system.deposit_event(FundsAllocated(dest, amount, self.pot()))

    def on_nonzero_unbalanced(self, imbalance: NegativeImbalance) -> None:
        """Absorb funds burned elsewhere into the pot."""
        amount = imbalance.peek()
        self.currency.resolve_creating(self.account_id, imbalance)
        self.system.deposit_event(ImbalanceAbsorbed(amount, self.pot()))