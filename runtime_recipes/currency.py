"""A simple currency with reserves and imbalances, and a pallet that mints and burns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from .frame import DispatchError, Origin, System, ensure_signed


@dataclass
class PositiveImbalance:
    """Funds created without a matching decrease elsewhere."""

    amount: int = 0

    def peek(self) -> int:
        return self.amount

    def subsume(self, other: PositiveImbalance | None) -> None:
        """Absorb another positive imbalance; None is ignored."""
        if other is not None:
            self.amount += other.amount
            other.amount = 0


@dataclass
class NegativeImbalance:
    """Funds removed without a matching increase elsewhere."""

    amount: int = 0

    def peek(self) -> int:
        return self.amount


@dataclass
class _Account:
    free: int = 0
    reserved: int = 0

    @property
    def total(self) -> int:
        return self.free + self.reserved


class Balances:
    """Free and reserved balances per account with an existential deposit."""

    def __init__(
        self, balances: Mapping[Any, int] | None = None, existential_deposit: int = 1
    ) -> None:
        self.existential_deposit = existential_deposit
        self._accounts: dict[Any, _Account] = {}
        for account, amount in (balances or {}).items():
            if amount > 0:
                self._accounts[account] = _Account(free=amount)

    @property
    def total_issuance(self) -> int:
        return sum(acc.total for acc in self._accounts.values())

    def exists(self, account: Any) -> bool:
        return account in self._accounts

    def free_balance(self, account: Any) -> int:
        acc = self._accounts.get(account)
        return acc.free if acc else 0

    def reserved_balance(self, account: Any) -> int:
        acc = self._accounts.get(account)
        return acc.reserved if acc else 0

    def make_free_balance_be(
        self, account: Any, amount: int
    ) -> PositiveImbalance | NegativeImbalance:
        """Force the free balance to `amount`; return the resulting imbalance."""
        if amount < 0:
            raise ValueError("balance cannot be negative")
        old = self.free_balance(account)
        acc = self._accounts.setdefault(account, _Account())
        acc.free = amount
        self._reap_if_dust(account)
        if amount >= old:
            return PositiveImbalance(amount - old)
        return NegativeImbalance(old - amount)

    def transfer(self, source: Any, dest: Any, amount: int) -> None:
        """Move free funds, allowing the source account to be reaped."""
        if amount < 0:
            raise ValueError("amount cannot be negative")
        if amount == 0 or source == dest:
            return
        if self.free_balance(source) < amount:
            raise DispatchError("InsufficientBalance")
        if not self.exists(dest) and amount < self.existential_deposit:
            raise DispatchError("ExistentialDeposit")
        self._accounts[source].free -= amount
        self._accounts.setdefault(dest, _Account()).free += amount
        self._reap_if_dust(source)

    def reserve(self, account: Any, amount: int) -> None:
        if self.free_balance(account) < amount:
            raise DispatchError("InsufficientBalance")
        if amount == 0:
            return
        acc = self._accounts[account]
        acc.free -= amount
        acc.reserved += amount

    def slash_reserved(self, account: Any, amount: int) -> tuple[NegativeImbalance, int]:
        """Burn up to `amount` from reserves; return the imbalance and what was left unslashed."""
        acc = self._accounts.get(account)
        if acc is None:
            return NegativeImbalance(0), amount
        actual = min(acc.reserved, amount)
        acc.reserved -= actual
        self._reap_if_dust(account)
        return NegativeImbalance(actual), amount - actual

    def deposit_into_existing(self, account: Any, amount: int) -> PositiveImbalance:
        if amount == 0:
            return PositiveImbalance(0)
        acc = self._accounts.get(account)
        if acc is None:
            raise DispatchError("DeadAccount")
        acc.free += amount
        return PositiveImbalance(amount)

    def resolve_creating(self, account: Any, imbalance: NegativeImbalance) -> None:
        """Credit the funds of a negative imbalance to an account, creating it if needed."""
        amount = imbalance.peek()
        if amount == 0:
            return
        self._accounts.setdefault(account, _Account()).free += amount
        imbalance.amount = 0

    def _reap_if_dust(self, account: Any) -> None:
        acc = self._accounts.get(account)
        if acc is not None and acc.total < self.existential_deposit:
            del self._accounts[account]


@dataclass(frozen=True)
class SlashFunds:
    account: Any
    amount: int
    block_number: int


@dataclass(frozen=True)
class RewardFunds:
    account: Any
    amount: int
    block_number: int


class CurrencyImbalances:
    """Pallet that slashes reserved funds and mints rewards, passing imbalances on.

    Without a handler, an imbalance is simply dropped.
    """

    def __init__(
        self,
        system: System,
        currency: Balances,
        reward: Callable[[PositiveImbalance], None] | None = None,
        slash: Callable[[NegativeImbalance], None] | None = None,
    ) -> None:
        self.system = system
        self.currency = currency
        self.reward = reward
        self.slash = slash

    def slash_funds(self, origin: Origin, to_punish: Any, collateral: int) -> None:
        ensure_signed(origin)
        imbalance, _ = self.currency.slash_reserved(to_punish, collateral)
        if self.slash is not None:
            self.slash(imbalance)
        self.system.deposit_event(
            SlashFunds(to_punish, collateral, self.system.block_number)
        )

    def reward_funds(self, origin: Origin, to_reward: Any, reward: int) -> None:
        ensure_signed(origin)
        total = PositiveImbalance(0)
        try:
            minted = self.currency.deposit_into_existing(to_reward, reward)
        except DispatchError:
            minted = None
        total.subsume(minted)
        if self.reward is not None:
            self.reward(total)
        self.system.deposit_event(
            RewardFunds(to_reward, reward, self.system.block_number)
        )