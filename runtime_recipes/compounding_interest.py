"""Two bank accounts that accrue interest: one discretely, one continuously in fixed point."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .frame import Origin, System, ensure_signed

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1

_FRAC_BITS = 32
_ONE_BITS = 1 << _FRAC_BITS
_MIN_BITS = -(2**63)
_MAX_BITS = 2**63 - 1

#: Blocks between applications of discrete interest.
DISCRETE_INTEREST_PERIOD = 10
#: Interest rate of both accounts, in percent.
INTEREST_PERCENT = 5


def _checked(bits: int) -> int:
    if not _MIN_BITS <= bits <= _MAX_BITS:
        raise OverflowError("fixed-point value out of I32F32 range")
    return bits


def _div_trunc(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    if denominator == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


_Operand = Union["I32F32", int]


@dataclass(frozen=True, order=True)
class I32F32:
    """Signed 64-bit fixed-point number with 32 integer and 32 fractional bits."""

    bits: int = 0

    def __post_init__(self) -> None:
        _checked(self.bits)

    @classmethod
    def from_num(cls, value: int | float) -> I32F32:
        if isinstance(value, I32F32):
            return value
        if isinstance(value, int):
            return cls(_checked(value << _FRAC_BITS))
        return cls(_checked(round(value * _ONE_BITS)))

    def to_float(self) -> float:
        return self.bits / _ONE_BITS

    @staticmethod
    def _bits_of(other: _Operand) -> int:
        if isinstance(other, I32F32):
            return other.bits
        if isinstance(other, int):
            return other << _FRAC_BITS
        return NotImplemented  # type: ignore[return-value]

    def __add__(self, other: _Operand) -> I32F32:
        other_bits = self._bits_of(other)
        if other_bits is NotImplemented:
            return NotImplemented
        return I32F32(_checked(self.bits + other_bits))

    def __sub__(self, other: _Operand) -> I32F32:
        other_bits = self._bits_of(other)
        if other_bits is NotImplemented:
            return NotImplemented
        return I32F32(_checked(self.bits - other_bits))

    def __neg__(self) -> I32F32:
        return I32F32(_checked(-self.bits))

    def __mul__(self, other: _Operand) -> I32F32:
        if isinstance(other, I32F32):
            return I32F32(_checked((self.bits * other.bits) >> _FRAC_BITS))
        if isinstance(other, int):
            return I32F32(_checked(self.bits * other))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: _Operand) -> I32F32:
        if isinstance(other, I32F32):
            return I32F32(_checked(_div_trunc(self.bits << _FRAC_BITS, other.bits)))
        if isinstance(other, int):
            return I32F32(_checked(_div_trunc(self.bits, other)))
        return NotImplemented

    def __repr__(self) -> str:
        return f"I32F32({self.to_float()!r})"


_ONE = I32F32(_ONE_BITS)


def fixed_exp(value: I32F32) -> I32F32:
    """e to the power `value`, by Taylor series; raises OverflowError if out of range."""
    if value.bits < 0:
        return _ONE / fixed_exp(-value)
    result = _ONE
    term = _ONE
    n = 1
    while True:
        term = (term * value) / n
        if term.bits == 0:
            return result
        result = result + term
        n += 1


@dataclass(frozen=True)
class ContinuousAccountData:
    """Balance after the last adjustment and the block at which it was made."""

    principal: I32F32 = field(default_factory=I32F32)
    deposit_date: int = 0


@dataclass(frozen=True)
class DepositedContinuous:
    amount: int


@dataclass(frozen=True)
class WithdrewContinuous:
    amount: int


@dataclass(frozen=True)
class DepositedDiscrete:
    amount: int


@dataclass(frozen=True)
class WithdrewDiscrete:
    amount: int


@dataclass(frozen=True)
class DiscreteInterestApplied:
    """Interest added to the discrete account (the amount, not the new balance)."""

    interest: int


def _percent_of(percent: int, value: int) -> int:
    """`percent`% of `value`, rounded to nearest."""
    return (value * percent + 50) // 100


def _check_u64(value: int) -> int:
    if not 0 <= value <= U64_MAX:
        raise OverflowError(f"value out of u64 range: {value}")
    return value


class CompoundingInterest:
    """A discrete account paying 5% every ten blocks and a continuously compounding account."""

    def __init__(self, system: System) -> None:
        self.system = system
        self.discrete_account = 0
        self.continuous_account = ContinuousAccountData()

    @staticmethod
    def continuous_interest_rate() -> I32F32:
        return I32F32.from_num(1) / (100 // INTEREST_PERCENT)

    def value_of_continuous_account(self, now: int) -> I32F32:
        """Current value of the continuous account: principal * e^(rate * elapsed)."""
        account = self.continuous_account
        elapsed = now - account.deposit_date
        if elapsed < 0:
            raise ValueError("current block precedes the deposit date")
        if elapsed > U32_MAX:
            raise OverflowError("blockchain will not exceed 2^32 blocks")
        exponent = self.continuous_interest_rate() * I32F32.from_num(elapsed)
        return account.principal * fixed_exp(exponent)

    def deposit_continuous(self, origin: Origin, val_to_add: int) -> None:
        ensure_signed(origin)
        _check_u64(val_to_add)
        now = self.system.block_number
        old_value = self.value_of_continuous_account(now)
        self.continuous_account = ContinuousAccountData(
            principal=old_value + I32F32.from_num(val_to_add), deposit_date=now
        )
        self.system.deposit_event(DepositedContinuous(val_to_add))

    def withdraw_continuous(self, origin: Origin, val_to_take: int) -> None:
        ensure_signed(origin)
        _check_u64(val_to_take)
        now = self.system.block_number
        old_value = self.value_of_continuous_account(now)
        self.continuous_account = ContinuousAccountData(
            principal=old_value - I32F32.from_num(val_to_take), deposit_date=now
        )
        self.system.deposit_event(WithdrewContinuous(val_to_take))

    def deposit_discrete(self, origin: Origin, val_to_add: int) -> None:
        ensure_signed(origin)
        _check_u64(val_to_add)
        self.discrete_account = _check_u64(self.discrete_account + val_to_add)
        self.system.deposit_event(DepositedDiscrete(val_to_add))

    def withdraw_discrete(self, origin: Origin, val_to_take: int) -> None:
        ensure_signed(origin)
        _check_u64(val_to_take)
        self.discrete_account = _check_u64(self.discrete_account - val_to_take)
        self.system.deposit_event(WithdrewDiscrete(val_to_take))

    def on_finalize(self, block_number: int) -> None:
        """Apply discrete interest on every tenth block."""
        if block_number % DISCRETE_INTEREST_PERIOD == 0:
            balance = self.discrete_account
            interest = _percent_of(INTEREST_PERCENT, balance) * DISCRETE_INTEREST_PERIOD
            self.discrete_account = _check_u64(balance + interest)
            self.system.deposit_event(DiscreteInterestApplied(interest))