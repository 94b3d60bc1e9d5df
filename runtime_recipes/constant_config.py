"""A pallet with a single value bounded by a maximum addend and cleared periodically."""

from __future__ import annotations

from dataclasses import dataclass

from .frame import DispatchError, Origin, System, ensure_signed

U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class Added:
    initial: int
    added: int
    final: int


@dataclass(frozen=True)
class Cleared:
    value: int


class ConstantConfig:
    """Holds `single_value`; additions are capped and the value is cleared every few blocks."""

    def __init__(self, system: System, max_addend: int, clear_frequency: int) -> None:
        if clear_frequency <= 0:
            raise ValueError("clear frequency must be positive")
        self.system = system
        self.max_addend = max_addend
        self.clear_frequency = clear_frequency
        self.single_value = 0

    def add_value(self, origin: Origin, val_to_add: int) -> None:
        """Add to the stored value; `val_to_add` may not exceed the maximum addend."""
        ensure_signed(origin)
        if val_to_add > self.max_addend:
            raise DispatchError("value must be <= maximum add amount constant")
        current = self.single_value
        result = current + val_to_add
        if result > U32_MAX:
            raise DispatchError("Addition overflowed")
        self.single_value = result
        self.system.deposit_event(Added(current, val_to_add, result))

    def set_value(self, origin: Origin, value: int) -> None:
        """Set the stored value directly."""
        ensure_signed(origin)
        if not 0 <= value <= U32_MAX:
            raise ValueError(f"value out of u32 range: {value}")
        self.single_value = value

    def on_finalize(self, block_number: int) -> None:
        if block_number % self.clear_frequency == 0:
            previous = self.single_value
            self.single_value = 0
            self.system.deposit_event(Cleared(previous))