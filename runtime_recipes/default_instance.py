"""A pallet with a single call that records who called it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .frame import Origin, System, ensure_signed


@dataclass(frozen=True)
class Called:
    account: Any


class DefaultInstance:
    """Stores the most recent caller and emits an event for each call."""

    def __init__(self, system: System) -> None:
        self.system = system
        self.caller: Any = None

    def call(self, origin: Origin) -> None:
        caller = ensure_signed(origin)
        self.caller = caller
        self.system.deposit_event(Called(caller))