"""Minimal runtime scaffolding shared by the pallets: origins, errors and events."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class DispatchError(Exception):
    """Raised when a dispatchable call fails."""

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else type(self).__name__
        super().__init__(self.message)


class BadOrigin(DispatchError):
    """The call came from an origin that is not allowed to make it."""


@dataclass(frozen=True)
class Origin:
    """Where a call comes from: a signed account, root, or nobody."""

    signer: Any = None
    is_root: bool = False

    @classmethod
    def signed(cls, account: Any) -> Origin:
        return cls(signer=account)

    @classmethod
    def root(cls) -> Origin:
        return cls(is_root=True)


def ensure_signed(origin: Origin) -> Any:
    """Return the signing account, or raise BadOrigin."""
    if origin.is_root or origin.signer is None:
        raise BadOrigin()
    return origin.signer


def ensure_root(origin: Origin) -> None:
    """Raise BadOrigin unless the origin is root."""
    if not origin.is_root:
        raise BadOrigin()


class Phase(enum.Enum):
    INITIALIZATION = "initialization"
    APPLY_EXTRINSIC = "apply_extrinsic"
    FINALIZATION = "finalization"


@dataclass(frozen=True)
class EventRecord:
    phase: Phase
    event: Any
    topics: tuple = field(default_factory=tuple)


class System:
    """Holds the current block number and the events deposited so far."""

    def __init__(self, block_number: int = 0) -> None:
        self.block_number = block_number
        self.phase = Phase.INITIALIZATION
        self._events: list[EventRecord] = []

    @property
    def events(self) -> list[EventRecord]:
        return list(self._events)

    def set_block_number(self, number: int) -> None:
        self.block_number = number

    def deposit_event(self, event: Any) -> None:
        self._events.append(EventRecord(phase=self.phase, event=event))

    def pallet_events(self, kind: type | tuple[type, ...]) -> list[Any]:
        """Events of the given type (or types), in the order they were deposited."""
        return [record.event for record in self._events if isinstance(record.event, kind)]

    def reset_events(self) -> None:
        self._events.clear()