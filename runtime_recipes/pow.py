"""Sha3-based proof of work: seals, verification and a simple miner."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any, Callable

U256_MAX = 2**256 - 1
_U256_LEN = 32
_H256_LEN = 32
SEAL_LEN = _U256_LEN + _H256_LEN + _U256_LEN

#: Fixed difficulty used by the minimal algorithm.
MINIMAL_DIFFICULTY = 1_000_000


class PowError(Exception):
    """Raised when the consensus environment cannot provide what is needed."""


def _encode_u256(value: int) -> bytes:
    if not 0 <= value <= U256_MAX:
        raise ValueError(f"value out of U256 range: {value}")
    return value.to_bytes(_U256_LEN, "little")


def _check_h256(value: bytes) -> bytes:
    value = bytes(value)
    if len(value) != _H256_LEN:
        raise ValueError(f"hash must be {_H256_LEN} bytes, got {len(value)}")
    return value


def hash_meets_difficulty(work: bytes, difficulty: int) -> bool:
    """True if the hash, read as a big-endian U256, times difficulty fits in U256."""
    return int.from_bytes(_check_h256(work), "big") * difficulty <= U256_MAX


@dataclass(frozen=True)
class Seal:
    difficulty: int
    work: bytes
    nonce: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "work", _check_h256(self.work))
        _encode_u256(self.difficulty)
        _encode_u256(self.nonce)

    def encode(self) -> bytes:
        return _encode_u256(self.difficulty) + self.work + _encode_u256(self.nonce)

    @classmethod
    def decode(cls, data: bytes) -> Seal:
        """Decode a seal from the front of `data`; trailing bytes are ignored."""
        data = bytes(data)
        if len(data) < SEAL_LEN:
            raise ValueError(f"seal needs {SEAL_LEN} bytes, got {len(data)}")
        difficulty = int.from_bytes(data[:_U256_LEN], "little")
        work = data[_U256_LEN:_U256_LEN + _H256_LEN]
        nonce = int.from_bytes(data[_U256_LEN + _H256_LEN:SEAL_LEN], "little")
        return cls(difficulty=difficulty, work=work, nonce=nonce)


@dataclass(frozen=True)
class Compute:
    """A not-yet-computed attempt at the proof of work."""

    difficulty: int
    pre_hash: bytes
    nonce: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "pre_hash", _check_h256(self.pre_hash))

    def encode(self) -> bytes:
        return _encode_u256(self.difficulty) + self.pre_hash + _encode_u256(self.nonce)

    def compute(self) -> Seal:
        work = hashlib.sha3_256(self.encode()).digest()
        return Seal(difficulty=self.difficulty, work=work, nonce=self.nonce)


def _verify_seal(pre_hash: bytes, seal: bytes, difficulty: int) -> bool:
    try:
        decoded = Seal.decode(seal)
    except ValueError:
        return False
    if not hash_meets_difficulty(decoded.work, difficulty):
        return False
    attempt = Compute(difficulty=difficulty, pre_hash=pre_hash, nonce=decoded.nonce)
    return attempt.compute() == decoded


class MinimalSha3Algorithm:
    """Sha3 proof of work with a fixed difficulty."""

    def difficulty(self, parent: Any) -> int:
        return MINIMAL_DIFFICULTY

    def verify(self, pre_hash: bytes, seal: bytes, difficulty: int) -> bool:
        """Check that a raw seal is valid work on `pre_hash` at `difficulty`."""
        return _verify_seal(pre_hash, seal, difficulty)


class Sha3Algorithm:
    """Sha3 proof of work whose difficulty comes from the runtime."""

    def __init__(self, runtime_difficulty: Callable[[Any], int]) -> None:
        self.runtime_difficulty = runtime_difficulty

    def difficulty(self, parent: Any) -> int:
        try:
            return self.runtime_difficulty(parent)
        except Exception as err:
            raise PowError(f"Fetching difficulty from runtime failed: {err!r}") from err

    def verify(self, pre_hash: bytes, seal: bytes, difficulty: int) -> bool:
        """Check that a raw seal is valid work on `pre_hash` at `difficulty`."""
        return _verify_seal(pre_hash, seal, difficulty)


def mine(pre_hash: bytes, difficulty: int, start_nonce: int = 0) -> Seal:
    """Try nonces from `start_nonce` until a seal meets the difficulty."""
    nonce = start_nonce
    while True:
        seal = Compute(difficulty=difficulty, pre_hash=pre_hash, nonce=nonce).compute()
        if hash_meets_difficulty(seal.work, seal.difficulty):
            return seal
        nonce = min(nonce + 1, U256_MAX)
        if nonce == U256_MAX:
            nonce = 0