# runtime-recipes

Small, self-contained blockchain runtime modules that run entirely in memory,
plus a SHA3-256 proof of work. Each module keeps its own state, checks the
caller's `Origin`, raises a `DispatchError` (or a subclass) when a call is
refused, and records events in a shared `System`.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `runtime_recipes.frame`: `Origin.signed(account)` and `Origin.root()`,
  `ensure_signed`, `ensure_root`, `DispatchError`, `BadOrigin`, `Phase`,
  `EventRecord` and `System`. `System` holds the block number and the
  deposited events; `pallet_events(kind)` returns the events of a given type
  in order, and `reset_events()` clears them.
- `runtime_recipes.currency`: `Balances`, with free and reserved balances per
  account and an existential deposit below which accounts are removed;
  `PositiveImbalance` and `NegativeImbalance`; and `CurrencyImbalances`, whose
  `slash_funds` burns reserved funds and `reward_funds` mints into an existing
  account, handing the imbalance to optional `slash` / `reward` callables and
  emitting `SlashFunds` / `RewardFunds`.
- `runtime_recipes.pow`: `Compute` hashes its encoded difficulty, pre-hash and
  nonce with SHA3-256 into a `Seal`; `Seal.encode()` / `Seal.decode()` give a
  96-byte form (little-endian 256-bit integers around the 32-byte work).
  `hash_meets_difficulty(work, difficulty)` is true when the work, read as a
  big-endian integer, times the difficulty fits in 256 bits.
  `MinimalSha3Algorithm` has a fixed difficulty of 1,000,000;
  `Sha3Algorithm` takes a callable that supplies the difficulty for a parent
  and raises `PowError` if it fails. Both `verify` a raw seal. `mine` tries
  nonces from a starting value until a seal meets the difficulty.
- `runtime_recipes.silly_rpc`: `Silly`, with `silly_7()` returning 7 and
  `silly_double(val)` doubling an unsigned 64-bit value. `handle(method,
  params)` dispatches the names `silly_seven` and `silly_double` and raises
  `RpcError` with JSON-RPC codes for unknown methods or bad parameters.
- `runtime_recipes.default_instance`: `DefaultInstance.call` stores the caller
  and emits `Called`.
- `runtime_recipes.basic_token`: `BasicToken` with a total supply of
  21,000,000 by default. `init` gives the whole supply to the first caller
  (a second call raises `AlreadyInitialized`); `transfer` moves tokens and
  emits `Transfer`, raising `InsufficientFunds` when the sender is short.
- `runtime_recipes.constant_config`: `ConstantConfig` holds `single_value`.
  `add_value` refuses amounts above `max_addend` and additions that overflow
  32 bits, emitting `Added`; `set_value` sets it directly; `on_finalize`
  clears it every `clear_frequency` blocks and emits `Cleared`.
- `runtime_recipes.charity`: `Charity` owns a pot account, seeded with the
  existential deposit. `donate` takes funds from a signed caller,
  `allocate` pays out only on a root origin, and `on_nonzero_unbalanced`
  absorbs a `NegativeImbalance` into the pot. Failed transfers raise
  `DispatchError("Can't make donation")` or `"Can't make allocation"`.
- `runtime_recipes.compounding_interest`: `CompoundingInterest` with a
  discrete account and a continuous account. On every tenth block,
  `on_finalize` adds ten times 5 % of the discrete balance and emits
  `DiscreteInterestApplied`. The continuous account compounds at 5 % per
  block as `principal * e^(rate * elapsed)` in `I32F32` fixed point, using
  `fixed_exp`.
- `runtime_recipes.double_map`: `DoubleMap` with a list of all members, each
  member's group, and scores keyed by group and account. `remove_group_score`
  removes every score of the caller's group at once.
- `runtime_recipes.check_membership.loose`: `CheckMembership` checks the
  caller against any object implementing the `AccountSet` protocol
  (`accounts()`), emitting `IsAMember` or raising `NotAMember`.
- `runtime_recipes.check_membership.tight`: `CheckMembership` checks the
  caller by binary search against an object whose `members()` returns a
  sorted sequence.

## Example

```python
from runtime_recipes.frame import Origin, System
from runtime_recipes.constant_config import ConstantConfig, Added

system = System()
system.set_block_number(1)
config = ConstantConfig(system, max_addend=100, clear_frequency=10)

config.set_value(Origin.signed(1), 10)
config.add_value(Origin.signed(2), 100)
assert system.pallet_events(Added) == [Added(10, 100, 110)]
```

Proof of work:

```python
from runtime_recipes.pow import MinimalSha3Algorithm, mine

algorithm = MinimalSha3Algorithm()
pre_hash = bytes(32)
difficulty = 1000
seal = mine(pre_hash, difficulty, 0)
assert algorithm.verify(pre_hash, seal.encode(), difficulty)
```

## What this package does not do

It is a library of in-memory modules only. There is no node to run, no
command-line program, no networking or block import, no persistent storage
and no RPC server: `Silly.handle` dispatches calls but does not listen on any
transport, and `mine` is a plain single-threaded loop rather than a mining
service.