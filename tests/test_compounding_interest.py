import math

import pytest

from runtime_recipes.compounding_interest import (
    CompoundingInterest,
    ContinuousAccountData,
    DepositedContinuous,
    DepositedDiscrete,
    DiscreteInterestApplied,
    I32F32,
    WithdrewContinuous,
    WithdrewDiscrete,
    fixed_exp,
)
from runtime_recipes.frame import BadOrigin, Origin, System

PALLET_EVENTS = (
    DepositedContinuous,
    WithdrewContinuous,
    DepositedDiscrete,
    WithdrewDiscrete,
    DiscreteInterestApplied,
)


@pytest.fixture
def system():
    s = System()
    s.set_block_number(1)
    return s


@pytest.fixture
def pallet(system):
    return CompoundingInterest(system)


def test_deposit_withdraw_discrete_works(system, pallet):
    pallet.deposit_discrete(Origin.signed(1), 10)
    pallet.withdraw_discrete(Origin.signed(1), 5)
    assert system.pallet_events(PALLET_EVENTS) == [
        DepositedDiscrete(10),
        WithdrewDiscrete(5),
    ]
    assert pallet.discrete_account == 5


def test_discrete_interest_works(system, pallet):
    pallet.deposit_discrete(Origin.signed(1), 100)
    pallet.on_finalize(3)
    assert pallet.discrete_account == 100
    pallet.on_finalize(10)
    assert system.pallet_events(PALLET_EVENTS) == [
        DepositedDiscrete(100),
        DiscreteInterestApplied(50),
    ]
    assert pallet.discrete_account == 150


def test_withdraw_more_than_discrete_balance_fails(pallet):
    pallet.deposit_discrete(Origin.signed(1), 3)
    with pytest.raises(OverflowError):
        pallet.withdraw_discrete(Origin.signed(1), 4)
    assert pallet.discrete_account == 3


def test_unsigned_origin_rejected(pallet):
    with pytest.raises(BadOrigin):
        pallet.deposit_discrete(Origin.root(), 10)
    assert pallet.discrete_account == 0


def test_continuous_deposit_records_principal_and_date(system, pallet):
    pallet.deposit_continuous(Origin.signed(1), 100)
    assert pallet.continuous_account == ContinuousAccountData(I32F32.from_num(100), 1)
    assert system.pallet_events(PALLET_EVENTS) == [DepositedContinuous(100)]
    assert pallet.value_of_continuous_account(1) == I32F32.from_num(100)


def test_continuous_value_grows_over_time(system, pallet):
    pallet.deposit_continuous(Origin.signed(1), 100)
    later = pallet.value_of_continuous_account(11)
    assert later > pallet.value_of_continuous_account(5)
    assert later.to_float() == pytest.approx(100 * math.e**0.5, rel=1e-4)


def test_continuous_withdraw(system, pallet):
    pallet.deposit_continuous(Origin.signed(1), 100)
    pallet.withdraw_continuous(Origin.signed(1), 40)
    assert pallet.continuous_account.principal == I32F32.from_num(60)
    assert system.pallet_events(PALLET_EVENTS)[-1] == WithdrewContinuous(40)


def test_value_before_deposit_date_rejected(system, pallet):
    system.set_block_number(5)
    pallet.deposit_continuous(Origin.signed(1), 1)
    with pytest.raises(ValueError):
        pallet.value_of_continuous_account(4)


def test_fixed_round_trip():
    assert I32F32.from_num(7).to_float() == 7.0
    assert I32F32.from_num(-2.5).to_float() == -2.5
    assert (I32F32.from_num(3) * I32F32.from_num(4)) == I32F32.from_num(12)
    assert (I32F32.from_num(1) / 4).to_float() == 0.25


def test_fixed_out_of_range():
    with pytest.raises(OverflowError):
        I32F32.from_num(2**31)


def test_fixed_exp_values():
    assert fixed_exp(I32F32.from_num(0)) == I32F32.from_num(1)
    assert fixed_exp(I32F32.from_num(1)).to_float() == pytest.approx(math.e, rel=1e-6)
    assert fixed_exp(I32F32.from_num(-1)).to_float() == pytest.approx(1 / math.e, rel=1e-6)


def test_fixed_exp_overflow():
    with pytest.raises(OverflowError):
        fixed_exp(I32F32.from_num(30))