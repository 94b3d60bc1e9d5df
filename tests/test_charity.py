import pytest

from runtime_recipes.charity import (
    Charity,
    DonationReceived,
    FundsAllocated,
    ImbalanceAbsorbed,
)
from runtime_recipes.currency import Balances, NegativeImbalance
from runtime_recipes.frame import BadOrigin, DispatchError, EventRecord, Origin, Phase, System

CHARITY_EVENTS = (DonationReceived, ImbalanceAbsorbed, FundsAllocated)


@pytest.fixture
def env():
    system = System(block_number=1)
    balances = Balances({1: 13, 2: 11, 3: 1, 4: 3, 5: 19}, existential_deposit=1)
    charity = Charity(system, balances)
    return system, balances, charity


def test_pot_min_balance_is_set(env):
    _, balances, charity = env
    assert charity.pot() == balances.existential_deposit


def test_new_test_ext_behaves(env):
    _, balances, _ = env
    assert balances.free_balance(1) == 13


def test_donations_work(env):
    system, balances, charity = env
    original = balances.free_balance(1)
    donation = 10
    charity.donate(Origin.signed(1), donation)

    new_pot_total = balances.existential_deposit + donation
    assert charity.pot() == new_pot_total
    assert balances.free_balance(1) == original - donation
    assert system.pallet_events(CHARITY_EVENTS) == [
        DonationReceived(1, donation, new_pot_total)
    ]


def test_cant_donate_too_much(env):
    _, balances, charity = env
    with pytest.raises(DispatchError) as info:
        charity.donate(Origin.signed(1), 20)
    assert info.value.message == "Can't make donation"
    assert balances.free_balance(1) == 13


def test_imbalances_work(env):
    system, balances, charity = env
    imb_amt = 5
    charity.on_nonzero_unbalanced(NegativeImbalance(imb_amt))

    new_pot_total = imb_amt + balances.existential_deposit
    assert charity.pot() == new_pot_total
    assert system.events[0] == EventRecord(
        phase=Phase.INITIALIZATION,
        event=ImbalanceAbsorbed(5, new_pot_total),
    )


def test_allocating_works(env):
    system, _, charity = env
    charity.donate(Origin.signed(1), 10)
    charity.allocate(Origin.root(), 2, 5)

    assert system.pallet_events(CHARITY_EVENTS) == [
        DonationReceived(1, 10, 11),
        FundsAllocated(2, 5, 6),
    ]


def test_cant_allocate_too_much(env):
    _, _, charity = env
    charity.donate(Origin.signed(1), 10)
    with pytest.raises(DispatchError) as info:
        charity.allocate(Origin.root(), 2, 20)
    assert info.value.message == "Can't make allocation"


def test_allocate_requires_root(env):
    _, balances, charity = env
    charity.donate(Origin.signed(1), 10)
    with pytest.raises(BadOrigin):
        charity.allocate(Origin.signed(1), 2, 5)
    assert balances.free_balance(2) == 11


def test_donation_requires_signed_origin(env):
    _, _, charity = env
    with pytest.raises(BadOrigin):
        charity.donate(Origin.root(), 1)
    assert charity.pot() == 1