import pytest

from runtime_recipes.constant_config import Added, Cleared, ConstantConfig
from runtime_recipes.frame import DispatchError, Origin, System


@pytest.fixture
def pallet():
    return ConstantConfig(System(block_number=1), max_addend=100, clear_frequency=10)


def test_max_added_exceeded_errs(pallet):
    with pytest.raises(DispatchError) as info:
        pallet.add_value(Origin.signed(1), 101)
    assert info.value.message == "value must be <= maximum add amount constant"


def test_overflow_checked(pallet):
    test_num = 2**32 - 1 - 99
    pallet.set_value(Origin.signed(1), test_num)
    with pytest.raises(DispatchError) as info:
        pallet.add_value(Origin.signed(1), 100)
    assert info.value.message == "Addition overflowed"
    assert pallet.single_value == test_num


def test_add_value_works(pallet):
    pallet.set_value(Origin.signed(1), 10)
    pallet.add_value(Origin.signed(2), 100)
    pallet.add_value(Origin.signed(3), 100)
    pallet.add_value(Origin.signed(4), 100)

    assert pallet.system.pallet_events((Added, Cleared)) == [
        Added(10, 100, 110),
        Added(110, 100, 210),
        Added(210, 100, 310),
    ]


def test_on_finalize_clears(pallet):
    pallet.system.set_block_number(5)
    pallet.set_value(Origin.signed(1), 10)
    pallet.add_value(Origin.signed(2), 100)

    pallet.on_finalize(10)

    assert pallet.system.events[1].event == Cleared(110)
    assert pallet.single_value == 0


def test_on_finalize_off_interval_keeps_value(pallet):
    pallet.set_value(Origin.signed(1), 10)
    pallet.on_finalize(3)
    assert pallet.single_value == 10
    assert pallet.system.pallet_events(Cleared) == []