import pytest

from tile_tactics.components import Energy
from tile_tactics.utils.energy import energy_percentage, reset_energy, take_energy


def test_take_energy_decrements() -> None:
    energy, exhausted = take_energy(Energy(current=5, base=10), 1)
    assert energy == Energy(current=4, base=10)
    assert not exhausted


@pytest.mark.parametrize("current, amount", [(1, 1), (1, 3), (0, 1), (2, 2)])
def test_take_energy_floors_at_zero(current: int, amount: int) -> None:
    energy, exhausted = take_energy(Energy(current=current, base=10), amount)
    assert energy.current == 0
    assert exhausted


def test_repeated_costs_never_go_negative() -> None:
    energy = Energy(current=3, base=3)
    for _ in range(10):
        energy, _ = take_energy(energy, 1)
        assert energy.current >= 0
    assert energy.current == 0


def test_negative_cost_is_rejected() -> None:
    with pytest.raises(ValueError):
        take_energy(Energy(current=3, base=3), -1)


def test_reset_and_percentage() -> None:
    energy = Energy(current=0, base=10)
    assert energy_percentage(energy) == 0.0
    energy = reset_energy(energy)
    assert energy.current == 10
    assert energy_percentage(Energy(current=5, base=10)) == 0.5


def test_percentage_is_exact() -> None:
    assert energy_percentage(Energy(current=7, base=10)) * 150 == 105
    assert energy_percentage(Energy(current=1, base=3)) * 3 == 1
