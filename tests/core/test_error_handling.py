"""
Tests for the input correction helpers.
"""

import pytest

from crawler_combat.core.error_handling import (
    ensure_int_in_range,
    ensure_non_negative_int,
    require_combatant,
)


def test_non_negative_int_passes_valid_values():
    assert ensure_non_negative_int(0, "value") == 0
    assert ensure_non_negative_int(12, "value") == 12


def test_non_negative_int_corrects_invalid_values():
    assert ensure_non_negative_int(-5, "value") == 0
    assert ensure_non_negative_int(3.7, "value") == 3
    assert ensure_non_negative_int("ten", "value", default=4) == 4
    assert ensure_non_negative_int(True, "value") == 0


def test_int_in_range_clamps():
    assert ensure_int_in_range(5, "value", 1, 10) == 5
    assert ensure_int_in_range(0, "value", 1, 10) == 1
    assert ensure_int_in_range(42, "value", 1, 10) == 10
    assert ensure_int_in_range(-3, "value", 1) == 1


def test_int_in_range_falls_back_to_default():
    assert ensure_int_in_range(None, "value", 1, 10, default=3) == 3
    assert ensure_int_in_range("x", "value", 2) == 2


def test_require_combatant():
    marker = object()
    assert require_combatant(marker, "attacker") is marker
    with pytest.raises(ValueError):
        require_combatant(None, "attacker")


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_values_fall_back_to_default(value):
    assert ensure_non_negative_int(value, "value", default=2) == 2
    assert ensure_int_in_range(value, "value", 1, 10, default=5) == 5


def test_take_damage_ignores_non_finite_amount(make_combatant):
    combatant = make_combatant(hp=40)
    assert combatant.take_damage(float("nan"))
    assert combatant.hp == 40
