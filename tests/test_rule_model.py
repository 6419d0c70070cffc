"""Tests for the rule-based valuation model."""
from datetime import date

import pytest

from estatebot.core.errors import InvalidInput
from estatebot.data.base import PropertyDetails
from estatebot.models.rule_model import RuleBasedModel


def _pune(**kwargs) -> PropertyDetails:
    return PropertyDetails(location="Pune", square_footage=1000, **kwargs)


def test_reference_example(model, bandra_details):
    # 45000*1000 + 2*5L + 2*3L = 4.66Cr; new build x1.2 = 5.592Cr; + parking + furnished
    assert model.estimate(bandra_details) == 57_620_000


def test_base_only(model):
    assert model.estimate(_pune()) == 8_000_000


@pytest.mark.parametrize("sqft", [0, -10, None])
def test_non_positive_or_missing_square_footage(model, sqft):
    with pytest.raises(InvalidInput):
        model.estimate(PropertyDetails(location="x", square_footage=sqft))


def test_invalid_input_is_a_value_error():
    assert issubclass(InvalidInput, ValueError)


def test_rooms_are_additive(model):
    assert model.estimate(_pune(bedrooms=3, bathrooms=2)) == 8_000_000 + 1_500_000 + 600_000


def test_zero_rooms_add_nothing(model):
    assert model.estimate(_pune(bedrooms=0, bathrooms=0)) == 8_000_000


@pytest.mark.parametrize("year_built, expected", [
    (2025, 9_600_000),   # age 0
    (2023, 9_600_000),   # age 2, still new
    (2022, 8_000_000),   # age 3
    (2005, 8_000_000),   # age 20, not yet old
    (2004, 6_400_000),   # age 21
])
def test_age_adjustment(model, year_built, expected):
    assert model.estimate(_pune(year_built=year_built)) == expected


def test_age_uses_injected_clock():
    later = RuleBasedModel(clock=lambda: date(2040, 1, 1))
    assert later.estimate(_pune(year_built=2018)) == 6_400_000


def test_feature_premiums_stack_but_apply_once(model):
    details = _pune(additional_features="Garden and TERRACE, gym, swimming pool")
    assert model.estimate(details) == 8_000_000 + 500_000 + 1_000_000


def test_all_feature_premiums(model):
    details = _pune(additional_features="parking garden gym furnished")
    assert model.estimate(details) == 8_000_000 + 200_000 + 500_000 + 1_000_000 + 1_500_000


def test_fractional_area_rounds_to_integer(model):
    value = model.estimate(PropertyDetails(location="Unknown", square_footage=1200.5))
    assert value == 9_604_000
    assert isinstance(value, int)

