"""Tests for the attribute cost table."""

import pytest

from spaceweirdos.engine.attribute_costs import (
    ATTRIBUTE_COSTS,
    InvalidAttributeLevelError,
    get_base_attribute_cost,
    is_valid_level,
)
from spaceweirdos.models import AttributeType, DiceLevel, FirepowerLevel


class TestAttributeCostTable:
    """Test suite for base attribute costs."""

    def test_speed_costs(self):
        """Test speed levels 1-3."""
        assert get_base_attribute_cost(AttributeType.SPEED, 1) == 0
        assert get_base_attribute_cost(AttributeType.SPEED, 2) == 1
        assert get_base_attribute_cost(AttributeType.SPEED, 3) == 3

    def test_dice_costs(self):
        """Test defense is the expensive dice attribute."""
        assert get_base_attribute_cost(AttributeType.DEFENSE, DiceLevel.D6) == 2
        assert get_base_attribute_cost(AttributeType.DEFENSE, DiceLevel.D8) == 4
        assert get_base_attribute_cost(AttributeType.DEFENSE, DiceLevel.D10) == 8
        assert get_base_attribute_cost(AttributeType.PROWESS, DiceLevel.D10) == 6
        assert get_base_attribute_cost(AttributeType.WILLPOWER, DiceLevel.D8) == 4

    def test_firepower_costs(self):
        """Test firepower including None."""
        assert get_base_attribute_cost(AttributeType.FIREPOWER, FirepowerLevel.NONE) == 0
        assert get_base_attribute_cost(AttributeType.FIREPOWER, FirepowerLevel.D8) == 2
        assert get_base_attribute_cost(AttributeType.FIREPOWER, FirepowerLevel.D10) == 4

    def test_string_levels_match_enum_levels(self):
        """Test raw strings price the same as enum members."""
        assert get_base_attribute_cost("defense", "2d8") == get_base_attribute_cost(
            AttributeType.DEFENSE, DiceLevel.D8
        )
        assert get_base_attribute_cost("firepower", "None") == 0

    def test_every_attribute_has_three_levels(self):
        """Test the table covers all five attributes."""
        assert set(ATTRIBUTE_COSTS) == set(AttributeType)
        for costs in ATTRIBUTE_COSTS.values():
            assert len(costs) == 3
            assert all(cost >= 0 for cost in costs.values())

    def test_invalid_speed_raises(self):
        """Test speed 0 and 4 are rejected."""
        with pytest.raises(InvalidAttributeLevelError):
            get_base_attribute_cost(AttributeType.SPEED, 0)
        with pytest.raises(InvalidAttributeLevelError):
            get_base_attribute_cost(AttributeType.SPEED, 4)

    def test_bool_is_not_a_speed(self):
        """Test True is not accepted as speed 1."""
        with pytest.raises(InvalidAttributeLevelError):
            get_base_attribute_cost(AttributeType.SPEED, True)

    def test_level_from_wrong_attribute_raises(self):
        """Test levels that belong to other attributes are rejected."""
        with pytest.raises(InvalidAttributeLevelError):
            get_base_attribute_cost(AttributeType.DEFENSE, "None")
        with pytest.raises(InvalidAttributeLevelError):
            get_base_attribute_cost(AttributeType.FIREPOWER, DiceLevel.D6)

    def test_unknown_attribute_raises(self):
        """Test unknown attributes are rejected."""
        with pytest.raises(InvalidAttributeLevelError) as exc_info:
            get_base_attribute_cost("luck", 1)
        assert exc_info.value.attribute == "luck"

    def test_error_is_value_error(self):
        """Test the error can be handled as a ValueError."""
        with pytest.raises(ValueError):
            get_base_attribute_cost(AttributeType.PROWESS, "2d12")

    def test_unhashable_level_raises(self):
        """Test odd inputs fail with the table error, not a TypeError."""
        with pytest.raises(InvalidAttributeLevelError):
            get_base_attribute_cost(AttributeType.WILLPOWER, ["2d6"])

    def test_is_valid_level(self):
        """Test the boolean helper."""
        assert is_valid_level("speed", 2) is True
        assert is_valid_level("speed", 0) is False
        assert is_valid_level("defense", "2d10") is True
        assert is_valid_level("defense", None) is False
