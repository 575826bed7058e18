"""Static attribute cost table."""

from typing import Union

from spaceweirdos.models.attributes import AttributeType, DiceLevel, FirepowerLevel

AttributeLevel = Union[int, DiceLevel, FirepowerLevel, str]


class InvalidAttributeLevelError(ValueError):
    """Raised when an attribute level does not exist for that attribute."""

    def __init__(self, attribute: str, level: object) -> None:
        super().__init__(f"Invalid level {level!r} for attribute {attribute!r}")
        self.attribute = attribute
        self.level = level


ATTRIBUTE_COSTS: dict[AttributeType, dict[Union[int, str], int]] = {
    AttributeType.SPEED: {1: 0, 2: 1, 3: 3},
    AttributeType.DEFENSE: {
        DiceLevel.D6.value: 2,
        DiceLevel.D8.value: 4,
        DiceLevel.D10.value: 8,
    },
    AttributeType.FIREPOWER: {
        FirepowerLevel.NONE.value: 0,
        FirepowerLevel.D8.value: 2,
        FirepowerLevel.D10.value: 4,
    },
    AttributeType.PROWESS: {
        DiceLevel.D6.value: 2,
        DiceLevel.D8.value: 4,
        DiceLevel.D10.value: 6,
    },
    AttributeType.WILLPOWER: {
        DiceLevel.D6.value: 2,
        DiceLevel.D8.value: 4,
        DiceLevel.D10.value: 6,
    },
}


def get_base_attribute_cost(attribute: Union[AttributeType, str], level: AttributeLevel) -> int:
    """
    Look up the unmodified cost of an attribute level.

    Args:
        attribute: Attribute dimension
        level: Speed as an int, dice tiers as enum members or their string values

    Returns:
        Base point cost

    Raises:
        InvalidAttributeLevelError: if the attribute or level is unknown
    """
    try:
        attribute_type = AttributeType(attribute)
    except ValueError:
        raise InvalidAttributeLevelError(str(attribute), level) from None

    # bool is an int subclass; True must not price as speed 1
    if isinstance(level, bool):
        raise InvalidAttributeLevelError(attribute_type.value, level)

    key = level.value if isinstance(level, (DiceLevel, FirepowerLevel)) else level
    costs = ATTRIBUTE_COSTS[attribute_type]
    if not isinstance(key, (int, str)) or key not in costs:
        raise InvalidAttributeLevelError(attribute_type.value, level)
    return costs[key]


def is_valid_level(attribute: Union[AttributeType, str], level: object) -> bool:
    """Whether a level exists in the cost table for the attribute."""
    try:
        get_base_attribute_cost(attribute, level)
    except InvalidAttributeLevelError:
        return False
    return True
