"""Weirdo attribute models."""

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AttributeType(str, Enum):
    """The five attribute dimensions of a weirdo."""

    SPEED = "speed"
    DEFENSE = "defense"
    FIREPOWER = "firepower"
    PROWESS = "prowess"
    WILLPOWER = "willpower"


class DiceLevel(str, Enum):
    """Dice tier for defense, prowess and willpower."""

    D6 = "2d6"
    D8 = "2d8"
    D10 = "2d10"


class FirepowerLevel(str, Enum):
    """Firepower tier. NONE means the weirdo cannot shoot."""

    NONE = "None"
    D8 = "2d8"
    D10 = "2d10"


SPEED_LEVELS = (1, 2, 3)


class Attributes(BaseModel):
    """Complete attribute set - all five dimensions are always present."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    # Speed 0 is representable so validation can report it; pricing only accepts 1-3
    speed: int = Field(ge=0, le=3, description="Speed level (1-3)")
    defense: DiceLevel = Field(description="Defense dice")
    firepower: FirepowerLevel = Field(description="Firepower dice or None")
    prowess: DiceLevel = Field(description="Prowess dice")
    willpower: DiceLevel = Field(description="Willpower dice")

    def level_of(self, attribute: AttributeType) -> Union[int, DiceLevel, FirepowerLevel]:
        """Return the level chosen for one attribute."""
        return getattr(self, AttributeType(attribute).value)
