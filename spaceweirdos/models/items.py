"""Weapon, equipment and psychic power models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WeaponType(str, Enum):
    """Weapon categories."""

    CLOSE = "close"
    RANGED = "ranged"


class EquipmentType(str, Enum):
    """Equipment categories."""

    PASSIVE = "Passive"
    ACTION = "Action"


class PsychicPowerType(str, Enum):
    """Psychic power categories."""

    ATTACK = "Attack"
    EFFECT = "Effect"
    EITHER = "Either"


class Weapon(BaseModel):
    """Weapon reference data."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(description="Unique weapon identifier")
    name: str = Field(description="Weapon name")
    type: WeaponType = Field(description="Close combat or ranged")
    base_cost: int = Field(ge=0, description="Point cost before ability modifiers")
    max_actions: int = Field(default=1, ge=0, description="Maximum actions per activation")
    notes: str = Field(default="", description="Rules notes")


class Equipment(BaseModel):
    """Equipment reference data."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(description="Unique equipment identifier")
    name: str = Field(description="Equipment name")
    type: EquipmentType = Field(description="Passive or Action")
    base_cost: int = Field(ge=0, description="Point cost before ability modifiers")
    effect: str = Field(default="", description="Rules effect")


class PsychicPower(BaseModel):
    """Psychic power reference data."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(description="Unique psychic power identifier")
    name: str = Field(description="Psychic power name")
    type: PsychicPowerType = Field(description="Attack, Effect or Either")
    cost: int = Field(ge=0, description="Fixed point cost")
    effect: str = Field(default="", description="Rules effect")
