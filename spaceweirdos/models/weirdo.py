"""Weirdo (unit) model."""

import uuid
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from spaceweirdos.models.attributes import Attributes
from spaceweirdos.models.items import Equipment, PsychicPower, Weapon


class WeirdoType(str, Enum):
    """Role of a weirdo in the warband."""

    LEADER = "leader"
    TROOPER = "trooper"


class LeaderTrait(str, Enum):
    """Perks available to leaders only."""

    BOUNTY_HUNTER = "Bounty Hunter"
    HEALER = "Healer"
    MAJESTIC = "Majestic"
    MONSTROUS = "Monstrous"
    POLITICAL_OFFICER = "Political Officer"
    SORCERER = "Sorcerer"
    TACTICIAN = "Tactician"


class Weirdo(BaseModel):
    """A single combatant in a warband."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Unique weirdo identifier")
    name: str = Field(description="Weirdo name")
    type: WeirdoType = Field(description="Leader or trooper")
    attributes: Attributes = Field(description="All five attributes")

    # Loadout
    close_combat_weapons: list[Weapon] = Field(default_factory=list, description="Close combat weapons")
    ranged_weapons: list[Weapon] = Field(default_factory=list, description="Ranged weapons")
    equipment: list[Equipment] = Field(default_factory=list, description="Equipment items")
    psychic_powers: list[PsychicPower] = Field(default_factory=list, description="Psychic powers")

    # Troopers are expected to carry None here; validation reports anything else
    leader_trait: Optional[LeaderTrait] = Field(default=None, description="Leader trait (leaders only)")
    notes: str = Field(default="", description="Free-form notes")

    # Cached by callers for display, never used for pricing
    total_cost: int = Field(default=0, description="Last known total cost (not authoritative)")
