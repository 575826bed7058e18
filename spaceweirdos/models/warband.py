"""Warband model."""

import uuid
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from spaceweirdos.models.weirdo import Weirdo


class WarbandAbility(str, Enum):
    """Warband-wide abilities."""

    CYBORGS = "Cyborgs"
    FANATICS = "Fanatics"
    LIVING_WEAPONS = "Living Weapons"
    HEAVILY_ARMED = "Heavily Armed"
    MUTANTS = "Mutants"
    SOLDIERS = "Soldiers"
    UNDEAD = "Undead"


class Warband(BaseModel):
    """A full roster with its point budget and ability."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Unique warband identifier")
    name: str = Field(description="Warband name")
    ability: Optional[WarbandAbility] = Field(default=None, description="Warband ability, if any")
    # Legal values (75/125) are checked by validation against the configured limits
    point_limit: int = Field(description="Point budget")
    weirdos: list[Weirdo] = Field(default_factory=list, description="Ordered list of weirdos")
    total_cost: int = Field(default=0, description="Last known total cost (not authoritative)")

    def index_of(self, weirdo: Weirdo) -> Optional[int]:
        """Position of a weirdo in the roster, matched by id."""
        return next((i for i, w in enumerate(self.weirdos) if w.id == weirdo.id), None)
