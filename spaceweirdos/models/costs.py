"""Cost breakdown model."""

from pydantic import BaseModel, ConfigDict, Field, computed_field


class CostBreakdown(BaseModel):
    """Cost of a weirdo split by component."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    attributes: int = Field(ge=0, description="Sum of the five attribute costs")
    weapons: int = Field(ge=0, description="Close combat and ranged weapons")
    equipment: int = Field(ge=0, description="Equipment")
    psychic_powers: int = Field(ge=0, description="Psychic powers")

    @computed_field
    def total(self) -> int:
        return self.attributes + self.weapons + self.equipment + self.psychic_powers
