"""Cost and limit configuration."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from spaceweirdos.config import (
    DEFAULT_CONTEXT_AWARE_WARNINGS,
    DEFAULT_COST_WARNING_MARGIN,
    DEFAULT_EQUIPMENT_LIMIT_LEADER_CYBORGS,
    DEFAULT_EQUIPMENT_LIMIT_LEADER_STANDARD,
    DEFAULT_EQUIPMENT_LIMIT_TROOPER_CYBORGS,
    DEFAULT_EQUIPMENT_LIMIT_TROOPER_STANDARD,
    DEFAULT_HEAVILY_ARMED_DISCOUNT,
    DEFAULT_MUTANT_DISCOUNT,
    DEFAULT_MUTANT_WEAPONS,
    DEFAULT_POINT_LIMIT_EXTENDED,
    DEFAULT_POINT_LIMIT_STANDARD,
    DEFAULT_SOLDIER_FREE_EQUIPMENT,
    DEFAULT_SPECIAL_SLOT_MAX,
    DEFAULT_SPECIAL_SLOT_MIN,
    DEFAULT_TROOPER_LIMIT_MAXIMUM,
    DEFAULT_TROOPER_LIMIT_STANDARD,
    DEFAULT_WARBAND_WARNING_RATIO,
)
from spaceweirdos.models.warband import WarbandAbility
from spaceweirdos.models.weirdo import WeirdoType


class PointLimits(BaseModel):
    """Allowed warband point budgets."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    standard: int = Field(default=DEFAULT_POINT_LIMIT_STANDARD, ge=1, description="Standard warband size")
    extended: int = Field(default=DEFAULT_POINT_LIMIT_EXTENDED, ge=1, description="Extended warband size")

    @property
    def allowed(self) -> tuple[int, int]:
        return (self.standard, self.extended)


class TrooperLimits(BaseModel):
    """Per-trooper cost ceilings and the special slot band."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    standard_limit: int = Field(default=DEFAULT_TROOPER_LIMIT_STANDARD, ge=0, description="Normal trooper cap")
    maximum_limit: int = Field(
        default=DEFAULT_TROOPER_LIMIT_MAXIMUM, ge=0, description="Cap for the trooper in the special slot"
    )
    special_slot_min: int = Field(default=DEFAULT_SPECIAL_SLOT_MIN, ge=0, description="Lowest special slot cost")
    special_slot_max: int = Field(default=DEFAULT_SPECIAL_SLOT_MAX, ge=0, description="Highest special slot cost")

    @model_validator(mode="after")
    def check_bands(self) -> "TrooperLimits":
        """Reject bands that cannot be satisfied."""
        if self.standard_limit > self.maximum_limit:
            raise ValueError("standard_limit must not exceed maximum_limit")
        if self.special_slot_min > self.special_slot_max:
            raise ValueError("special_slot_min must not exceed special_slot_max")
        return self

    def in_special_slot(self, cost: int) -> bool:
        """Whether a cost falls inside the special slot band."""
        return self.special_slot_min <= cost <= self.special_slot_max


class EquipmentLimits(BaseModel):
    """Equipment caps by weirdo type, with and without Cyborgs."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    leader_standard: int = Field(default=DEFAULT_EQUIPMENT_LIMIT_LEADER_STANDARD, ge=0)
    leader_cyborgs: int = Field(default=DEFAULT_EQUIPMENT_LIMIT_LEADER_CYBORGS, ge=0)
    trooper_standard: int = Field(default=DEFAULT_EQUIPMENT_LIMIT_TROOPER_STANDARD, ge=0)
    trooper_cyborgs: int = Field(default=DEFAULT_EQUIPMENT_LIMIT_TROOPER_CYBORGS, ge=0)

    def limit_for(self, weirdo_type: WeirdoType, ability: Optional[WarbandAbility]) -> int:
        """Equipment cap for a weirdo type under a warband ability."""
        cyborgs = ability == WarbandAbility.CYBORGS
        if weirdo_type == WeirdoType.LEADER:
            return self.leader_cyborgs if cyborgs else self.leader_standard
        return self.trooper_cyborgs if cyborgs else self.trooper_standard


class DiscountValues(BaseModel):
    """Flat discounts granted by abilities."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    mutant_discount: int = Field(default=DEFAULT_MUTANT_DISCOUNT, ge=0)
    heavily_armed_discount: int = Field(default=DEFAULT_HEAVILY_ARMED_DISCOUNT, ge=0)


class AbilityItemLists(BaseModel):
    """Named items affected by abilities."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    mutant_weapons: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MUTANT_WEAPONS), description="Close weapons discounted for Mutants"
    )
    soldier_free_equipment: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SOLDIER_FREE_EQUIPMENT), description="Equipment free for Soldiers"
    )


class WarningThresholds(BaseModel):
    """When to emit proximity warnings."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    enabled: bool = Field(default=DEFAULT_CONTEXT_AWARE_WARNINGS, description="Emit per-weirdo cost warnings")
    cost_margin: int = Field(
        default=DEFAULT_COST_WARNING_MARGIN, ge=0, description="Warn when a cost is this close below a limit"
    )
    warband_ratio: float = Field(
        default=DEFAULT_WARBAND_WARNING_RATIO,
        ge=0.0,
        le=1.0,
        description="Warn when the warband spends this share of its point limit",
    )

    def is_approaching(self, cost: int, limit: int) -> bool:
        """Cost is at or below the limit and less than the margin away from it."""
        return 0 <= limit - cost < self.cost_margin


class CostConfig(BaseModel):
    """Everything the cost engine and validation service need to know about limits."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    point_limits: PointLimits = Field(default_factory=PointLimits)
    trooper_limits: TrooperLimits = Field(default_factory=TrooperLimits)
    equipment_limits: EquipmentLimits = Field(default_factory=EquipmentLimits)
    discount_values: DiscountValues = Field(default_factory=DiscountValues)
    ability_items: AbilityItemLists = Field(default_factory=AbilityItemLists)
    warnings: WarningThresholds = Field(default_factory=WarningThresholds)
