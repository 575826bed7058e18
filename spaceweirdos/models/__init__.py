"""Data models module for Space Weirdos."""

# Attributes
from spaceweirdos.models.attributes import SPEED_LEVELS, Attributes, AttributeType, DiceLevel, FirepowerLevel

# Items
from spaceweirdos.models.items import (
    Equipment,
    EquipmentType,
    PsychicPower,
    PsychicPowerType,
    Weapon,
    WeaponType,
)

# Weirdos and Warbands
from spaceweirdos.models.weirdo import LeaderTrait, Weirdo, WeirdoType
from spaceweirdos.models.warband import Warband, WarbandAbility

# Reference data
from spaceweirdos.models.catalog import GameDataCatalog

# Costs and Validation
from spaceweirdos.models.costs import CostBreakdown
from spaceweirdos.models.validation import (
    ComprehensiveValidationResult,
    ValidationCategory,
    ValidationError,
    ValidationErrorCode,
    ValidationResult,
    ValidationSeverity,
)

__all__ = [
    # Attributes
    "SPEED_LEVELS",
    "Attributes",
    "AttributeType",
    "DiceLevel",
    "FirepowerLevel",
    # Items
    "Weapon",
    "WeaponType",
    "Equipment",
    "EquipmentType",
    "PsychicPower",
    "PsychicPowerType",
    # Weirdos and Warbands
    "Weirdo",
    "WeirdoType",
    "LeaderTrait",
    "Warband",
    "WarbandAbility",
    # Reference data
    "GameDataCatalog",
    # Costs and Validation
    "CostBreakdown",
    "ValidationError",
    "ValidationErrorCode",
    "ValidationCategory",
    "ValidationSeverity",
    "ValidationResult",
    "ComprehensiveValidationResult",
]
