"""Validation result models."""

from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ValidationErrorCode(str, Enum):
    """Every code the validation service can emit."""

    # Structure
    INVALID_WARBAND_STRUCTURE = "INVALID_WARBAND_STRUCTURE"
    WARBAND_NAME_REQUIRED = "WARBAND_NAME_REQUIRED"
    WEIRDOS_ARRAY_REQUIRED = "WEIRDOS_ARRAY_REQUIRED"
    INVALID_WEIRDO_STRUCTURE = "INVALID_WEIRDO_STRUCTURE"
    WEIRDO_NAME_REQUIRED = "WEIRDO_NAME_REQUIRED"
    INVALID_WEIRDO_TYPE = "INVALID_WEIRDO_TYPE"
    ATTRIBUTES_INCOMPLETE = "ATTRIBUTES_INCOMPLETE"

    # Types
    INVALID_ATTRIBUTE_VALUE = "INVALID_ATTRIBUTE_VALUE"
    INVALID_POINT_LIMIT = "INVALID_POINT_LIMIT"
    INVALID_ABILITY = "INVALID_ABILITY"
    INVALID_FIELD_TYPE = "INVALID_FIELD_TYPE"

    # Game data references
    CLOSE_COMBAT_WEAPON_REQUIRED = "CLOSE_COMBAT_WEAPON_REQUIRED"
    RANGED_WEAPON_REQUIRED = "RANGED_WEAPON_REQUIRED"
    FIREPOWER_REQUIRED_FOR_RANGED_WEAPON = "FIREPOWER_REQUIRED_FOR_RANGED_WEAPON"
    UNKNOWN_WARBAND_ABILITY = "UNKNOWN_WARBAND_ABILITY"
    MISSING_WEAPON_REFERENCE = "MISSING_WEAPON_REFERENCE"
    MISSING_EQUIPMENT_REFERENCE = "MISSING_EQUIPMENT_REFERENCE"
    MISSING_PSYCHIC_POWER_REFERENCE = "MISSING_PSYCHIC_POWER_REFERENCE"
    MISSING_LEADER_TRAIT_REFERENCE = "MISSING_LEADER_TRAIT_REFERENCE"

    # Business rules
    EQUIPMENT_LIMIT_EXCEEDED = "EQUIPMENT_LIMIT_EXCEEDED"
    TROOPER_POINT_LIMIT_EXCEEDED = "TROOPER_POINT_LIMIT_EXCEEDED"
    MULTIPLE_25_POINT_WEIRDOS = "MULTIPLE_25_POINT_WEIRDOS"
    LEADER_TRAIT_INVALID = "LEADER_TRAIT_INVALID"
    WARBAND_POINT_LIMIT_EXCEEDED = "WARBAND_POINT_LIMIT_EXCEEDED"
    COST_APPROACHING_LIMIT = "COST_APPROACHING_LIMIT"
    COST_APPROACHING_PREMIUM_LIMIT = "COST_APPROACHING_PREMIUM_LIMIT"
    WARBAND_COST_APPROACHING_LIMIT = "WARBAND_COST_APPROACHING_LIMIT"


class ValidationCategory(IntEnum):
    """Validation level, ordered from unreadable data to rule violations."""

    STRUCTURE = 1
    TYPES = 2
    GAME_DATA = 3
    BUSINESS_RULES = 4


class ValidationSeverity(str, Enum):
    """Errors block a save, warnings only inform."""

    ERROR = "error"
    WARNING = "warning"


class ValidationError(BaseModel):
    """A single validation finding, error or warning."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    field: str = Field(description="Dotted path to the offending value, e.g. weirdos[0].attributes.firepower")
    message: str = Field(description="Human-readable message with placeholders filled in")
    code: ValidationErrorCode = Field(description="Stable code")
    category: ValidationCategory = Field(description="Validation level (1-4)")
    severity: ValidationSeverity = Field(default=ValidationSeverity.ERROR, description="error or warning")
    suggestions: list[str] = Field(default_factory=list, description="Actionable fixes")


class ValidationResult(BaseModel):
    """Errors and warnings for a weirdo or warband."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    errors: list[ValidationError] = Field(default_factory=list, description="Blocking findings")
    warnings: list[ValidationError] = Field(default_factory=list, description="Informational findings")

    @computed_field
    def valid(self) -> bool:
        """True when nothing blocks a save."""
        return not self.errors

    def codes(self) -> list[ValidationErrorCode]:
        """Codes of all errors followed by all warnings."""
        return [record.code for record in self.errors + self.warnings]


class ComprehensiveValidationResult(ValidationResult):
    """Validation result broken down by validation level."""

    errors_by_category: dict[ValidationCategory, list[ValidationError]] = Field(
        default_factory=dict, description="Errors grouped by level"
    )
    warnings_by_category: dict[ValidationCategory, list[ValidationError]] = Field(
        default_factory=dict, description="Warnings grouped by level"
    )
    total_cost: Optional[int] = Field(
        default=None, description="Warband cost, None if the weirdos list is missing or any weirdo cannot be priced"
    )
