"""Validation message templates, suggestions and code metadata."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from spaceweirdos.models.validation import ValidationCategory, ValidationErrorCode, ValidationSeverity

Code = ValidationErrorCode

VALIDATION_MESSAGES: dict[ValidationErrorCode, str] = {
    # Structure
    Code.INVALID_WARBAND_STRUCTURE: "Invalid warband data: must be an object",
    Code.WARBAND_NAME_REQUIRED: "Warband name is required",
    Code.WEIRDOS_ARRAY_REQUIRED: "Weirdos must be a list",
    Code.INVALID_WEIRDO_STRUCTURE: "Weirdo data is malformed: {details}",
    Code.WEIRDO_NAME_REQUIRED: "Weirdo name is required",
    Code.INVALID_WEIRDO_TYPE: 'Weirdo type must be "leader" or "trooper"',
    Code.ATTRIBUTES_INCOMPLETE: "All five attributes must be selected",
    # Types
    Code.INVALID_ATTRIBUTE_VALUE: "Invalid {attribute} value: {value}",
    Code.INVALID_POINT_LIMIT: "Point limit must be {standard} or {extended}",
    Code.INVALID_ABILITY: "Ability must be a string or null",
    Code.INVALID_FIELD_TYPE: "{name} must be a list",
    # Game data references
    Code.CLOSE_COMBAT_WEAPON_REQUIRED: "At least one close combat weapon is required",
    Code.RANGED_WEAPON_REQUIRED: "Ranged weapon required when Firepower is 2d8 or 2d10",
    Code.FIREPOWER_REQUIRED_FOR_RANGED_WEAPON: "Firepower level 2d8 or 2d10 required to use ranged weapons",
    Code.UNKNOWN_WARBAND_ABILITY: "Warband ability '{ability}' is not recognised",
    Code.MISSING_WEAPON_REFERENCE: "{kind} weapon '{name}' not found in current game data",
    Code.MISSING_EQUIPMENT_REFERENCE: "Equipment '{name}' not found in current game data",
    Code.MISSING_PSYCHIC_POWER_REFERENCE: "Psychic power '{name}' not found in current game data",
    Code.MISSING_LEADER_TRAIT_REFERENCE: "Leader trait '{name}' not found in current game data",
    # Business rules
    Code.EQUIPMENT_LIMIT_EXCEEDED: "Equipment limit exceeded: {type} can have {limit} items",
    Code.TROOPER_POINT_LIMIT_EXCEEDED: "Trooper cost ({cost}) exceeds {limit}-point limit",
    Code.MULTIPLE_25_POINT_WEIRDOS: "Only one weirdo may cost {min}-{max} points",
    Code.LEADER_TRAIT_INVALID: "Leader trait can only be assigned to leaders",
    Code.WARBAND_POINT_LIMIT_EXCEEDED: "Warband total cost ({totalCost}) exceeds point limit ({pointLimit})",
    Code.COST_APPROACHING_LIMIT: "Cost is within {points} point{plural} of the {limit}-point limit",
    Code.COST_APPROACHING_PREMIUM_LIMIT: (
        "Cost is within {points} point{plural} of the {limit}-point limit (premium weirdo slot)"
    ),
    Code.WARBAND_COST_APPROACHING_LIMIT: (
        "Warband total cost ({totalCost}) is approaching the point limit ({pointLimit})"
    ),
}

VALIDATION_SUGGESTIONS: dict[ValidationErrorCode, list[str]] = {
    Code.INVALID_WARBAND_STRUCTURE: ["Make sure the data was exported from the warband builder"],
    Code.WARBAND_NAME_REQUIRED: ["Enter a name for your warband in the name field"],
    Code.WEIRDOS_ARRAY_REQUIRED: ["Provide the warband members as a list"],
    Code.INVALID_WEIRDO_STRUCTURE: ["Re-create the weirdo in the editor"],
    Code.WEIRDO_NAME_REQUIRED: ["Click on the weirdo and enter a name"],
    Code.INVALID_WEIRDO_TYPE: ["Choose leader or trooper"],
    Code.ATTRIBUTES_INCOMPLETE: [
        "Click on the weirdo to edit attributes",
        "Set all five attributes: Speed, Defense, Firepower, Prowess, Willpower",
    ],
    Code.INVALID_ATTRIBUTE_VALUE: ["Pick one of the listed levels for {attribute}"],
    Code.INVALID_POINT_LIMIT: ["Choose a {standard}-point or {extended}-point warband"],
    Code.INVALID_ABILITY: ["Pick a warband ability from the list or leave it empty"],
    Code.INVALID_FIELD_TYPE: ["Provide {name} as a list"],
    Code.CLOSE_COMBAT_WEAPON_REQUIRED: [
        "Add a close combat weapon from the weapons list",
        "Every weirdo needs at least one melee weapon",
    ],
    Code.RANGED_WEAPON_REQUIRED: [
        "Add a ranged weapon to match the high Firepower",
        "Or reduce Firepower to None if no ranged weapon is desired",
    ],
    Code.FIREPOWER_REQUIRED_FOR_RANGED_WEAPON: [
        "Increase Firepower to 2d8 or 2d10 to use ranged weapons",
        "Or remove the ranged weapon if not needed",
    ],
    Code.UNKNOWN_WARBAND_ABILITY: ["Pick a warband ability from the list"],
    Code.MISSING_WEAPON_REFERENCE: ["Replace '{name}' with a weapon from the current list"],
    Code.MISSING_EQUIPMENT_REFERENCE: ["Replace '{name}' with equipment from the current list"],
    Code.MISSING_PSYCHIC_POWER_REFERENCE: ["Replace '{name}' with a psychic power from the current list"],
    Code.MISSING_LEADER_TRAIT_REFERENCE: ["Replace '{name}' with a leader trait from the current list"],
    Code.EQUIPMENT_LIMIT_EXCEEDED: [
        "Remove equipment to stay within {limit} item limit",
        "Consider upgrading to a leader for higher equipment limits",
    ],
    Code.TROOPER_POINT_LIMIT_EXCEEDED: [
        "Reduce attributes, weapons, or equipment to lower cost",
        "Consider if this should be your premium trooper",
        "Check if another trooper is already using the premium slot",
    ],
    Code.MULTIPLE_25_POINT_WEIRDOS: [
        "Reduce one weirdo below {min} points",
        "Only one weirdo can be in the {min}-{max} point premium range",
    ],
    Code.LEADER_TRAIT_INVALID: [
        "Remove the leader trait from this trooper",
        "Or change the weirdo type to leader",
    ],
    Code.WARBAND_POINT_LIMIT_EXCEEDED: [
        "Remove weirdos or reduce their equipment/attributes",
        "Consider switching to a larger point limit",
    ],
    Code.COST_APPROACHING_LIMIT: [],
    Code.COST_APPROACHING_PREMIUM_LIMIT: [],
    Code.WARBAND_COST_APPROACHING_LIMIT: [],
}

CODE_CATEGORIES: dict[ValidationErrorCode, ValidationCategory] = {
    Code.INVALID_WARBAND_STRUCTURE: ValidationCategory.STRUCTURE,
    Code.WARBAND_NAME_REQUIRED: ValidationCategory.STRUCTURE,
    Code.WEIRDOS_ARRAY_REQUIRED: ValidationCategory.STRUCTURE,
    Code.INVALID_WEIRDO_STRUCTURE: ValidationCategory.STRUCTURE,
    Code.WEIRDO_NAME_REQUIRED: ValidationCategory.STRUCTURE,
    Code.INVALID_WEIRDO_TYPE: ValidationCategory.STRUCTURE,
    Code.ATTRIBUTES_INCOMPLETE: ValidationCategory.STRUCTURE,
    Code.INVALID_ATTRIBUTE_VALUE: ValidationCategory.TYPES,
    Code.INVALID_POINT_LIMIT: ValidationCategory.TYPES,
    Code.INVALID_ABILITY: ValidationCategory.TYPES,
    Code.INVALID_FIELD_TYPE: ValidationCategory.TYPES,
    Code.CLOSE_COMBAT_WEAPON_REQUIRED: ValidationCategory.GAME_DATA,
    Code.RANGED_WEAPON_REQUIRED: ValidationCategory.GAME_DATA,
    Code.FIREPOWER_REQUIRED_FOR_RANGED_WEAPON: ValidationCategory.GAME_DATA,
    Code.UNKNOWN_WARBAND_ABILITY: ValidationCategory.GAME_DATA,
    Code.MISSING_WEAPON_REFERENCE: ValidationCategory.GAME_DATA,
    Code.MISSING_EQUIPMENT_REFERENCE: ValidationCategory.GAME_DATA,
    Code.MISSING_PSYCHIC_POWER_REFERENCE: ValidationCategory.GAME_DATA,
    Code.MISSING_LEADER_TRAIT_REFERENCE: ValidationCategory.GAME_DATA,
    Code.EQUIPMENT_LIMIT_EXCEEDED: ValidationCategory.BUSINESS_RULES,
    Code.TROOPER_POINT_LIMIT_EXCEEDED: ValidationCategory.BUSINESS_RULES,
    Code.MULTIPLE_25_POINT_WEIRDOS: ValidationCategory.BUSINESS_RULES,
    Code.LEADER_TRAIT_INVALID: ValidationCategory.BUSINESS_RULES,
    Code.WARBAND_POINT_LIMIT_EXCEEDED: ValidationCategory.BUSINESS_RULES,
    Code.COST_APPROACHING_LIMIT: ValidationCategory.BUSINESS_RULES,
    Code.COST_APPROACHING_PREMIUM_LIMIT: ValidationCategory.BUSINESS_RULES,
    Code.WARBAND_COST_APPROACHING_LIMIT: ValidationCategory.BUSINESS_RULES,
}

WARNING_CODES = frozenset(
    {
        Code.UNKNOWN_WARBAND_ABILITY,
        Code.MISSING_WEAPON_REFERENCE,
        Code.MISSING_EQUIPMENT_REFERENCE,
        Code.MISSING_PSYCHIC_POWER_REFERENCE,
        Code.MISSING_LEADER_TRAIT_REFERENCE,
        Code.COST_APPROACHING_LIMIT,
        Code.COST_APPROACHING_PREMIUM_LIMIT,
        Code.WARBAND_COST_APPROACHING_LIMIT,
    }
)


def fill_template(template: str, params: Optional[dict[str, Any]] = None) -> str:
    """
    Replace {key} tokens with parameter values.

    Every occurrence of a known key is replaced. Placeholders without a
    matching parameter stay as written and unused parameters are ignored.
    """
    message = template
    for key, value in (params or {}).items():
        message = message.replace(f"{{{key}}}", str(value))
    return message


def category_for(code: ValidationErrorCode) -> ValidationCategory:
    return CODE_CATEGORIES[code]


def severity_for(code: ValidationErrorCode) -> ValidationSeverity:
    return ValidationSeverity.WARNING if code in WARNING_CODES else ValidationSeverity.ERROR


class MessageCatalog(BaseModel):
    """Code to message lookup handed to the validation service."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    templates: dict[ValidationErrorCode, str] = Field(
        default_factory=lambda: dict(VALIDATION_MESSAGES), description="Message template per code"
    )
    suggestions: dict[ValidationErrorCode, list[str]] = Field(
        default_factory=lambda: {code: list(items) for code, items in VALIDATION_SUGGESTIONS.items()},
        description="Suggestion templates per code",
    )

    @model_validator(mode="after")
    def check_complete(self) -> "MessageCatalog":
        """Every code needs a template."""
        missing = [code.value for code in ValidationErrorCode if code not in self.templates]
        if missing:
            raise ValueError(f"Missing message templates for: {', '.join(missing)}")
        return self

    def format(self, code: ValidationErrorCode, params: Optional[dict[str, Any]] = None) -> str:
        """Expand the template for a code."""
        return fill_template(self.templates[code], params)

    def suggestions_for(self, code: ValidationErrorCode, params: Optional[dict[str, Any]] = None) -> list[str]:
        """Expand the suggestion templates for a code."""
        return [fill_template(item, params) for item in self.suggestions.get(code, [])]
