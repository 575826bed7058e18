"""Warband and weirdo validation against the game rules."""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from spaceweirdos.engine.attribute_costs import InvalidAttributeLevelError, is_valid_level
from spaceweirdos.engine.cost_config import CostConfig
from spaceweirdos.engine.cost_engine import CostEngine
from spaceweirdos.engine.cost_modifiers import coerce_ability
from spaceweirdos.engine.error_categorization import group_errors
from spaceweirdos.engine.messages import MessageCatalog, category_for, severity_for
from spaceweirdos.models.attributes import SPEED_LEVELS, AttributeType, FirepowerLevel
from spaceweirdos.models.catalog import GameDataCatalog
from spaceweirdos.models.items import WeaponType
from spaceweirdos.models.validation import (
    ComprehensiveValidationResult,
    ValidationError,
    ValidationErrorCode,
    ValidationResult,
    ValidationSeverity,
)
from spaceweirdos.models.warband import Warband, WarbandAbility
from spaceweirdos.models.weirdo import Weirdo, WeirdoType

logger = logging.getLogger(__name__)

Code = ValidationErrorCode

ITEM_LIST_FIELDS = ("closeCombatWeapons", "rangedWeapons", "equipment", "psychicPowers")
RANGED_FIREPOWER = frozenset({FirepowerLevel.D8.value, FirepowerLevel.D10.value})


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_within_limit(value: int, limit: int) -> bool:
    return value <= limit


def is_requirement_met(condition: bool, requirement: bool) -> bool:
    """If the condition holds, the requirement must hold too."""
    return not condition or requirement


def is_legal_attribute_value(attribute: str, value: Any) -> bool:
    """Speed 0 counts as a chosen value; everything else must exist in the cost table."""
    if attribute == AttributeType.SPEED.value:
        return isinstance(value, int) and not isinstance(value, bool) and (value == 0 or value in SPEED_LEVELS)
    return is_valid_level(attribute, value)


def is_legal_point_limit(value: Any, allowed: tuple[int, ...]) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value in allowed


class _RawWeirdo:
    """What could be read from one raw weirdo entry."""

    def __init__(self, index: int, data: Any) -> None:
        self.index = index
        self.path = f"weirdos[{index}]"
        self.data: Optional[Mapping] = data if isinstance(data, Mapping) else None
        self.type: Optional[WeirdoType] = None
        self.attributes: Optional[Mapping] = None
        self.attributes_valid = False
        self.lists: dict[str, Optional[list]] = {}
        self.model: Optional[Weirdo] = None
        self.cost: Optional[int] = None

    def count(self, key: str) -> Optional[int]:
        items = self.lists.get(key)
        return None if items is None else len(items)

    def names(self, key: str) -> list[Optional[str]]:
        return [
            item.get("name") if isinstance(item, Mapping) and isinstance(item.get("name"), str) else None
            for item in self.lists.get(key) or []
        ]

    def firepower(self) -> Optional[str]:
        if self.attributes is None:
            return None
        value = self.attributes.get(AttributeType.FIREPOWER.value)
        if not is_legal_attribute_value(AttributeType.FIREPOWER.value, value):
            return None
        return FirepowerLevel(value).value


class ValidationService:
    """
    Validates weirdos and warbands and produces context-aware warnings.

    Validation never raises: every problem found is returned as a
    ValidationError record so a UI can show all of them at once. Costs are
    always re-derived through the cost engine, never read from the input.
    """

    def __init__(
        self,
        config: Optional[CostConfig] = None,
        messages: Optional[MessageCatalog] = None,
        cost_engine: Optional[CostEngine] = None,
        catalog: Optional[GameDataCatalog] = None,
    ) -> None:
        """Initialize with optional config, messages, cost engine and game data catalog."""
        self._config = config or (cost_engine.config if cost_engine else CostConfig())
        self._messages = messages or MessageCatalog()
        self._cost_engine = cost_engine or CostEngine(self._config)
        self._catalog = catalog

    @property
    def config(self) -> CostConfig:
        """Get current config."""
        return self._config

    @property
    def cost_engine(self) -> CostEngine:
        return self._cost_engine

    # ------------------------------------------------------------------
    # Record construction and pricing
    # ------------------------------------------------------------------

    def _issue(self, code: ValidationErrorCode, field: str, params: Optional[dict[str, Any]] = None) -> ValidationError:
        return ValidationError(
            field=field,
            message=self._messages.format(code, params),
            code=code,
            category=category_for(code),
            severity=severity_for(code),
            suggestions=self._messages.suggestions_for(code, params),
        )

    @staticmethod
    def _unit_path(index: Optional[int]) -> str:
        return f"weirdos[{index}]" if index is not None else "weirdo"

    def _try_weirdo_cost(self, weirdo: Weirdo, ability: Union[WarbandAbility, str, None]) -> Optional[int]:
        """Price a weirdo, or None when its attributes cannot be priced."""
        try:
            return self._cost_engine.calculate_weirdo_cost(weirdo, ability)
        except InvalidAttributeLevelError as e:
            logger.debug(f"Skipping cost checks for weirdo {weirdo.id}: {e}")
            return None

    def _roster_costs(self, warband: Warband) -> list[Optional[int]]:
        return [self._try_weirdo_cost(weirdo, warband.ability) for weirdo in warband.weirdos]

    @staticmethod
    def _other_costs(weirdo: Weirdo, warband: Warband, costs: list[Optional[int]]) -> list[int]:
        """Priced roster costs of every weirdo except this one, matched by id."""
        return [
            other_cost
            for other, other_cost in zip(warband.weirdos, costs)
            if other.id != weirdo.id and other_cost is not None
        ]

    # ------------------------------------------------------------------
    # Rule checks on plain values, shared by model and raw validation
    # ------------------------------------------------------------------

    def _check_weapon_requirements(
        self,
        path: str,
        close_count: Optional[int],
        ranged_count: Optional[int],
        firepower: Optional[str],
    ) -> list[ValidationError]:
        """Close combat weapon presence and the reciprocal firepower/ranged weapon rule."""
        errors = []
        if close_count is not None and close_count < 1:
            errors.append(self._issue(Code.CLOSE_COMBAT_WEAPON_REQUIRED, f"{path}.closeCombatWeapons"))

        if firepower is None or ranged_count is None:
            return errors

        has_ranged = ranged_count > 0
        if not is_requirement_met(firepower in RANGED_FIREPOWER, has_ranged):
            errors.append(self._issue(Code.RANGED_WEAPON_REQUIRED, f"{path}.rangedWeapons"))
        if not is_requirement_met(has_ranged, firepower != FirepowerLevel.NONE.value):
            errors.append(self._issue(Code.FIREPOWER_REQUIRED_FOR_RANGED_WEAPON, f"{path}.attributes.firepower"))
        return errors

    def _check_references(
        self,
        path: str,
        close_names: list[Optional[str]],
        ranged_names: list[Optional[str]],
        equipment_names: list[Optional[str]],
        power_names: list[Optional[str]],
        leader_trait: Optional[str],
    ) -> list[ValidationError]:
        """Warn about items the game data catalog does not know."""
        if self._catalog is None:
            return []

        catalog = self._catalog
        warnings = []
        for key, names, weapon_type, kind in (
            ("closeCombatWeapons", close_names, WeaponType.CLOSE, "Close combat"),
            ("rangedWeapons", ranged_names, WeaponType.RANGED, "Ranged"),
        ):
            for position, name in enumerate(names):
                if name is not None and not catalog.has_weapon(name, weapon_type):
                    warnings.append(
                        self._issue(
                            Code.MISSING_WEAPON_REFERENCE,
                            f"{path}.{key}[{position}].name",
                            {"kind": kind, "name": name},
                        )
                    )
        for position, name in enumerate(equipment_names):
            if name is not None and not catalog.has_equipment(name):
                warnings.append(
                    self._issue(Code.MISSING_EQUIPMENT_REFERENCE, f"{path}.equipment[{position}].name", {"name": name})
                )
        for position, name in enumerate(power_names):
            if name is not None and not catalog.has_psychic_power(name):
                warnings.append(
                    self._issue(
                        Code.MISSING_PSYCHIC_POWER_REFERENCE, f"{path}.psychicPowers[{position}].name", {"name": name}
                    )
                )
        if isinstance(leader_trait, str) and leader_trait not in catalog.leader_traits:
            warnings.append(
                self._issue(Code.MISSING_LEADER_TRAIT_REFERENCE, f"{path}.leaderTrait", {"name": leader_trait})
            )
        return warnings

    def _check_equipment_limit(
        self,
        path: str,
        weirdo_type: WeirdoType,
        equipment_count: int,
        ability: Optional[WarbandAbility],
    ) -> Optional[ValidationError]:
        limit = self._config.equipment_limits.limit_for(weirdo_type, ability)
        if is_within_limit(equipment_count, limit):
            return None
        return self._issue(
            Code.EQUIPMENT_LIMIT_EXCEEDED, f"{path}.equipment", {"type": weirdo_type.value, "limit": limit}
        )

    def _check_leader_trait(self, path: str, weirdo_type: WeirdoType, leader_trait: Any) -> Optional[ValidationError]:
        if weirdo_type == WeirdoType.TROOPER and leader_trait is not None:
            return self._issue(Code.LEADER_TRAIT_INVALID, f"{path}.leaderTrait")
        return None

    def _special_slot_taken(self, other_costs: list[int]) -> bool:
        return any(self._config.trooper_limits.in_special_slot(cost) for cost in other_costs)

    def _check_trooper_cost(
        self,
        path: str,
        weirdo_type: WeirdoType,
        cost: int,
        other_costs: list[int],
    ) -> Optional[ValidationError]:
        """Troopers stop at the standard limit, or the maximum if they alone hold the special slot."""
        if weirdo_type != WeirdoType.TROOPER:
            return None

        limits = self._config.trooper_limits
        limit = limits.standard_limit if self._special_slot_taken(other_costs) else limits.maximum_limit
        if is_within_limit(cost, limit):
            return None
        return self._issue(Code.TROOPER_POINT_LIMIT_EXCEEDED, f"{path}.totalCost", {"cost": cost, "limit": limit})

    def _approach_warning(self, field: str, code: ValidationErrorCode, cost: int, limit: int) -> ValidationError:
        points = limit - cost
        return self._issue(code, field, {"points": points, "plural": "" if points == 1 else "s", "limit": limit})

    def _cost_warnings(
        self,
        path: str,
        weirdo_type: WeirdoType,
        cost: int,
        other_costs: list[int],
    ) -> list[ValidationError]:
        """
        Warn when a trooper's cost nears the limit that applies to it.

        - Another weirdo holds the special slot: only the standard limit applies.
        - This weirdo holds the special slot: only the maximum limit applies.
        - Nobody holds it: nearing the standard limit also means nearing the
          premium slot, so both warnings are emitted.
        """
        thresholds = self._config.warnings
        if not thresholds.enabled or weirdo_type != WeirdoType.TROOPER:
            return []

        limits = self._config.trooper_limits
        field = f"{path}.totalCost"
        warnings = []
        if self._special_slot_taken(other_costs):
            if thresholds.is_approaching(cost, limits.standard_limit):
                warnings.append(self._approach_warning(field, Code.COST_APPROACHING_LIMIT, cost, limits.standard_limit))
        elif limits.in_special_slot(cost):
            if thresholds.is_approaching(cost, limits.maximum_limit):
                warnings.append(self._approach_warning(field, Code.COST_APPROACHING_LIMIT, cost, limits.maximum_limit))
        elif thresholds.is_approaching(cost, limits.standard_limit):
            warnings.append(self._approach_warning(field, Code.COST_APPROACHING_LIMIT, cost, limits.standard_limit))
            warnings.append(
                self._approach_warning(field, Code.COST_APPROACHING_PREMIUM_LIMIT, cost, limits.maximum_limit)
            )
        return warnings

    def _check_special_slot(self, costs: list[int]) -> Optional[ValidationError]:
        limits = self._config.trooper_limits
        occupants = [cost for cost in costs if limits.in_special_slot(cost)]
        if len(occupants) > 1:
            return self._issue(
                Code.MULTIPLE_25_POINT_WEIRDOS,
                "weirdos",
                {"min": limits.special_slot_min, "max": limits.special_slot_max},
            )
        return None

    def _check_point_limit(self, point_limit: Any) -> Optional[ValidationError]:
        limits = self._config.point_limits
        if is_legal_point_limit(point_limit, limits.allowed):
            return None
        return self._issue(
            Code.INVALID_POINT_LIMIT, "pointLimit", {"standard": limits.standard, "extended": limits.extended}
        )

    def _check_warband_total(self, total_cost: int, point_limit: int) -> Optional[ValidationError]:
        if is_within_limit(total_cost, point_limit):
            return None
        return self._issue(
            Code.WARBAND_POINT_LIMIT_EXCEEDED, "totalCost", {"totalCost": total_cost, "pointLimit": point_limit}
        )

    def _warband_cost_warning(self, total_cost: int, point_limit: int) -> Optional[ValidationError]:
        thresholds = self._config.warnings
        if not thresholds.enabled or point_limit <= 0:
            return None
        if thresholds.warband_ratio * point_limit <= total_cost <= point_limit:
            return self._issue(
                Code.WARBAND_COST_APPROACHING_LIMIT, "totalCost", {"totalCost": total_cost, "pointLimit": point_limit}
            )
        return None

    # ------------------------------------------------------------------
    # Model validation
    # ------------------------------------------------------------------

    def _validate_roster_weirdo(
        self,
        weirdo: Weirdo,
        index: Optional[int],
        warband: Warband,
        costs: list[Optional[int]],
        cost: Optional[int],
    ) -> tuple[list[ValidationError], list[ValidationError]]:
        """Check one weirdo; `cost` prices the weirdo given, `costs` the stored roster."""
        path = self._unit_path(index)
        errors: list[ValidationError] = []
        warnings: list[ValidationError] = []

        if not is_non_empty_string(weirdo.name):
            errors.append(self._issue(Code.WEIRDO_NAME_REQUIRED, f"{path}.name"))

        errors.extend(
            self._check_weapon_requirements(
                path,
                len(weirdo.close_combat_weapons),
                len(weirdo.ranged_weapons),
                weirdo.attributes.firepower.value,
            )
        )

        equipment_error = self._check_equipment_limit(path, weirdo.type, len(weirdo.equipment), warband.ability)
        if equipment_error:
            errors.append(equipment_error)

        other_costs = self._other_costs(weirdo, warband, costs)
        if cost is not None:
            cost_error = self._check_trooper_cost(path, weirdo.type, cost, other_costs)
            if cost_error:
                errors.append(cost_error)
            warnings.extend(self._cost_warnings(path, weirdo.type, cost, other_costs))

        trait_error = self._check_leader_trait(path, weirdo.type, weirdo.leader_trait)
        if trait_error:
            errors.append(trait_error)

        warnings.extend(
            self._check_references(
                path,
                [weapon.name for weapon in weirdo.close_combat_weapons],
                [weapon.name for weapon in weirdo.ranged_weapons],
                [item.name for item in weirdo.equipment],
                [power.name for power in weirdo.psychic_powers],
                weirdo.leader_trait.value if weirdo.leader_trait else None,
            )
        )
        return errors, warnings

    def validate_weirdo(self, weirdo: Weirdo, warband: Warband) -> ValidationResult:
        """
        Validate a single weirdo in the context of its warband.

        Args:
            weirdo: Weirdo to validate
            warband: Warband context (ability, and the other weirdos for the special slot)

        Returns:
            ValidationResult with errors and warnings
        """
        # The roster may hold an older version of this weirdo; price the one given
        cost = self._try_weirdo_cost(weirdo, warband.ability)
        errors, warnings = self._validate_roster_weirdo(
            weirdo, warband.index_of(weirdo), warband, self._roster_costs(warband), cost
        )
        return ValidationResult(errors=errors, warnings=warnings)

    def validate_warband(self, warband: Warband) -> ValidationResult:
        """
        Validate a warband and every weirdo in it.

        Args:
            warband: Warband to validate

        Returns:
            ValidationResult with errors and warnings from all weirdos and the warband itself
        """
        errors: list[ValidationError] = []
        warnings: list[ValidationError] = []

        if not is_non_empty_string(warband.name):
            errors.append(self._issue(Code.WARBAND_NAME_REQUIRED, "name"))

        point_limit_error = self._check_point_limit(warband.point_limit)
        if point_limit_error:
            errors.append(point_limit_error)

        costs = self._roster_costs(warband)
        for index, weirdo in enumerate(warband.weirdos):
            weirdo_errors, weirdo_warnings = self._validate_roster_weirdo(
                weirdo, index, warband, costs, costs[index]
            )
            errors.extend(weirdo_errors)
            warnings.extend(weirdo_warnings)

        priced = [cost for cost in costs if cost is not None]
        slot_error = self._check_special_slot(priced)
        if slot_error:
            errors.append(slot_error)

        total_cost = sum(priced)
        total_error = self._check_warband_total(total_cost, warband.point_limit)
        if total_error:
            errors.append(total_error)
        elif len(priced) == len(costs):
            total_warning = self._warband_cost_warning(total_cost, warband.point_limit)
            if total_warning:
                warnings.append(total_warning)

        logger.debug(f"Validated warband {warband.name!r}: {len(errors)} errors, {len(warnings)} warnings")
        return ValidationResult(errors=errors, warnings=warnings)

    def validate_weapon_requirements(self, weirdo: Weirdo) -> ValidationResult:
        """Close combat and ranged weapon requirements only; never produces warnings."""
        errors = self._check_weapon_requirements(
            "weirdo",
            len(weirdo.close_combat_weapons),
            len(weirdo.ranged_weapons),
            weirdo.attributes.firepower.value,
        )
        return ValidationResult(errors=errors)

    def validate_equipment_limits(
        self, weirdo: Weirdo, ability: Union[WarbandAbility, str, None]
    ) -> Optional[ValidationError]:
        """Equipment cap for the weirdo's type; Cyborgs raise it."""
        return self._check_equipment_limit("weirdo", weirdo.type, len(weirdo.equipment), coerce_ability(ability))

    def validate_weirdo_point_limit(self, weirdo: Weirdo, warband: Warband) -> Optional[ValidationError]:
        """
        Check a trooper's cost against the limit that applies to it.

        Troopers are limited to the standard limit, or to the maximum limit
        when no other weirdo in the warband holds the special slot. Leaders
        and weirdos that cannot be priced return None.
        """
        cost = self._try_weirdo_cost(weirdo, warband.ability)
        if cost is None:
            return None
        other_costs = self._other_costs(weirdo, warband, self._roster_costs(warband))
        return self._check_trooper_cost(self._unit_path(warband.index_of(weirdo)), weirdo.type, cost, other_costs)

    # ------------------------------------------------------------------
    # Comprehensive validation of raw data
    # ------------------------------------------------------------------

    def _check_structure(self, data: Mapping, units: list[_RawWeirdo]) -> list[ValidationError]:
        """Level 1: required fields and containers."""
        records = []
        if not is_non_empty_string(data.get("name")):
            records.append(self._issue(Code.WARBAND_NAME_REQUIRED, "name"))
        if not isinstance(data.get("weirdos"), list):
            records.append(self._issue(Code.WEIRDOS_ARRAY_REQUIRED, "weirdos"))

        for unit in units:
            if unit.data is None:
                records.append(
                    self._issue(Code.INVALID_WEIRDO_STRUCTURE, unit.path, {"details": "must be an object"})
                )
                continue
            if not is_non_empty_string(unit.data.get("name")):
                records.append(self._issue(Code.WEIRDO_NAME_REQUIRED, f"{unit.path}.name"))
            try:
                unit.type = WeirdoType(unit.data.get("type"))
            except ValueError:
                records.append(self._issue(Code.INVALID_WEIRDO_TYPE, f"{unit.path}.type"))
            attributes = unit.data.get("attributes")
            if isinstance(attributes, Mapping):
                unit.attributes = attributes
            else:
                records.append(self._issue(Code.ATTRIBUTES_INCOMPLETE, f"{unit.path}.attributes"))
        return records

    def _check_types(self, data: Mapping, units: list[_RawWeirdo]) -> list[ValidationError]:
        """Level 2: value domains, then conversion of each usable weirdo to a model."""
        records = []
        point_limit_error = self._check_point_limit(data.get("pointLimit"))
        if point_limit_error:
            records.append(point_limit_error)
        ability = data.get("ability")
        if ability is not None and not isinstance(ability, str):
            records.append(self._issue(Code.INVALID_ABILITY, "ability"))

        for unit in units:
            if unit.data is None:
                continue

            if unit.attributes is not None:
                unit.attributes_valid = True
                for attribute in AttributeType:
                    name = attribute.value
                    value = unit.attributes.get(name)
                    field = f"{unit.path}.attributes.{name}"
                    if value is None:
                        unit.attributes_valid = False
                        records.append(self._issue(Code.ATTRIBUTES_INCOMPLETE, field))
                    elif not is_legal_attribute_value(name, value):
                        unit.attributes_valid = False
                        records.append(
                            self._issue(Code.INVALID_ATTRIBUTE_VALUE, field, {"attribute": name, "value": value})
                        )

            for key in ITEM_LIST_FIELDS:
                items = unit.data.get(key)
                if items is None:
                    unit.lists[key] = []
                elif isinstance(items, list):
                    unit.lists[key] = items
                else:
                    unit.lists[key] = None
                    records.append(self._issue(Code.INVALID_FIELD_TYPE, f"{unit.path}.{key}", {"name": key}))

            conversion_error = self._convert_unit(unit)
            if conversion_error:
                records.append(conversion_error)
        return records

    def _convert_unit(self, unit: _RawWeirdo) -> Optional[ValidationError]:
        """Build a Weirdo model once the raw entry is known to be usable."""
        if unit.type is None or not unit.attributes_valid or any(items is None for items in unit.lists.values()):
            return None

        payload = dict(unit.data)
        # A missing or blank name is already reported; it must not block pricing
        payload["name"] = payload.get("name") if isinstance(payload.get("name"), str) else ""
        try:
            unit.model = Weirdo.model_validate(payload)
        except PydanticValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            logger.debug(f"Weirdo at {unit.path} failed model conversion: {e}")
            return self._issue(
                Code.INVALID_WEIRDO_STRUCTURE,
                f"{unit.path}.{location}" if location else unit.path,
                {"details": f"{location}: {first['msg']}" if location else first["msg"]},
            )
        return None

    def _check_game_data(self, data: Mapping, units: list[_RawWeirdo]) -> list[ValidationError]:
        """Level 3: weapon requirements and references to game data."""
        records = []
        ability = data.get("ability")
        if isinstance(ability, str) and coerce_ability(ability) is None:
            logger.warning(f"Unknown warband ability {ability!r}; pricing without an ability")
            records.append(self._issue(Code.UNKNOWN_WARBAND_ABILITY, "ability", {"ability": ability}))

        for unit in units:
            if unit.data is None:
                continue
            records.extend(
                self._check_weapon_requirements(
                    unit.path,
                    unit.count("closeCombatWeapons"),
                    unit.count("rangedWeapons"),
                    unit.firepower(),
                )
            )
            leader_trait = unit.data.get("leaderTrait")
            records.extend(
                self._check_references(
                    unit.path,
                    unit.names("closeCombatWeapons"),
                    unit.names("rangedWeapons"),
                    unit.names("equipment"),
                    unit.names("psychicPowers"),
                    leader_trait if isinstance(leader_trait, str) else None,
                )
            )
        return records

    def _check_business_rules(self, data: Mapping, units: list[_RawWeirdo]) -> list[ValidationError]:
        """Level 4: equipment caps, leader traits, point limits and the special slot."""
        records = []
        ability = data.get("ability")
        ability = coerce_ability(ability) if isinstance(ability, str) else None

        for unit in units:
            if unit.model is not None:
                unit.cost = self._try_weirdo_cost(unit.model, ability)

        for unit in units:
            if unit.type is None:
                continue
            equipment_count = unit.count("equipment")
            if equipment_count is not None:
                equipment_error = self._check_equipment_limit(unit.path, unit.type, equipment_count, ability)
                if equipment_error:
                    records.append(equipment_error)

            if unit.cost is not None:
                other_costs = [other.cost for other in units if other is not unit and other.cost is not None]
                cost_error = self._check_trooper_cost(unit.path, unit.type, unit.cost, other_costs)
                if cost_error:
                    records.append(cost_error)
                records.extend(self._cost_warnings(unit.path, unit.type, unit.cost, other_costs))

            trait_error = self._check_leader_trait(unit.path, unit.type, unit.data.get("leaderTrait"))
            if trait_error:
                records.append(trait_error)

        priced = [unit.cost for unit in units if unit.cost is not None]
        slot_error = self._check_special_slot(priced)
        if slot_error:
            records.append(slot_error)

        point_limit = data.get("pointLimit")
        if isinstance(point_limit, int) and not isinstance(point_limit, bool):
            total_error = self._check_warband_total(sum(priced), point_limit)
            if total_error:
                records.append(total_error)
            elif len(priced) == len(units):
                total_warning = self._warband_cost_warning(sum(priced), point_limit)
                if total_warning:
                    records.append(total_warning)
        return records

    def validate_warband_comprehensive(self, warband: Union[Warband, Mapping, Any]) -> ComprehensiveValidationResult:
        """
        Run all four validation levels and categorize the findings.

        Accepts a Warband model or raw data as decoded from JSON (camelCase
        keys). Malformed parts only suppress the checks that depend on them.

        Args:
            warband: Warband model or raw warband data

        Returns:
            ComprehensiveValidationResult with findings grouped by level
        """
        data = warband.model_dump(mode="json", by_alias=True) if isinstance(warband, Warband) else warband

        if not isinstance(data, Mapping):
            return self._comprehensive_result([self._issue(Code.INVALID_WARBAND_STRUCTURE, "")], None)

        raw_weirdos = data.get("weirdos")
        units = [_RawWeirdo(index, item) for index, item in enumerate(raw_weirdos)] if isinstance(raw_weirdos, list) else []

        records: list[ValidationError] = []
        records.extend(self._check_structure(data, units))
        records.extend(self._check_types(data, units))
        records.extend(self._check_game_data(data, units))
        records.extend(self._check_business_rules(data, units))

        total_cost = None
        if isinstance(raw_weirdos, list) and all(unit.cost is not None for unit in units):
            total_cost = sum(unit.cost for unit in units)

        result = self._comprehensive_result(records, total_cost)
        logger.debug(
            f"Comprehensive validation of {data.get('name')!r}: "
            f"{len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        return result

    @staticmethod
    def _comprehensive_result(
        records: list[ValidationError], total_cost: Optional[int]
    ) -> ComprehensiveValidationResult:
        errors = [record for record in records if record.severity == ValidationSeverity.ERROR]
        warnings = [record for record in records if record.severity == ValidationSeverity.WARNING]
        return ComprehensiveValidationResult(
            errors=errors,
            warnings=warnings,
            errors_by_category=group_errors(errors).by_category,
            warnings_by_category=group_errors(warnings).by_category,
            total_cost=total_cost,
        )
