"""Warband ability cost modifiers."""

from typing import Optional, Union

from spaceweirdos.engine.cost_config import AbilityItemLists, CostConfig, DiscountValues
from spaceweirdos.models.attributes import AttributeType
from spaceweirdos.models.items import Equipment, Weapon, WeaponType
from spaceweirdos.models.warband import WarbandAbility


class CostModifier:
    """Default modifier: every cost is its base cost."""

    def __init__(self, discounts: DiscountValues, items: AbilityItemLists) -> None:
        self.discounts = discounts
        self.items = items

    def apply_weapon(self, weapon: Weapon) -> int:
        return weapon.base_cost

    def apply_equipment(self, equipment: Equipment) -> int:
        return equipment.base_cost

    def apply_attribute(self, attribute: AttributeType, base_cost: int) -> int:
        return base_cost


class MutantsCostModifier(CostModifier):
    """Mutants: cheaper speed and cheaper natural weapons."""

    def apply_weapon(self, weapon: Weapon) -> int:
        if weapon.type == WeaponType.CLOSE and weapon.name in self.items.mutant_weapons:
            return max(0, weapon.base_cost - self.discounts.mutant_discount)
        return weapon.base_cost

    def apply_attribute(self, attribute: AttributeType, base_cost: int) -> int:
        if attribute == AttributeType.SPEED:
            return max(0, base_cost - self.discounts.mutant_discount)
        return base_cost


class HeavilyArmedCostModifier(CostModifier):
    """Heavily Armed: every ranged weapon is cheaper."""

    def apply_weapon(self, weapon: Weapon) -> int:
        if weapon.type == WeaponType.RANGED:
            return max(0, weapon.base_cost - self.discounts.heavily_armed_discount)
        return weapon.base_cost


class SoldiersCostModifier(CostModifier):
    """Soldiers: some equipment is free."""

    def apply_equipment(self, equipment: Equipment) -> int:
        if equipment.name in self.items.soldier_free_equipment:
            return 0
        return equipment.base_cost


# Abilities without an entry have no pricing effect
COST_MODIFIERS: dict[WarbandAbility, type[CostModifier]] = {
    WarbandAbility.MUTANTS: MutantsCostModifier,
    WarbandAbility.HEAVILY_ARMED: HeavilyArmedCostModifier,
    WarbandAbility.SOLDIERS: SoldiersCostModifier,
}


def coerce_ability(ability: Union[WarbandAbility, str, None]) -> Optional[WarbandAbility]:
    """Turn an ability name into the enum; unknown names price as no ability."""
    if ability is None or isinstance(ability, WarbandAbility):
        return ability
    try:
        return WarbandAbility(ability)
    except ValueError:
        return None


def get_cost_modifier(ability: Union[WarbandAbility, str, None], config: CostConfig) -> CostModifier:
    """Build the modifier for a warband ability."""
    modifier_class = COST_MODIFIERS.get(coerce_ability(ability), CostModifier)
    return modifier_class(config.discount_values, config.ability_items)
