"""Point cost calculation for weirdos and warbands."""

import logging
from typing import Optional, Union

from spaceweirdos.engine.attribute_costs import AttributeLevel, get_base_attribute_cost
from spaceweirdos.engine.cost_config import CostConfig
from spaceweirdos.engine.cost_modifiers import get_cost_modifier
from spaceweirdos.models.attributes import AttributeType
from spaceweirdos.models.costs import CostBreakdown
from spaceweirdos.models.items import Equipment, PsychicPower, Weapon
from spaceweirdos.models.warband import Warband, WarbandAbility
from spaceweirdos.models.weirdo import Weirdo

logger = logging.getLogger(__name__)

Ability = Union[WarbandAbility, str, None]


class CostEngine:
    """
    Computes true point costs with warband ability modifiers applied.

    The engine never caps a cost; limits are a validation concern. Every
    method is a pure function of its arguments and the injected config.
    """

    def __init__(self, config: Optional[CostConfig] = None) -> None:
        """Initialize with optional config."""
        self._config = config or CostConfig()

    @property
    def config(self) -> CostConfig:
        """Get current config."""
        return self._config

    def get_attribute_cost(self, attribute: Union[AttributeType, str], level: AttributeLevel, ability: Ability) -> int:
        """
        Calculate the cost of one attribute level.

        Args:
            attribute: Attribute dimension
            level: Level chosen for the attribute
            ability: Warband ability (None if none)

        Returns:
            Non-negative point cost

        Raises:
            InvalidAttributeLevelError: if the level does not exist for the attribute
        """
        base_cost = get_base_attribute_cost(attribute, level)
        modifier = get_cost_modifier(ability, self._config)
        return modifier.apply_attribute(AttributeType(attribute), base_cost)

    def get_weapon_cost(self, weapon: Weapon, ability: Ability) -> int:
        """Weapon cost after ability discounts, never below 0."""
        return max(0, get_cost_modifier(ability, self._config).apply_weapon(weapon))

    def get_equipment_cost(self, equipment: Equipment, ability: Ability) -> int:
        """Equipment cost after ability discounts, never below 0."""
        return max(0, get_cost_modifier(ability, self._config).apply_equipment(equipment))

    def get_psychic_power_cost(self, power: PsychicPower, ability: Ability = None) -> int:
        """Psychic powers have fixed costs; no ability modifies them."""
        return max(0, power.cost)

    def calculate_weirdo_cost_breakdown(self, weirdo: Weirdo, ability: Ability) -> CostBreakdown:
        """
        Split a weirdo's cost into attributes, weapons, equipment and psychic powers.

        Args:
            weirdo: Weirdo to price
            ability: Warband ability (None if none)

        Returns:
            CostBreakdown whose total equals calculate_weirdo_cost
        """
        attributes = sum(
            self.get_attribute_cost(attribute, weirdo.attributes.level_of(attribute), ability)
            for attribute in AttributeType
        )
        weapons = sum(
            self.get_weapon_cost(weapon, ability)
            for weapon in weirdo.close_combat_weapons + weirdo.ranged_weapons
        )
        equipment = sum(self.get_equipment_cost(item, ability) for item in weirdo.equipment)
        psychic_powers = sum(self.get_psychic_power_cost(power, ability) for power in weirdo.psychic_powers)

        return CostBreakdown(
            attributes=attributes,
            weapons=weapons,
            equipment=equipment,
            psychic_powers=psychic_powers,
        )

    def calculate_weirdo_cost(self, weirdo: Weirdo, ability: Ability) -> int:
        """Total unclamped cost of a weirdo, even when it exceeds a limit."""
        total = self.calculate_weirdo_cost_breakdown(weirdo, ability).total
        logger.debug(f"Weirdo {weirdo.name!r} ({weirdo.id}) costs {total} points")
        return total

    def calculate_weirdo_costs(self, warband: Warband) -> list[int]:
        """Per-weirdo costs in roster order, using the warband's ability."""
        return [self.calculate_weirdo_cost(weirdo, warband.ability) for weirdo in warband.weirdos]

    def calculate_warband_cost(self, warband: Warband) -> int:
        """Sum of every weirdo's cost under the warband's ability."""
        total = sum(self.calculate_weirdo_costs(warband))
        logger.debug(f"Warband {warband.name!r} costs {total}/{warband.point_limit} points")
        return total
