"""Game data catalog model."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from spaceweirdos.models.items import Equipment, PsychicPower, Weapon, WeaponType
from spaceweirdos.models.warband import WarbandAbility
from spaceweirdos.models.weirdo import LeaderTrait


class GameDataCatalog(BaseModel):
    """Reference data the UI builds items from. Loaded by the caller, never by the core."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    close_combat_weapons: list[Weapon] = Field(default_factory=list, description="Known close combat weapons")
    ranged_weapons: list[Weapon] = Field(default_factory=list, description="Known ranged weapons")
    equipment: list[Equipment] = Field(default_factory=list, description="Known equipment")
    psychic_powers: list[PsychicPower] = Field(default_factory=list, description="Known psychic powers")
    leader_traits: list[str] = Field(
        default_factory=lambda: [trait.value for trait in LeaderTrait], description="Known leader traits"
    )
    warband_abilities: list[str] = Field(
        default_factory=lambda: [ability.value for ability in WarbandAbility], description="Known abilities"
    )

    def has_weapon(self, name: str, weapon_type: WeaponType) -> bool:
        weapons = self.close_combat_weapons if weapon_type == WeaponType.CLOSE else self.ranged_weapons
        return any(weapon.name == name for weapon in weapons)

    def has_equipment(self, name: str) -> bool:
        return any(item.name == name for item in self.equipment)

    def has_psychic_power(self, name: str) -> bool:
        return any(power.name == name for power in self.psychic_powers)
