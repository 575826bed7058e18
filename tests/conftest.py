"""Pytest configuration and fixtures."""

import pytest

from spaceweirdos.models import (
    Attributes,
    DiceLevel,
    Equipment,
    EquipmentType,
    FirepowerLevel,
    PsychicPower,
    PsychicPowerType,
    Warband,
    Weapon,
    WeaponType,
    Weirdo,
    WeirdoType,
)

# Cost of all-minimum attributes: speed 1, 2d6 defense/prowess/willpower, no firepower
BASE_COST = 6


def minimum_attributes(**overrides):
    """All-minimum attributes with selected levels replaced."""
    levels = {
        "speed": 1,
        "defense": DiceLevel.D6,
        "firepower": FirepowerLevel.NONE,
        "prowess": DiceLevel.D6,
        "willpower": DiceLevel.D6,
    }
    levels.update(overrides)
    return Attributes(**levels)


@pytest.fixture
def attributes_with():
    """Factory for attributes starting from the minimum levels."""
    return minimum_attributes


@pytest.fixture
def unarmed():
    """Free close combat weapon."""
    return Weapon(id="unarmed", name="Unarmed", type=WeaponType.CLOSE, base_cost=0)


@pytest.fixture
def claws():
    """Close combat weapon discounted for Mutants."""
    return Weapon(id="claws-teeth", name="Claws & Teeth", type=WeaponType.CLOSE, base_cost=1)


@pytest.fixture
def auto_rifle():
    """Ranged weapon costing one point."""
    return Weapon(id="auto-rifle", name="Auto Rifle", type=WeaponType.RANGED, base_cost=1, max_actions=2)


@pytest.fixture
def grenade():
    """Equipment that is free for Soldiers."""
    return Equipment(id="grenade", name="Grenade", type=EquipmentType.ACTION, base_cost=1)


@pytest.fixture
def cybernetics():
    """Equipment nobody gets for free."""
    return Equipment(id="cybernetics", name="Cybernetics", type=EquipmentType.PASSIVE, base_cost=1)


@pytest.fixture
def fireball():
    """Psychic power with a fixed cost."""
    return PsychicPower(id="fireball", name="Fireball", type=PsychicPowerType.ATTACK, cost=3)


@pytest.fixture
def make_weirdo():
    """Factory for weirdos with minimum attributes and one close weapon priced to reach `cost`."""

    def _make(name="Grunt", weirdo_type=WeirdoType.TROOPER, cost=BASE_COST, **overrides):
        fields = {
            "name": name,
            "type": weirdo_type,
            "attributes": minimum_attributes(),
            "close_combat_weapons": [
                Weapon(id=f"sword-{cost}", name="Sword", type=WeaponType.CLOSE, base_cost=cost - BASE_COST)
            ],
        }
        fields.update(overrides)
        return Weirdo(**fields)

    return _make


@pytest.fixture
def make_warband():
    """Factory for warbands."""

    def _make(weirdos, name="Test Warband", ability=None, point_limit=75):
        return Warband(name=name, ability=ability, point_limit=point_limit, weirdos=weirdos)

    return _make


@pytest.fixture
def make_raw_weirdo():
    """Factory for weirdo data as decoded from JSON."""

    def _make(name="Grunt", weirdo_type="trooper", cost=BASE_COST, **overrides):
        data = {
            "id": f"raw-{name}",
            "name": name,
            "type": weirdo_type,
            "attributes": {
                "speed": 1,
                "defense": "2d6",
                "firepower": "None",
                "prowess": "2d6",
                "willpower": "2d6",
            },
            "closeCombatWeapons": [
                {"id": "sword", "name": "Sword", "type": "close", "baseCost": cost - BASE_COST, "maxActions": 1}
            ],
            "rangedWeapons": [],
            "equipment": [],
            "psychicPowers": [],
            "leaderTrait": None,
            "notes": "",
        }
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def make_raw_warband():
    """Factory for warband data as decoded from JSON."""

    def _make(weirdos, name="Raw Warband", ability=None, point_limit=75):
        return {"name": name, "ability": ability, "pointLimit": point_limit, "weirdos": weirdos}

    return _make
