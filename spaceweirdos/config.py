"""Central configuration defaults and constants for Space Weirdos."""

import os

# Logging
DEFAULT_LOG_LEVEL = os.getenv("SPACEWEIRDOS_LOG_LEVEL", "WARNING").upper()

# Warband Point Limits
DEFAULT_POINT_LIMIT_STANDARD = int(os.getenv("SPACEWEIRDOS_POINT_LIMIT_STANDARD", "75"))
DEFAULT_POINT_LIMIT_EXTENDED = int(os.getenv("SPACEWEIRDOS_POINT_LIMIT_EXTENDED", "125"))

# Trooper Limits
# A trooper is capped at the standard limit unless it is the one weirdo in the special slot band
DEFAULT_TROOPER_LIMIT_STANDARD = int(os.getenv("SPACEWEIRDOS_TROOPER_LIMIT_STANDARD", "20"))
DEFAULT_TROOPER_LIMIT_MAXIMUM = int(os.getenv("SPACEWEIRDOS_TROOPER_LIMIT_MAXIMUM", "25"))
DEFAULT_SPECIAL_SLOT_MIN = int(os.getenv("SPACEWEIRDOS_SPECIAL_SLOT_MIN", "21"))
DEFAULT_SPECIAL_SLOT_MAX = int(os.getenv("SPACEWEIRDOS_SPECIAL_SLOT_MAX", "25"))

# Equipment Limits (Cyborgs raise both caps)
DEFAULT_EQUIPMENT_LIMIT_LEADER_STANDARD = int(os.getenv("SPACEWEIRDOS_EQUIPMENT_LIMIT_LEADER_STANDARD", "2"))
DEFAULT_EQUIPMENT_LIMIT_LEADER_CYBORGS = int(os.getenv("SPACEWEIRDOS_EQUIPMENT_LIMIT_LEADER_CYBORGS", "3"))
DEFAULT_EQUIPMENT_LIMIT_TROOPER_STANDARD = int(os.getenv("SPACEWEIRDOS_EQUIPMENT_LIMIT_TROOPER_STANDARD", "1"))
DEFAULT_EQUIPMENT_LIMIT_TROOPER_CYBORGS = int(os.getenv("SPACEWEIRDOS_EQUIPMENT_LIMIT_TROOPER_CYBORGS", "2"))

# Ability Discounts
DEFAULT_MUTANT_DISCOUNT = int(os.getenv("SPACEWEIRDOS_MUTANT_DISCOUNT", "1"))
DEFAULT_HEAVILY_ARMED_DISCOUNT = int(os.getenv("SPACEWEIRDOS_HEAVILY_ARMED_DISCOUNT", "1"))

# Items affected by ability discounts - parse from comma-separated env var or use default list
_mutant_weapons_env = os.getenv("SPACEWEIRDOS_MUTANT_WEAPONS")
DEFAULT_MUTANT_WEAPONS = (
    [name.strip() for name in _mutant_weapons_env.split(",") if name.strip()] if _mutant_weapons_env
    else ["Claws & Teeth", "Horrible Claws & Teeth", "Whip/Tail"]
)
_soldier_equipment_env = os.getenv("SPACEWEIRDOS_SOLDIER_FREE_EQUIPMENT")
DEFAULT_SOLDIER_FREE_EQUIPMENT = (
    [name.strip() for name in _soldier_equipment_env.split(",") if name.strip()] if _soldier_equipment_env
    else ["Grenade", "Heavy Armor", "Medkit"]
)

# Warning Thresholds
DEFAULT_COST_WARNING_MARGIN = int(os.getenv("SPACEWEIRDOS_COST_WARNING_MARGIN", "3"))  # Points below a unit limit
DEFAULT_WARBAND_WARNING_RATIO = float(os.getenv("SPACEWEIRDOS_WARBAND_WARNING_RATIO", "0.9"))  # Share of point limit
DEFAULT_CONTEXT_AWARE_WARNINGS = os.getenv("SPACEWEIRDOS_CONTEXT_AWARE_WARNINGS", "true").lower() in ("true", "1", "yes", "on")
