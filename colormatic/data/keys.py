"""
Our data: fixed key sets for color properties and the legacy key table.
"""
from enum import Enum
from types import MappingProxyType


class DyeColor(Enum):
    WHITE = "white"
    ORANGE = "orange"
    MAGENTA = "magenta"
    LIGHT_BLUE = "light_blue"
    YELLOW = "yellow"
    LIME = "lime"
    PINK = "pink"
    GRAY = "gray"
    LIGHT_GRAY = "light_gray"
    CYAN = "cyan"
    PURPLE = "purple"
    BLUE = "blue"
    BROWN = "brown"
    GREEN = "green"
    RED = "red"
    BLACK = "black"


class ColoredParticle(Enum):
    WATER = "water"
    PORTAL = "portal"


class NoEffect(Enum):
    """Potion key for colors with no status effect (the water potion)."""
    NONE = "none"


NO_EFFECT = NoEffect.NONE

# Older color.properties files still use pre-flattening names; map them to current ids
LEGACY_KEY_REMAP: MappingProxyType[str, str] = MappingProxyType({
    "nether": "the_nether",
    "end": "the_end",
    "lightBlue": "light_blue",
    "silver": "light_gray",
    "moveSpeed": "speed",
    "moveSlowdown": "slowness",
    "digSpeed": "haste",
    "digSlowDown": "mining_fatigue",
    "damageBoost": "strength",
    "heal": "instant_health",
    "harm": "instant_damage",
    "jump": "jump_boost",
    "confusion": "nausea",
    "fireResistance": "fire_resistance",
    "waterBreathing": "water_breathing",
    "nightVision": "night_vision",
    "healthBoost": "health_boost",
})


def remap_legacy_key(key: str) -> str:
    return LEGACY_KEY_REMAP.get(key, key)
