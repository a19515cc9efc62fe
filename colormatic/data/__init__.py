# Static data: legacy keys, dye kinds, colored particles

from .keys import (
    LEGACY_KEY_REMAP,
    NO_EFFECT,
    ColoredParticle,
    DyeColor,
    NoEffect,
    remap_legacy_key,
)

__all__ = [
    "LEGACY_KEY_REMAP",
    "NO_EFFECT",
    "ColoredParticle",
    "DyeColor",
    "NoEffect",
    "remap_legacy_key",
]
