# Colormatic: color overrides loaded from resource packs

from .colors import ColorFormatError, format_hex_color, parse_hex_color, to_rgb
from .data import LEGACY_KEY_REMAP, NO_EFFECT, ColoredParticle, DyeColor, NoEffect
from .identifier import Identifier, InvalidIdentifierError
from .loader import load_global_colors
from .properties import GlobalColorProperties, MalformedDocumentError, load, load_from_text
from .registry import (
    DimensionType,
    Registry,
    StatusEffect,
    vanilla_dimension_types,
    vanilla_status_effects,
)
from .resources import DirectoryResourceManager, ResourceManager

__all__ = [
    "ColorFormatError",
    "format_hex_color",
    "parse_hex_color",
    "to_rgb",
    "LEGACY_KEY_REMAP",
    "NO_EFFECT",
    "ColoredParticle",
    "DyeColor",
    "NoEffect",
    "Identifier",
    "InvalidIdentifierError",
    "load_global_colors",
    "GlobalColorProperties",
    "MalformedDocumentError",
    "load",
    "load_from_text",
    "DimensionType",
    "Registry",
    "StatusEffect",
    "vanilla_dimension_types",
    "vanilla_status_effects",
    "DirectoryResourceManager",
    "ResourceManager",
]
