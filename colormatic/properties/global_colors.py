"""
The global color.json file: particle, fog/sky, lilypad, potion, wool, collar
and banner colors. Parsed once into read-only lookups.

Loading never raises: a missing resource gives None (or an empty result when
falling back), a malformed document is logged and treated as empty, and
registry ids that do not resolve are skipped.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

import numpy as np

from ..colors import ColorFormatError, parse_hex_color, to_rgb
from ..data.keys import NO_EFFECT, ColoredParticle, DyeColor, NoEffect, remap_legacy_key
from ..identifier import Identifier
from ..registry import (
    DimensionType,
    Registry,
    StatusEffect,
    vanilla_dimension_types,
    vanilla_status_effects,
)
from ..resources import ResourceManager
from .util import MalformedDocumentError, read_document

logger = logging.getLogger(__name__)

K = TypeVar("K")
E = TypeVar("E", bound=Enum)

PotionKey = StatusEffect | NoEffect


@dataclass
class Settings:
    """
    Raw document fields. fog, sky and potion stay string-keyed: they name
    registry entries that may come from content not loaded right now, so
    resolution waits until construction where misses can be skipped.
    """

    particle: dict[ColoredParticle, int] = field(default_factory=dict)
    fog: dict[str, int] = field(default_factory=dict)
    sky: dict[str, int] = field(default_factory=dict)
    lilypad: int | None = None
    potion: dict[str, int] = field(default_factory=dict)
    sheep: dict[DyeColor, int] = field(default_factory=dict)
    collar: dict[DyeColor, int] = field(default_factory=dict)
    map: dict[DyeColor, int] = field(default_factory=dict)

    @classmethod
    def from_document(cls, document: Mapping[str, Any] | None) -> Settings:
        """Build from a decoded document. Raises MalformedDocumentError on bad structure or colors."""
        if not document:
            return cls()
        try:
            lilypad = document.get("lilypad")
            return cls(
                particle=_enum_colors(document, "particle", ColoredParticle),
                fog=_string_colors(document, "fog"),
                sky=_string_colors(document, "sky"),
                lilypad=parse_hex_color(lilypad) if lilypad is not None else None,
                potion=_string_colors(document, "potion"),
                sheep=_enum_colors(document, "sheep", DyeColor),
                collar=_enum_colors(document, "collar", DyeColor),
                map=_enum_colors(document, "map", DyeColor),
            )
        except ColorFormatError as e:
            raise MalformedDocumentError(str(e)) from e


def _section(document: Mapping[str, Any], name: str) -> dict[str, Any]:
    value = document.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise MalformedDocumentError(f"Expected an object for {name!r}, got {type(value).__name__}")
    return value


def _string_colors(document: Mapping[str, Any], name: str) -> dict[str, int]:
    return {k: parse_hex_color(v) for k, v in _section(document, name).items() if v is not None}


def _enum_colors(document: Mapping[str, Any], name: str, kind: type[E]) -> dict[E, int]:
    by_name = {m.value: m for m in kind}
    res: dict[E, int] = {}
    for k, v in _section(document, name).items():
        member = by_name.get(k)
        if member is None or v is None:
            continue
        res[member] = parse_hex_color(v)
    return res


def _convert_map(initial: Mapping[str, int], registry: Registry[K]) -> dict[K, int]:
    res: dict[K, int] = {}
    for name, color in initial.items():
        key = registry.get_by_name(name)
        if key is not None:
            res[key] = color
    return res


def _to_rgb_map(colors: Mapping[K, int]) -> dict[K, np.ndarray]:
    return {k: to_rgb(c) for k, c in colors.items()}


def _frozen(d: dict) -> Mapping:
    return MappingProxyType(d)


@dataclass(frozen=True, eq=False)
class GlobalColorProperties:
    particle: Mapping[ColoredParticle, int]
    dimension_fog: Mapping[DimensionType, int]
    dimension_sky: Mapping[DimensionType, int]
    lilypad: int
    potions: Mapping[PotionKey, int]
    sheep: Mapping[DyeColor, int]
    sheep_rgb: Mapping[DyeColor, np.ndarray]
    collar: Mapping[DyeColor, int]
    collar_rgb: Mapping[DyeColor, np.ndarray]
    banner: Mapping[DyeColor, int]

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        dimensions: Registry[DimensionType],
        effects: Registry[StatusEffect],
    ) -> GlobalColorProperties:
        potions: dict[PotionKey, int] = dict(_convert_map(settings.potion, effects))
        # The water potion's color has no status effect behind it
        water = settings.potion.get("water")
        if water is None:
            water = settings.potion.get("minecraft:water")
        if water is not None:
            potions[NO_EFFECT] = water
        return cls(
            particle=_frozen(dict(settings.particle)),
            dimension_fog=_frozen(_convert_map(settings.fog, dimensions)),
            dimension_sky=_frozen(_convert_map(settings.sky, dimensions)),
            lilypad=settings.lilypad if settings.lilypad is not None else 0,
            potions=_frozen(potions),
            sheep=_frozen(dict(settings.sheep)),
            sheep_rgb=_frozen(_to_rgb_map(settings.sheep)),
            collar=_frozen(dict(settings.collar)),
            collar_rgb=_frozen(_to_rgb_map(settings.collar)),
            banner=_frozen(dict(settings.map)),
        )

    def get_particle(self, particle: ColoredParticle) -> int:
        return self.particle.get(particle, 0)

    def get_dimension_fog(self, dimension: DimensionType) -> int:
        return self.dimension_fog.get(dimension, 0)

    def get_dimension_sky(self, dimension: DimensionType) -> int:
        return self.dimension_sky.get(dimension, 0)

    def get_lilypad(self) -> int:
        return self.lilypad

    def get_potion(self, effect: PotionKey) -> int:
        """Color for a status effect; pass NO_EFFECT for the water potion."""
        return self.potions.get(effect, 0)

    def get_wool(self, color: DyeColor) -> int:
        return self.sheep.get(color, 0)

    def get_wool_rgb(self, color: DyeColor) -> np.ndarray | None:
        return self.sheep_rgb.get(color)

    def get_collar(self, color: DyeColor) -> int:
        return self.collar.get(color, 0)

    def get_collar_rgb(self, color: DyeColor) -> np.ndarray | None:
        return self.collar_rgb.get(color)

    def get_banner(self, color: DyeColor) -> int:
        return self.banner.get(color, 0)


def load(
    manager: ResourceManager,
    id: Identifier,
    fall: bool,
    *,
    dimensions: Registry[DimensionType] | None = None,
    effects: Registry[StatusEffect] | None = None,
) -> GlobalColorProperties | None:
    """
    Load the global color properties named by id.
    If the resource cannot be read, returns None, or the properties of an
    empty document when fall is set.
    """
    try:
        with manager.open(id) as stream:
            raw = stream.read()
    except OSError as e:
        if not fall:
            return None
        logger.debug("Could not read %s (%s); using empty color properties", id, e)
        raw = b""
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.error("Error parsing %s: %s", id, e)
        text = ""
    return load_from_text(text, id, dimensions=dimensions, effects=effects)


def load_from_text(
    text: str,
    id: Identifier,
    *,
    dimensions: Registry[DimensionType] | None = None,
    effects: Registry[StatusEffect] | None = None,
) -> GlobalColorProperties:
    """Parse already-read document text. Malformed input is logged and treated as empty."""
    try:
        document = read_document(text, id, remap_legacy_key)
        settings = Settings.from_document(document)
    except MalformedDocumentError as e:
        logger.error("Error parsing %s: %s", id, e)
        settings = Settings()
    return GlobalColorProperties.from_settings(
        settings,
        dimensions if dimensions is not None else vanilla_dimension_types(),
        effects if effects is not None else vanilla_status_effects(),
    )
