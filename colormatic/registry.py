"""
Registries: identifier → registered element. The host owns them; color
properties only look things up, and a miss is an expected outcome.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

from .identifier import Identifier, InvalidIdentifierError

T = TypeVar("T")


@dataclass(frozen=True)
class DimensionType:
    id: Identifier


@dataclass(frozen=True)
class StatusEffect:
    id: Identifier


class Registry(Generic[T]):
    """Identifier-keyed lookup for one category of elements."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._entries: dict[Identifier, T] = {}

    def register(self, id: Identifier | str, value: T) -> T:
        key = id if isinstance(id, Identifier) else Identifier.parse(id)
        if key in self._entries:
            raise ValueError(f"Duplicate entry {key} in registry {self.name}")
        self._entries[key] = value
        return value

    def get(self, id: Identifier) -> T | None:
        return self._entries.get(id)

    def get_by_name(self, text: str) -> T | None:
        """Look up by identifier text. Invalid text resolves to None, same as a miss."""
        try:
            key = Identifier.parse(text)
        except InvalidIdentifierError:
            return None
        return self._entries.get(key)

    def ids(self) -> Iterator[Identifier]:
        return iter(self._entries)

    def __contains__(self, id: object) -> bool:
        return id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Registry({self.name!r}, {len(self)} entries)"


VANILLA_DIMENSIONS = ("overworld", "the_nether", "the_end")

# No "water" here: the water potion has no effect of its own
VANILLA_STATUS_EFFECTS = (
    "speed",
    "slowness",
    "haste",
    "mining_fatigue",
    "strength",
    "instant_health",
    "instant_damage",
    "jump_boost",
    "nausea",
    "regeneration",
    "resistance",
    "fire_resistance",
    "water_breathing",
    "invisibility",
    "blindness",
    "night_vision",
    "hunger",
    "weakness",
    "poison",
    "wither",
    "health_boost",
    "absorption",
    "saturation",
    "glowing",
    "levitation",
    "luck",
    "unluck",
    "slow_falling",
    "conduit_power",
    "dolphins_grace",
    "bad_omen",
    "hero_of_the_village",
)


def vanilla_dimension_types() -> Registry[DimensionType]:
    """Fresh registry holding the vanilla dimensions."""
    reg: Registry[DimensionType] = Registry("dimension_type")
    for name in VANILLA_DIMENSIONS:
        id = Identifier.parse(name)
        reg.register(id, DimensionType(id))
    return reg


def vanilla_status_effects() -> Registry[StatusEffect]:
    """Fresh registry holding the vanilla status effects."""
    reg: Registry[StatusEffect] = Registry("mob_effect")
    for name in VANILLA_STATUS_EFFECTS:
        id = Identifier.parse(name)
        reg.register(id, StatusEffect(id))
    return reg
