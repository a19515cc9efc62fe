"""
Entry point: load the global color properties named in the app config.
"""
from typing import Any

from .config import get_resource_root, load_config
from .identifier import Identifier
from .properties.global_colors import GlobalColorProperties, load
from .registry import DimensionType, Registry, StatusEffect
from .resources import DirectoryResourceManager, ResourceManager


def load_global_colors(
    config: dict[str, Any] | None = None,
    *,
    manager: ResourceManager | None = None,
    dimensions: Registry[DimensionType] | None = None,
    effects: Registry[StatusEffect] | None = None,
) -> GlobalColorProperties | None:
    """
    Load color properties using config["resources"]: pack root, resource id and fallback flag.
    Pass manager to read from somewhere other than the configured directory.
    """
    if config is None:
        config = load_config()
    resources = config.get("resources", {})
    if manager is None:
        manager = DirectoryResourceManager(get_resource_root(config))
    id = Identifier.parse(resources.get("global_colors", "colormatic:color.json"))
    return load(
        manager,
        id,
        bool(resources.get("fallback_on_error", True)),
        dimensions=dimensions,
        effects=effects,
    )
