"""
Load and expose app config (YAML). Used by the loader to find the resource pack,
the global colors resource and the fallback flag.
"""
from pathlib import Path
from typing import Any

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    defaults = _defaults()
    return {
        **defaults,
        **data,
        "resources": {**defaults["resources"], **(data.get("resources") or {})},
    }


def _defaults() -> dict[str, Any]:
    return {
        "resources": {
            "root": "resources",
            "global_colors": "colormatic:color.json",
            "fallback_on_error": True,
        },
    }


def get_resource_root(config: dict[str, Any]) -> Path:
    """Resolve resource pack root (relative to project root if needed)."""
    d = config.get("resources", {}).get("root", "resources")
    p = Path(d)
    if not p.is_absolute():
        p = _project_root() / p
    return p

