"""
Unit tests for app config and the load_global_colors entry point.
Run from project root: python -m pytest tests/ -v
"""
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class TestConfig(unittest.TestCase):

    def test_missing_file_gives_defaults(self):
        from colormatic.config import load_config

        config = load_config(Path("/nonexistent/colormatic.yaml"))
        self.assertEqual(config["resources"]["global_colors"], "colormatic:color.json")
        self.assertTrue(config["resources"]["fallback_on_error"])

    def test_partial_override_keeps_defaults(self):
        from colormatic.config import load_config

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.yaml"
            path.write_text("resources:\n  fallback_on_error: false\n", encoding="utf-8")
            config = load_config(path)
        self.assertFalse(config["resources"]["fallback_on_error"])
        self.assertEqual(config["resources"]["root"], "resources")

    def test_resource_root_relative_to_project(self):
        from colormatic.config import get_resource_root

        self.assertEqual(get_resource_root({"resources": {"root": "packs/a"}}), ROOT / "packs" / "a")
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(get_resource_root({"resources": {"root": tmp}}), Path(tmp))


class TestLoadGlobalColors(unittest.TestCase):

    def _config(self, root: str, fallback: bool, resource: str = "colormatic:color.json"):
        return {
            "resources": {"root": root, "global_colors": resource, "fallback_on_error": fallback}
        }

    def test_bundled_resource_pack(self):
        """Default config reads resources/assets/colormatic/color.json."""
        from colormatic.data.keys import NO_EFFECT, DyeColor
        from colormatic.loader import load_global_colors
        from colormatic.registry import vanilla_dimension_types

        props = load_global_colors()
        self.assertIsNotNone(props)
        nether = vanilla_dimension_types().get_by_name("the_nether")
        self.assertEqual(props.get_dimension_fog(nether), 0x330808)
        self.assertEqual(props.get_potion(NO_EFFECT), 0x385DC6)
        self.assertEqual(props.get_wool(DyeColor.LIGHT_GRAY), 0x8E8E86)
        self.assertEqual(props.get_lilypad(), 0x208030)

    def test_fallback_flag_from_config(self):
        from colormatic.loader import load_global_colors

        with tempfile.TemporaryDirectory() as tmp:
            self.assertIsNone(load_global_colors(self._config(tmp, False)))
            props = load_global_colors(self._config(tmp, True))
        self.assertIsNotNone(props)
        self.assertEqual(props.get_lilypad(), 0)

    def test_properties_resource_from_config(self):
        from colormatic.loader import load_global_colors

        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "assets" / "minecraft" / "optifine" / "color.properties"
            target.parent.mkdir(parents=True)
            target.write_text("lilypad=123abc\n", encoding="utf-8")
            props = load_global_colors(self._config(tmp, False, "minecraft:optifine/color.properties"))
        self.assertEqual(props.get_lilypad(), 0x123ABC)


if __name__ == "__main__":
    unittest.main()
