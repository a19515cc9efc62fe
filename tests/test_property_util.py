"""
Unit tests for the color properties document reader (JSON, YAML, .properties).
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _id(path: str):
    from colormatic.identifier import Identifier
    return Identifier("colormatic", path)


class TestReadDocument(unittest.TestCase):

    def test_format_by_suffix(self):
        from colormatic.properties.util import document_format

        self.assertEqual(document_format(_id("color.json")), "json")
        self.assertEqual(document_format(_id("color.properties")), "properties")
        self.assertEqual(document_format(_id("color.yml")), "yaml")
        self.assertEqual(document_format(_id("color")), "json")

    def test_json_numbers_kept_as_hex_text(self):
        """Bare numbers keep their digits so 112233 reads as 0x112233 later."""
        from colormatic.properties.util import read_document

        doc = read_document('{"lilypad": 112233, "fog": {"overworld": "aabbcc"}}', _id("color.json"))
        self.assertEqual(doc, {"lilypad": "112233", "fog": {"overworld": "aabbcc"}})

    def test_remap_applies_to_nested_keys(self):
        from colormatic.data.keys import remap_legacy_key
        from colormatic.properties.util import read_document

        doc = read_document(
            '{"fog": {"nether": "1"}, "sheep": {"lightBlue": "2", "red": "3"}}',
            _id("color.json"),
            remap_legacy_key,
        )
        self.assertEqual(doc, {"fog": {"the_nether": "1"}, "sheep": {"light_blue": "2", "red": "3"}})

    def test_exclude_drops_keys(self):
        from colormatic.properties.util import read_document

        doc = read_document(
            '{"fog": {"a": "1", "b": "2"}, "sky": {}}',
            _id("color.json"),
            exclude=lambda k: k in ("b", "sky"),
        )
        self.assertEqual(doc, {"fog": {"a": "1"}})

    def test_empty_documents_are_none(self):
        from colormatic.properties.util import read_document

        self.assertIsNone(read_document("", _id("color.json")))
        self.assertIsNone(read_document("   \n", _id("color.json")))
        self.assertIsNone(read_document("null", _id("color.json")))
        self.assertIsNone(read_document("", _id("color.yaml")))
        self.assertEqual(read_document("", _id("color.properties")), {})

    def test_malformed(self):
        from colormatic.properties.util import MalformedDocumentError, read_document

        cases = [
            ('{"fog": ', "color.json"),
            ("[1, 2]", "color.json"),
            ('"just a string"', "color.json"),
            ("fog: [unclosed", "color.yaml"),
            ("noseparator", "color.properties"),
            ("lilypad=\\u12G4", "color.properties"),
            ("lilypad: 2020-13-45", "color.yaml"),
            ("lilypad: !!int zz", "color.yaml"),
            ("fog: &a\n  x: *a\n", "color.yaml"),
            ('{"fog": ' + "[" * 200000 + "]" * 200000 + "}", "color.json"),
        ]
        for text, path in cases:
            with self.subTest(path=path, text=text):
                with self.assertRaises(MalformedDocumentError):
                    read_document(text, _id(path))

    def test_yaml(self):
        from colormatic.data.keys import remap_legacy_key
        from colormatic.properties.util import read_document

        text = "fog:\n  end: '0a0a14'\nlilypad: 0x208030\n"
        doc = read_document(text, _id("color.yaml"), remap_legacy_key)
        self.assertEqual(doc, {"fog": {"the_end": "0a0a14"}, "lilypad": 0x208030})


class TestParseProperties(unittest.TestCase):

    def test_sections_and_scalars(self):
        from colormatic.properties.util import parse_properties

        text = "\n".join([
            "# Optifine color.properties",
            "! also a comment",
            "fog.nether=330808",
            "potion.minecraft:speed = 7cafc6",
            "lilypad: 208030",
            "",
        ])
        self.assertEqual(parse_properties(text), {
            "fog": {"nether": "330808"},
            "potion": {"minecraft:speed": "7cafc6"},
            "lilypad": "208030",
        })

    def test_java_line_syntax(self):
        """Continuations, escapes and whitespace separators as in java.util.Properties."""
        from colormatic.properties.util import parse_properties

        text = "\n".join([
            "fog.nether = 33\\",
            "    0808",
            "sky.overworld 78a7ff",
            "lilypad\t208030",
            "potion.water=\\u0033\\u0038\\u0035dc6",
            "map.black\\=x=1",
            "collar.red=b02e26\\\\",
            "# continuation does not apply to a comment \\",
            "sheep.white=e9ecec",
        ])
        self.assertEqual(parse_properties(text), {
            "fog": {"nether": "330808"},
            "sky": {"overworld": "78a7ff"},
            "lilypad": "208030",
            "potion": {"water": "385dc6"},
            "map": {"black=x": "1"},
            "collar": {"red": "b02e26\\"},
            "sheep": {"white": "e9ecec"},
        })

    def test_colon_separates_without_equals(self):
        from colormatic.properties.util import parse_properties

        self.assertEqual(parse_properties("lilypad: 208030"), {"lilypad": "208030"})
        self.assertEqual(parse_properties("lilypad:208030"), {"lilypad": "208030"})
        self.assertEqual(
            parse_properties("potion.minecraft:speed=7cafc6"),
            {"potion": {"minecraft:speed": "7cafc6"}},
        )

    def test_section_value_conflict(self):
        from colormatic.properties.util import MalformedDocumentError, parse_properties

        with self.assertRaises(MalformedDocumentError):
            parse_properties("fog=112233\nfog.nether=445566")
        with self.assertRaises(MalformedDocumentError):
            parse_properties("fog.nether=445566\nfog=112233")
        with self.assertRaises(MalformedDocumentError):
            parse_properties("=112233")


if __name__ == "__main__":
    unittest.main()
