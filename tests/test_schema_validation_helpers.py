import unittest

from drawtable.api.models import TableConfig
from drawtable.schema.samples import get_sample_config
from drawtable.schema.validation import (
    parse_table_config,
    parse_weight,
    validate_entries,
    validate_metadata,
)


class ValidationHelpersTests(unittest.TestCase):
    def test_validate_metadata_collects_warnings(self):
        warnings = validate_metadata({"name": " ", "seed": "abc", "colour": "red"})
        self.assertIn("metadata.colour is not a recognized key", warnings)
        self.assertIn("metadata.name must be a non-empty string", warnings)
        self.assertIn("metadata.seed must be an integer", warnings)
        self.assertEqual(validate_metadata({"name": "ok", "seed": 3}), [])

    def test_validate_entries_flags_duplicates_and_zero_weights(self):
        warnings = validate_entries(
            [
                {"value": "a", "weight": 1},
                {"value": "a", "weight": 2},
                {"value": "b", "weight": 0, "note": "x"},
                "not-a-mapping",
            ]
        )
        self.assertIn("entries[1] repeats value 'a'; the later weight wins", warnings)
        self.assertIn(
            "entries[2] has weight 0 and is never picked by weighted draws", warnings
        )
        self.assertIn("entries[2].note is not a recognized key", warnings)
        self.assertIn("entries[3] must be a mapping", warnings)

    def test_parse_weight_accepts_integral_values_only(self):
        self.assertEqual(parse_weight(5, "w"), 5)
        self.assertEqual(parse_weight(5.0, "w"), 5)
        with self.assertRaises(TypeError) as exc:
            parse_weight(5.5, "entries[0].weight")
        self.assertIn("entries[0].weight", str(exc.exception))
        with self.assertRaises(TypeError):
            parse_weight("5", "w")
        with self.assertRaises(ValueError):
            parse_weight(-2, "w")

    def test_parse_table_config_builds_table_config(self):
        config = parse_table_config(get_sample_config("encounters"))

        self.assertIsInstance(config, TableConfig)
        self.assertEqual(config.name, "encounters")
        self.assertEqual(config.seed, 23)
        self.assertEqual(config.entries[0], ("wolf_pack", 30))
        self.assertEqual(len(config.entries), 5)
        self.assertEqual(
            config.warnings,
            ("entries[4] has weight 0 and is never picked by weighted draws",),
        )

    def test_parse_table_config_defaults(self):
        config = parse_table_config({"entries": [{"value": 1, "weight": 2}]})
        self.assertEqual(config.name, "table")
        self.assertIsNone(config.seed)
        self.assertEqual(config.entries, ((1, 2),))
        self.assertEqual(config.warnings, ())

    def test_parse_table_config_structural_errors(self):
        with self.assertRaises(ValueError):
            parse_table_config([])
        with self.assertRaises(ValueError):
            parse_table_config({"metadata": {}})
        with self.assertRaises(ValueError):
            parse_table_config({"entries": {"value": 1}})
        with self.assertRaises(ValueError):
            parse_table_config({"metadata": [], "entries": []})
        with self.assertRaises(ValueError):
            parse_table_config({"entries": ["x"]})
        with self.assertRaises(ValueError) as exc:
            parse_table_config({"entries": [{"weight": 1}]})
        self.assertIn("missing 'value'", str(exc.exception))
        with self.assertRaises(ValueError) as exc:
            parse_table_config({"entries": [{"value": 1}]})
        self.assertIn("missing 'weight'", str(exc.exception))

    def test_unknown_top_level_keys_are_warnings(self):
        config = parse_table_config({"entries": [], "extra": 1})
        self.assertIn("extra is not a recognized top-level key", config.warnings)


if __name__ == "__main__":
    unittest.main()
