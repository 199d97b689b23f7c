import unittest

from drawtable.schema.samples import (
    available_sample_configs,
    get_sample_config,
    load_config,
)


class SamplesHelpersTests(unittest.TestCase):
    def test_load_config_and_lookup_errors(self):
        cfg = load_config("metadata: {}\nentries: []")
        self.assertIn("entries", cfg)

        with self.assertRaises(ValueError):
            load_config("")
        with self.assertRaises(ValueError):
            load_config("- just\n- a\n- list")
        with self.assertRaises(TypeError):
            load_config(123)

        names = available_sample_configs()
        self.assertEqual(names, ["encounters", "loot", "weather"])

        with self.assertRaises(ValueError) as exc:
            get_sample_config("missing_name")
        self.assertIn("Available:", str(exc.exception))

    def test_load_config_copies_dict_input(self):
        source = {"entries": [{"value": "a", "weight": 1}]}
        loaded = load_config(source)
        loaded["entries"].append({"value": "b", "weight": 2})
        self.assertEqual(len(source["entries"]), 1)

    def test_sample_lookup_is_case_insensitive(self):
        config = get_sample_config("  LOOT ")
        self.assertEqual(config["metadata"]["name"], "loot_drop")
        self.assertEqual(len(config["entries"]), 5)


if __name__ == "__main__":
    unittest.main()
