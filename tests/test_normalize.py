import unittest

from podmatch.normalize import is_midday, slot_hour, slot_hours, split_field, unique_in_order
from podmatch.rules import MatchRules
from podmatch.vocabulary import format_tag_label


class TestSplitField(unittest.TestCase):

    def test_splits_on_commas_and_semicolons(self):
        self.assertEqual(split_field("music, art;chess"), ["music", "art", "chess"])

    def test_drops_blank_tokens_and_keeps_case(self):
        self.assertEqual(split_field(" ;Music,, ;Art "), ["Music", "Art"])

    def test_empty_values(self):
        self.assertEqual(split_field(""), [])
        self.assertEqual(split_field(None), [])

    def test_unique_in_order(self):
        self.assertEqual(unique_in_order(["b", "a", "b", "c", "a"]), ["b", "a", "c"])


class TestMidday(unittest.TestCase):

    def test_slot_hour(self):
        self.assertEqual(slot_hour("Tue 11:30"), 11)
        self.assertEqual(slot_hour("Mon 9:00"), 9)
        self.assertIsNone(slot_hour("Weekend"))

    def test_default_midday_hours(self):
        hours = MatchRules().midday_hours
        self.assertTrue(is_midday("Tue 11:30", hours))
        self.assertTrue(is_midday("Wed 12:30", hours))
        self.assertTrue(is_midday("Sat 13:00", hours))
        self.assertFalse(is_midday("Mon 10:00", hours))
        self.assertFalse(is_midday("Thu 17:00", hours))
        self.assertFalse(is_midday("Mon 21:30", hours))
        self.assertFalse(is_midday("TBD", hours))

    def test_any_time_in_a_range_label_counts(self):
        hours = MatchRules().midday_hours
        self.assertEqual(slot_hours("Mon 10:00-12:00"), [10, 12])
        self.assertTrue(is_midday("Mon 10:00-12:00", hours))
        self.assertTrue(is_midday("Fri 13:30 - 15:00", hours))
        self.assertFalse(is_midday("Thu 17:00-19:00", hours))
        self.assertFalse(is_midday("Mon 21:30-22:30", hours))


class TestRules(unittest.TestCase):

    def test_defaults(self):
        rules = MatchRules()
        self.assertEqual((rules.min_pod_size, rules.max_pod_size), (5, 8))
        self.assertEqual(rules.priority_tag, "commuter")
        self.assertFalse(rules.carry_leftovers)

    def test_invalid_bounds(self):
        with self.assertRaises(ValueError):
            MatchRules(min_pod_size=0)
        with self.assertRaises(ValueError):
            MatchRules(min_pod_size=6, max_pod_size=5)

    def test_from_dict_rejects_unknown_keys(self):
        with self.assertRaises(ValueError):
            MatchRules.from_dict({"pod_size": 5})


class TestTagLabels(unittest.TestCase):

    def test_known_and_unknown_tags(self):
        self.assertEqual(format_tag_label("language_ally"), "Language Ally")
        self.assertEqual(format_tag_label("skateboarding"), "skateboarding")

    def test_custom_tags(self):
        self.assertEqual(format_tag_label("other: chess club"), "Other: chess club")
        self.assertEqual(format_tag_label("other:"), "Other")


if __name__ == "__main__":
    unittest.main()
