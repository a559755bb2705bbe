import unittest

from runeforge.application.presenters import RunicWordsPresenter
from runeforge.domain import CheckResult, GenerationResult, Rune, RuneCatalog, RunicWordEntry


class RunicWordsPresenterTests(unittest.TestCase):
    def setUp(self):
        self.presenter = RunicWordsPresenter()

    def test_generation_report_lists_words_in_order(self):
        result = GenerationResult.success(
            [RunicWordEntry("Eld-Lum", 65), RunicWordEntry("Eth-Sur", 61)]
        )

        text = self.presenter.generation_report(2, result)

        self.assertIn("length 2", text)
        self.assertIn("1. Eld-Lum (65)", text)
        self.assertIn("2. Eth-Sur (61)", text)
        self.assertLess(text.index("Eld-Lum"), text.index("Eth-Sur"))
        self.assertIn("total power: 126", text)

    def test_generation_report_shows_error(self):
        result = GenerationResult.failure("Could not create any Runic Words with a length of 20")

        text = self.presenter.generation_report(20, result)

        self.assertIn("Could not create any Runic Words with a length of 20", text)
        self.assertNotIn("total power", text)

    def test_check_report_success_and_failure(self):
        ok = self.presenter.check_report("Ber-Ohm-Lo", CheckResult.success(6))
        failed = self.presenter.check_report(
            "El-Ort",
            CheckResult.failure("This runicWord has an illegal combination of Runes"),
        )

        self.assertEqual(ok, "Ber-Ohm-Lo: power 6")
        self.assertEqual(failed, "El-Ort: This runicWord has an illegal combination of Runes")

    def test_catalog_report_marks_unresolved_exclusions(self):
        catalog = RuneCatalog([Rune("Sol", 10, "Thu"), Rune("Thul", 13, "Sol"), Rune("Ber", 3)])

        text = self.presenter.catalog_report(catalog)
        lines = text.splitlines()

        self.assertTrue(lines[1].startswith("Thul"))
        self.assertIn("x Sol", lines[1])
        self.assertNotIn(" x ", lines[3])
        self.assertIn("Unresolved exclusions:", text)
        self.assertIn("- Sol -> Thu", text)

    def test_catalog_report_without_problems(self):
        text = self.presenter.catalog_report(RuneCatalog([Rune("Ber", 3)]))

        self.assertNotIn("Unresolved", text)
