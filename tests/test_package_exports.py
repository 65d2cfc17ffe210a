"""Tests for top-level package exports."""

from __future__ import annotations

import unittest

import oohelpers


class PackageExportTests(unittest.TestCase):
    """Ensure __getattr__ and exported symbols behave as expected."""

    def test_version_is_a_string(self) -> None:
        self.assertIsInstance(oohelpers.__version__, str)

    def test_exports_resolve_known_symbols(self) -> None:
        for name in oohelpers.__all__:
            with self.subTest(name=name):
                self.assertIsNotNone(getattr(oohelpers, name))
        self.assertTrue(callable(oohelpers.load_config))
        self.assertTrue(callable(oohelpers.apply_config))
        self.assertTrue(callable(oohelpers.configure_logging))

    def test_unknown_symbol_raises_attribute_error(self) -> None:
        with self.assertRaises(AttributeError):
            getattr(oohelpers, "THIS_DOES_NOT_EXIST")


if __name__ == "__main__":
    unittest.main()
