"""Tests for domain exception hierarchy."""

from __future__ import annotations

import unittest

from oohelpers.exceptions import (
    ConfigValidationError,
    HandlerFailuresError,
    HandlerNotCallableError,
    InvalidEventNameError,
    OOHelpersError,
)


class ExceptionHierarchyTests(unittest.TestCase):
    """Validate exception inheritance contract."""

    def test_exception_hierarchy(self) -> None:
        self.assertTrue(issubclass(InvalidEventNameError, OOHelpersError))
        self.assertTrue(issubclass(InvalidEventNameError, ValueError))
        self.assertTrue(issubclass(HandlerNotCallableError, OOHelpersError))
        self.assertTrue(issubclass(HandlerNotCallableError, TypeError))
        self.assertTrue(issubclass(HandlerFailuresError, OOHelpersError))
        self.assertTrue(issubclass(ConfigValidationError, OOHelpersError))

    def test_handler_failures_message_counts_failures(self) -> None:
        error = HandlerFailuresError("saved", [(print, ValueError("x")), (len, KeyError())])
        self.assertEqual(error.event_name, "saved")
        self.assertEqual(len(error.failures), 2)
        self.assertIn("2 handler(s)", str(error))
        self.assertIn("'saved'", str(error))


if __name__ == "__main__":
    unittest.main()
