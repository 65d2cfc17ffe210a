"""Tests for the per-subject channel table."""

from __future__ import annotations

import unittest

from oohelpers.events.channels import ChannelTable


def _noop(*_args: object) -> None:
    pass


def _other(*_args: object) -> None:
    pass


class ChannelTableTests(unittest.TestCase):
    """Validate ordering, duplicate and removal behavior."""

    def test_add_keeps_order_and_duplicates(self) -> None:
        table = ChannelTable()
        table.add("e", _noop)
        table.add("e", _other)
        table.add("e", _noop)
        self.assertEqual(table.handlers("e"), (_noop, _other, _noop))

    def test_handlers_is_a_snapshot(self) -> None:
        table = ChannelTable()
        table.add("e", _noop)
        snapshot = table.handlers("e")
        table.add("e", _other)
        self.assertEqual(snapshot, (_noop,))

    def test_remove_first_occurrence(self) -> None:
        table = ChannelTable()
        table.add("e", _noop)
        table.add("e", _other)
        table.add("e", _noop)
        self.assertTrue(table.remove("e", _noop))
        self.assertEqual(table.handlers("e"), (_other, _noop))

    def test_remove_last_handler_drops_channel(self) -> None:
        table = ChannelTable()
        table.add("e", _noop)
        table.remove("e", _noop)
        self.assertNotIn("e", table)
        self.assertEqual(len(table), 0)

    def test_remove_missing_returns_false(self) -> None:
        table = ChannelTable()
        self.assertFalse(table.remove("missing", _noop))
        table.add("e", _noop)
        self.assertFalse(table.remove("e", _other))

    def test_remove_everywhere_counts_channels(self) -> None:
        table = ChannelTable()
        table.add("a", _noop)
        table.add("b", _noop)
        table.add("b", _other)
        self.assertEqual(table.remove_everywhere(_noop), 2)
        self.assertEqual(table.names(), ["b"])

    def test_discard(self) -> None:
        table = ChannelTable()
        table.add("a", _noop)
        table.add("b", _noop)
        table.discard("a")
        table.discard("missing")
        self.assertEqual(table.names(), ["b"])
        self.assertEqual(table.handlers("a"), ())


if __name__ == "__main__":
    unittest.main()
