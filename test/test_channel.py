import unittest
from unittest.mock import patch

from vecpath.kernel.channel import Channel, get_channel
from vecpath.tools.offset import offset
from vecpath.tools.segments import L, M


class TestChannel(unittest.TestCase):
    """Message streams used for engine debug output and the console."""

    def setUp(self):
        self.messages = []
        self.collect = self.messages.append

    def test_silent_until_watched(self):
        channel = Channel("path-test")
        self.assertFalse(channel)
        channel("nobody listens")
        channel.watch(self.collect)
        self.assertTrue(channel)
        channel("heard")
        self.assertEqual(self.messages, ["heard"])

    def test_operators(self):
        channel = Channel("path-test")
        channel += self.collect
        channel += self.collect
        channel("once")
        channel -= self.collect
        channel("dropped")
        self.assertEqual(self.messages, ["once"])
        self.assertFalse(channel)

    def test_buffer(self):
        channel = Channel("history", buffer_size=2)
        self.assertTrue(channel)
        for message in ("first", "second", "third"):
            channel(message)
        channel.watch(self.collect)
        self.assertEqual(self.messages, ["second", "third"])
        self.assertEqual(len(channel), 2)

    def test_formatting(self):
        channel = Channel("console-test", line_end="\n")
        channel.watch(self.collect)
        channel("M 0 0")
        channel("M 0 0\nL 1 1", indent=True)
        self.assertEqual(self.messages, ["M 0 0\n", "    M 0 0\n    L 1 1\n    "])
        self.assertIn("console-test", repr(channel))

    def test_weak_watcher_released(self):
        class Collector:
            def __init__(self, store):
                self.store = store

            def __call__(self, message):
                self.store.append(message)

        channel = Channel("path-test")
        collector = Collector(self.messages)
        channel.watch(collector, weak=True)
        channel("alive")
        del collector
        channel("released")
        self.assertEqual(self.messages, ["alive"])
        self.assertFalse(channel)

    def test_failing_watcher_logged(self):
        def failing(message):
            raise RuntimeError(message)

        channel = Channel("path-test")
        channel.watch(failing)
        channel.watch(self.collect)
        with patch("vecpath.kernel.channel.logger") as logger:
            channel("delivered")
            channel.unwatch(print)
        self.assertEqual(logger.warning.call_count, 2)
        self.assertEqual(self.messages, ["delivered"])

    def test_shared_path_channel(self):
        """Engine modules and callers share one channel per name."""
        self.assertIs(get_channel("path"), get_channel("path"))
        channel = get_channel("path")
        channel.watch(self.collect)
        try:
            offset(1, [M, 0, 0, L, 0, 0, L, 5, 0])
        finally:
            channel.unwatch(self.collect)
        self.assertEqual(len(self.messages), 1)


if __name__ == "__main__":
    unittest.main()
