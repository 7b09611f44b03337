import unittest

from fbrest.transport.connector import Connector
from fbrest.transport.memory import MemoryTransport


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def sleep(self, seconds: float):
        self.sleeps.append(seconds)
        self.now += seconds


class TestConnector(unittest.TestCase):
    def test_first_attempt_success_does_not_sleep(self):
        clock = FakeClock()
        transport = MemoryTransport(b"")
        self.assertTrue(Connector(sleep=clock.sleep).connect(transport, "h", 443))
        self.assertEqual(transport.open_calls, 1)
        self.assertEqual(clock.sleeps, [])

    def test_retries_until_open(self):
        clock = FakeClock()
        transport = MemoryTransport(b"", fail_opens=4)
        connector = Connector(sleep=clock.sleep)
        self.assertTrue(connector.connect(transport, "h", 443))
        self.assertEqual(transport.open_calls, 5)
        self.assertEqual(connector.last_attempts, 5)
        self.assertEqual(clock.sleeps, [0.1] * 4)

    def test_always_failing_connection_gives_up_after_thirty_attempts(self):
        clock = FakeClock()
        transport = MemoryTransport(b"", fail_opens=None)
        result = Connector(sleep=clock.sleep).connect(transport, "h", 443)
        self.assertFalse(result)
        self.assertEqual(transport.open_calls, 30)
        self.assertLessEqual(transport.open_calls, 31)
        self.assertGreaterEqual(round(clock.now * 1000), 2900)

    def test_connects_on_last_allowed_attempt(self):
        clock = FakeClock()
        transport = MemoryTransport(b"", fail_opens=29)
        self.assertTrue(Connector(sleep=clock.sleep).connect(transport, "h", 443))
        self.assertEqual(transport.open_calls, 30)

    def test_passes_host_and_port(self):
        transport = MemoryTransport(b"")
        Connector(sleep=lambda s: None).connect(transport, "db.example.com", 443)
        self.assertEqual((transport.host, transport.port), ("db.example.com", 443))


if __name__ == "__main__":
    unittest.main()
