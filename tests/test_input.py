"""Regression tests for raw-key decoding.

Covers ESC timing, arrow and paging sequences, and control-key token mapping.
These tests protect interactive input handling in raw terminal mode.
"""

import os
import time
import unittest

from lazydu import input as input_mod


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        started = time.monotonic()
        keys = self._read_all(b"\x1b", 1)
        elapsed = time.monotonic() - started

        self.assertEqual(keys, ["ESC"])
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[A\x1b[B", 2), ["UP", "DOWN"])
        self.assertEqual(self._read_all(b"\x1bOA\x1bOB", 2), ["UP", "DOWN"])

    def test_paging_sequences_are_recognized(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[5~\x1b[6~", 2), ["PAGE_UP", "PAGE_DOWN"])

    def test_home_and_end_variants(self) -> None:
        keys = self._read_all(b"\x1b[H\x1b[F\x1b[1~\x1b[4~\x1b[7~\x1b[8~\x1bOH\x1bOF", 8)

        self.assertEqual(keys, ["HOME", "END", "HOME", "END", "HOME", "END", "HOME", "END"])

    def test_unknown_tilde_sequence_is_reported_as_escape(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[99~", 1), ["ESC"])

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1bq", 2), ["ESC", "q"])

    def test_control_keys(self) -> None:
        keys = self._read_all(b"\x03\t\r\n", 4)

        self.assertEqual(keys, ["CTRL_C", "TAB", "ENTER", "ENTER"])

    def test_printable_keys_pass_through(self) -> None:
        self.assertEqual(self._read_all(b" dy", 3), [" ", "d", "y"])

    def test_timeout_without_input_returns_empty_token(self) -> None:
        self.assertEqual(self._read_all(b"", 1), [""])


if __name__ == "__main__":
    unittest.main()
