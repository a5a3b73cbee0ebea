from __future__ import annotations

import string
import unittest

from filehash.util.hexenc import to_hex


class HexEncoderTests(unittest.TestCase):
    def test_known_bytes(self) -> None:
        self.assertEqual(to_hex(bytes([68, 201, 46])), "44c92e")

    def test_zero_padded(self) -> None:
        self.assertEqual(to_hex(b"\x08\x00\x0f"), "08000f")

    def test_empty(self) -> None:
        self.assertEqual(to_hex(b""), "")

    def test_every_byte_value(self) -> None:
        data = bytes(range(256))
        rendered = to_hex(data)

        self.assertEqual(len(rendered), 2 * len(data))
        self.assertTrue(set(rendered) <= set(string.digits + "abcdef"))
        self.assertEqual(rendered, data.hex())


if __name__ == "__main__":
    unittest.main()
