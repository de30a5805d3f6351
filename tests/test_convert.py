import unittest

from jwk_module.utils.convert import to_bytes
from jwk_module.utils.errors import ConversionError


class ConvertTesting(unittest.TestCase):
    def test_absent_values(self):
        for value in (None, "", b"", bytearray(), memoryview(b""), 0, 0.0, False, [], (), {}):
            with self.subTest(value=value):
                self.assertIsNone(to_bytes(value))

    def test_str_is_utf8(self):
        self.assertEqual(to_bytes("ñandú"), "ñandú".encode("utf-8"))

    def test_bytes_like(self):
        self.assertEqual(to_bytes(b"\x00\x01"), b"\x00\x01")
        self.assertEqual(to_bytes(bytearray(b"abc")), b"abc")
        self.assertEqual(to_bytes(memoryview(b"xyz")), b"xyz")
        self.assertIsInstance(to_bytes(bytearray(b"abc")), bytes)

    def test_unsupported_types(self):
        for value in (42, 1.5, True, [1, 2], {"a": 1}, object()):
            with self.subTest(value=value):
                with self.assertRaises(ConversionError) as ctx:
                    to_bytes(value)
                self.assertIn(type(value).__name__, str(ctx.exception))
                self.assertIsInstance(ctx.exception.__cause__, TypeError)


if __name__ == "__main__":
    unittest.main()
