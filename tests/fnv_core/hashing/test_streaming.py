"""
tests/fnv_core/hashing/test_streaming.py
Tests de la Fachada Streaming (estilo hashlib).
"""
import unittest
from fnv_core.hashing.engine import FNV1a, new, fnv1a_32, fnv1a_128, fnv1a_1024
from fnv_core.hashing.utils import display_hex

HELLO = b"hello world!goodbye!"


class TestStreamingFacade(unittest.TestCase):

    def test_default_width_is_128(self):
        h = new()
        self.assertEqual(h.width, 128)
        self.assertEqual(h.digest_size, 16)
        self.assertEqual(h.name, "fnv1a_128")

    def test_constructor_data_equals_update(self):
        self.assertEqual(new(128, HELLO).digest(), fnv1a_128(HELLO))
        h = FNV1a(1024)
        h.update(HELLO)
        self.assertEqual(h.digest(), fnv1a_1024(HELLO))

    def test_chunked_updates_equal_one_shot(self):
        for width in (32, 64, 128, 256, 512, 1024):
            h = new(width)
            for i in range(0, len(HELLO), 3):
                h.update(HELLO[i:i + 3])
            self.assertEqual(h.digest(), new(width, HELLO).digest())

    def test_hexdigest_is_big_endian_display(self):
        self.assertEqual(new(32, HELLO).hexdigest(), "113baa28")
        self.assertEqual(new(128, HELLO).hexdigest(), "aebb096b13b291473b18f8448a446fa0")
        self.assertEqual(new(32, HELLO).digest(), bytes.fromhex("113baa28")[::-1])

    def test_digest_does_not_finalize_state(self):
        h = new(256, HELLO[:10])
        h.digest()
        h.update(HELLO[10:])
        self.assertEqual(h.digest(), new(256, HELLO).digest())

    def test_copy_is_independent(self):
        for width in (64, 512):
            h = new(width, b"prefix-")
            clone = h.copy()
            clone.update(b"branch")
            self.assertEqual(h.digest(), new(width, b"prefix-").digest())
            self.assertEqual(clone.digest(), new(width, b"prefix-branch").digest())

    def test_empty_update_is_noop(self):
        h = new(32)
        h.update(b"")
        self.assertEqual(h.digest(), fnv1a_32(b""))

    def test_rejects_text(self):
        with self.assertRaises(TypeError):
            new(128, "texto")

    def test_unsupported_width(self):
        with self.assertRaises(ValueError):
            FNV1a(96)
        with self.assertRaises(TypeError):
            FNV1a(128.0)

    def test_display_hex_reverses(self):
        self.assertEqual(display_hex(b"\x01\x02\x03\x04"), "04030201")


if __name__ == '__main__':
    unittest.main()
