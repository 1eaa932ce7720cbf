from __future__ import annotations

import codecs
import os
import unittest

import a85codec
from a85codec import codec as codec_module
from a85codec.codec import Ascii85Codec, lookup, register


class Ascii85CodecTests(unittest.TestCase):
    def test_default_wraps(self):
        codec = Ascii85Codec()
        self.assertEqual(codec.encode(b"Man "), "<~9jqo^~>")
        self.assertEqual(codec.encode_bytes(b"Man "), b"<~9jqo^~>")

    def test_bare_payload(self):
        codec = Ascii85Codec(include_delimiters=False)
        self.assertEqual(codec.encode(b"Man "), "9jqo^")
        self.assertEqual(codec.decode("<~9jqo^~>"), b"Man ")
        self.assertEqual(codec.decode("9jqo^"), b"Man ")

    def test_round_trip(self):
        for include in (True, False):
            codec = Ascii85Codec(include_delimiters=include)
            data = os.urandom(1000) + b"\x00" * 12
            self.assertEqual(codec.decode(codec.encode(data)), data)
            self.assertEqual(codec.decode(codec.encode_bytes(data)), data)

    def test_repr(self):
        self.assertEqual(repr(Ascii85Codec(False)), "Ascii85Codec(include_delimiters=False)")


class CodecRegistryTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        register()

    def test_lookup_unknown(self):
        self.assertIsNone(lookup("base64"))

    def test_lookup_names(self):
        for name in ("ascii85", "a85"):
            self.assertEqual(lookup(name).name, "ascii85")

    def test_codecs_encode(self):
        self.assertEqual(codecs.encode(b"Man ", "ascii85"), b"9jqo^")
        self.assertEqual(codecs.encode(b"\x00" * 8, "a85"), b"zz")

    def test_codecs_decode(self):
        self.assertEqual(codecs.decode(b"9jqo^", "ascii85"), b"Man ")
        self.assertEqual(codecs.decode(b"<~9jqo^~>", "a85"), b"Man ")

    def test_codecs_round_trip(self):
        data = os.urandom(333)
        self.assertEqual(codecs.decode(codecs.encode(data, "ascii85"), "ascii85"), data)

    def test_not_a_text_encoding(self):
        with self.assertRaises(LookupError):
            "Man ".encode("ascii85")

    def test_only_strict_errors(self):
        with self.assertRaises(ValueError):
            codecs.encode(b"Man ", "ascii85", "ignore")

    def test_decode_errors_propagate(self):
        with self.assertRaises(a85codec.GroupOverflow):
            codecs.decode(b"vvvvv", "ascii85")

    def test_register_twice(self):
        register()
        self.assertTrue(codec_module._registered)
        self.assertEqual(codecs.encode(b"Man ", "ascii85"), b"9jqo^")


class PackageSurfaceTests(unittest.TestCase):
    def test_top_level_functions(self):
        self.assertEqual(a85codec.encode(b"Man ", False), "9jqo^")
        self.assertEqual(a85codec.decode("<~9jqo^~>"), b"Man ")

    def test_error_hierarchy(self):
        for cls in (a85codec.InvalidCharacter, a85codec.EmbeddedZeroShorthand, a85codec.GroupOverflow):
            self.assertTrue(issubclass(cls, a85codec.DecodeError))
            self.assertTrue(issubclass(cls, a85codec.Ascii85Error))
            self.assertTrue(issubclass(cls, ValueError))

    def test_decode_rejection_is_logged(self):
        with self.assertLogs("a85codec", level="DEBUG") as cm:
            with self.assertRaises(a85codec.InvalidCharacter):
                a85codec.decode("9j\x01qo")
        self.assertTrue(any("InvalidCharacter" in line for line in cm.output))


if __name__ == "__main__":
    unittest.main()
