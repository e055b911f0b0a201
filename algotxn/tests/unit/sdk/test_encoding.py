import base64
from unittest import TestCase

import msgpack

from algotxn.sdk import constants, encoding, error

ADDRESS = "6KRBCIZBFF2BJHGOROIJ2UUXUU6D5QV7F4XZPV2IHJF2QCKMU7S4ECYHUA"
PUBLIC_KEY = bytes.fromhex("f2a21123212974149cce8b909d5297a53c3ec2bf2f2f97d7483a4ba8094ca7e5")
ZERO_ADDRESS = "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAY5HFKQ"


class TestAddressCodec(TestCase):
    def test_decode_address(self):
        self.assertEqual(PUBLIC_KEY, encoding.decode_address(ADDRESS))
        self.assertEqual(bytes(32), encoding.decode_address(ZERO_ADDRESS))

    def test_encode_address(self):
        self.assertEqual(ADDRESS, encoding.encode_address(PUBLIC_KEY))
        self.assertEqual(constants.address_len, len(encoding.encode_address(bytes(range(32)))))
        with self.assertRaises(error.InvalidAddressError):
            encoding.encode_address(bytes(31))

    def test_round_trip(self):
        for seed in (0, 1, 7, 128, 255):
            with self.subTest(seed=seed):
                key = bytes((seed + i) % 256 for i in range(32))
                self.assertEqual(key, encoding.decode_address(encoding.encode_address(key)))

    def test_tampered_checksum(self):
        # flip one character inside the checksum part of the text
        position = constants.address_len - 3
        replacement = "B" if ADDRESS[position] != "B" else "C"
        tampered = ADDRESS[:position] + replacement + ADDRESS[position + 1 :]
        with self.assertRaises(error.InvalidAddressError):
            encoding.decode_address(tampered)

    def test_malformed_addresses(self):
        for addr in (
            "0x",
            ADDRESS.lower(),
            ADDRESS[:-1],
            ADDRESS + "A",
            "1" * constants.address_len,
            ADDRESS[:-1] + "B",
        ):
            with self.subTest(addr=addr):
                with self.assertRaises(error.InvalidAddressError):
                    encoding.decode_address(addr)
                self.assertFalse(encoding.is_valid_address(addr))

    def test_empty_address_is_distinct(self):
        for addr in ("", None):
            with self.subTest(addr=addr):
                with self.assertRaises(error.EmptyAddressError):
                    encoding.decode_address(addr)
        self.assertFalse(issubclass(error.EmptyAddressError, error.InvalidAddressError))

    def test_is_valid_address(self):
        self.assertTrue(encoding.is_valid_address(ADDRESS))
        self.assertFalse(encoding.is_valid_address(""))


class TestCanonicalMsgpack(TestCase):
    def test_keys_sorted_and_zero_values_dropped(self):
        encoded = encoding.msgpack_encode(
            {"z": 1, "a": {"y": b"", "b": 2}, "m": 0, "n": None, "f": False, "l": [], "s": "x"}
        )
        decoded = msgpack.unpackb(base64.b64decode(encoded), raw=False)
        self.assertEqual(["a", "s", "z"], list(decoded))
        self.assertEqual({"b": 2}, decoded["a"])

    def test_deterministic(self):
        self.assertEqual(
            encoding.msgpack_encode({"b": 1, "a": b"\x01"}),
            encoding.msgpack_encode({"a": b"\x01", "b": 1}),
        )

    def test_bytes_use_bin_family(self):
        raw = base64.b64decode(encoding.msgpack_encode({"k": b"\x01\x02"}))
        self.assertEqual(b"\x81\xa1k\xc4\x02\x01\x02", raw)

    def test_decode_plain_dict(self):
        self.assertEqual({"x": 1}, encoding.msgpack_decode(encoding.msgpack_encode({"x": 1})))

    def test_checksum(self):
        self.assertEqual(32, len(encoding.checksum(b"")))
        self.assertEqual(encoding.checksum(b"abc"), encoding.checksum(b"abc"))
        self.assertNotEqual(encoding.checksum(b"abc"), encoding.checksum(b"abd"))
