import base64
import binascii
from collections import OrderedDict

import msgpack
from Cryptodome.Hash import SHA512

from algotxn.sdk import constants, error


def msgpack_encode(obj):
    """
    Encode the object using canonical msgpack.

    Args:
        obj (Transaction, SignedTransaction, MultisigTransaction, Multisig,
            TxGroup or dict): object to be encoded

    Returns:
        str: msgpack encoded object

    Note:
        Canonical Msgpack: maps must contain keys in lexicographic order; maps
        must omit key-value pairs where the value is a zero-value; positive
        integer values must be encoded as "unsigned" in msgpack, regardless of
        whether the value space is semantically signed or unsigned; integer
        values must be represented in the shortest possible encoding; binary
        arrays must be represented using the "bin" format family (that is, use
        the most recent version of msgpack rather than the older msgpack
        version that had no "bin" family).
    """
    d = obj
    if not isinstance(obj, dict):
        d = obj.dictify()
    od = _sort_dict(d)
    return base64.b64encode(msgpack.packb(od, use_bin_type=True)).decode()


def _is_empty(value):
    if value is None or value is False:
        return True
    if isinstance(value, (int, bytes, bytearray, str, list, tuple, dict)):
        return not value
    return False


def _sort_dict(d):
    """
    Sorts a dictionary recursively and removes all zero values.

    Args:
        d (dict): dictionary to be sorted

    Returns:
        OrderedDict: sorted dictionary with no zero values
    """
    od = OrderedDict()
    for k, v in sorted(d.items()):
        if isinstance(v, dict):
            v = _sort_dict(v)
        elif isinstance(v, list):
            v = [_sort_dict(i) if isinstance(i, dict) else i for i in v]
        if not _is_empty(v):
            od[k] = v
    return od


def msgpack_decode(enc):
    """
    Decode a msgpack encoded object from a string.

    Args:
        enc (str or dict): string to be decoded

    Returns:
        Transaction, SignedTransaction, MultisigTransaction, Multisig, TxGroup
        or dict: decoded object
    """
    from algotxn.sdk.future import transaction

    decoded = enc
    if not isinstance(enc, dict):
        decoded = msgpack.unpackb(base64.b64decode(enc), raw=False)
    if "type" in decoded:
        return transaction.Transaction.undictify(decoded)
    if "msig" in decoded:
        return transaction.MultisigTransaction.undictify(decoded)
    if "txn" in decoded:
        return transaction.SignedTransaction.undictify(decoded)
    if "subsig" in decoded:
        return transaction.Multisig.undictify(decoded)
    if "txlist" in decoded:
        return transaction.TxGroup.undictify(decoded)
    return decoded


def is_valid_address(addr):
    """
    Check if the string address is a valid Algorand address.

    Args:
        addr (str): base32 address

    Returns:
        bool: whether or not the address is valid
    """
    try:
        decode_address(addr)
    except (error.InvalidAddressError, error.EmptyAddressError):
        return False
    return True


def decode_address(addr):
    """
    Decode a string address into its address bytes and checksum.

    Args:
        addr (str): base32 address

    Returns:
        bytes: address decoded into bytes

    Raises:
        EmptyAddressError: if addr is empty
        InvalidAddressError: if addr is not a checksummed base32 address
    """
    if not addr:
        raise error.EmptyAddressError
    if not isinstance(addr, str) or len(addr) != constants.address_len:
        raise error.InvalidAddressError(addr)
    try:
        decoded = base64.b32decode(correct_padding(addr))
    except (binascii.Error, ValueError):
        raise error.InvalidAddressError(addr)
    addr_bytes = decoded[: -constants.check_sum_len_bytes]
    if len(addr_bytes) != constants.key_len_bytes:
        raise error.InvalidAddressError(addr)
    expected_checksum = checksum(addr_bytes)[-constants.check_sum_len_bytes :]
    if decoded[-constants.check_sum_len_bytes :] != expected_checksum:
        raise error.InvalidAddressError(addr, "checksum mismatch")
    # trailing bits of the last base32 character must be zero
    if encode_address(addr_bytes) != addr:
        raise error.InvalidAddressError(addr)
    return addr_bytes


def encode_address(addr_bytes):
    """
    Encode a byte address into a string composed of the encoded bytes and the
    checksum.

    Args:
        addr_bytes (bytes): address in bytes

    Returns:
        str: base32 encoded address
    """
    if not isinstance(addr_bytes, (bytes, bytearray)) or len(addr_bytes) != constants.key_len_bytes:
        raise error.InvalidAddressError(reason="public key must be 32 bytes")
    chksum = checksum(bytes(addr_bytes))[-constants.check_sum_len_bytes :]
    addr = base64.b32encode(bytes(addr_bytes) + chksum)
    return undo_padding(addr.decode())


def checksum(data):
    """
    Compute the checksum of arbitrary binary input.

    Args:
        data (bytes): data as bytes

    Returns:
        bytes: checksum of the data
    """
    chksum = SHA512.new(truncate="256")
    chksum.update(data)
    return chksum.digest()


def correct_padding(a):
    if len(a) % 8 == 0:
        return a
    return a + "=" * (8 - len(a) % 8)


def undo_padding(a):
    return a.strip("=")
