import base64
import binascii
import logging
from collections import OrderedDict
from enum import IntEnum

from algotxn.sdk import constants, encoding, error
from algotxn.sdk.future.parsers import parse_accounts, parse_foreign_apps

logger = logging.getLogger("app.algotxn")


class SuggestedParams:
    """
    Contains various fields common to all transaction types.

    Args:
        fee (int): transaction fee (per byte if flat_fee is false). When flat_fee is true,
            fee may fall to zero but a group of N atomic transactions must
            still have a fee of at least N*min_txn_fee.
        first (int): first round for which the transaction is valid
        last (int): last round for which the transaction is valid
        gh (str or bytes): genesis hash, base64 encoded or raw 32 bytes
        gen (str, optional): genesis id
        flat_fee (bool, optional): whether the specified fee is a flat fee
        consensus_version (str, optional): the consensus protocol version as of 'first'
        min_fee (int, optional): the minimum transaction fee (flat)

    Attributes:
        fee (int)
        first (int)
        last (int)
        gen (str)
        gh (str)
        flat_fee (bool)
        consensus_version (str)
        min_fee (int)
    """

    def __init__(self, fee, first, last, gh, gen=None, flat_fee=False, consensus_version=None, min_fee=None):
        self.first = first
        self.last = last
        self.gh = gh
        self.gen = gen
        self.fee = fee
        self.flat_fee = flat_fee
        self.consensus_version = consensus_version
        self.min_fee = min_fee


class Transaction:
    """
    Superclass for various transaction types.
    """

    def __init__(self, sender, sp, note, lease, txn_type, rekey_to):
        self.sender = self.as_address(sender, required=True)
        self.genesis_hash = self.as_genesis_hash(sp.gh)
        self.fee = sp.fee
        self.first_valid_round = sp.first
        self.last_valid_round = sp.last
        self.note = self.as_note(note)
        self.genesis_id = sp.gen
        self.group = None
        self.lease = self.as_lease(lease)
        self.type = txn_type
        self.rekey_to = self.as_address(rekey_to)

    @staticmethod
    def as_address(addr, required=False):
        """Validate a checksummed address. Blank optional addresses are returned as None."""
        if not addr:
            if required:
                raise error.EmptyAddressError
            return None
        encoding.decode_address(addr)
        return addr

    @staticmethod
    def as_genesis_hash(gh):
        if not gh:
            raise error.MissingGenesisHashError
        if isinstance(gh, str):
            try:
                raw = base64.b64decode(gh, validate=True)
            except (binascii.Error, ValueError):
                raise error.WrongHashLengthError
        else:
            raw = bytes(gh)
        if len(raw) != constants.hash_len:
            raise error.WrongHashLengthError
        return base64.b64encode(raw).decode()

    @staticmethod
    def as_hash(hash):
        """Confirm that a value is 32 bytes. If all zeros, or a falsy value, return None"""
        if not hash:
            return None
        assert isinstance(hash, (bytes, bytearray)), "{} is not bytes".format(hash)
        if len(hash) != constants.hash_len:
            raise error.WrongHashLengthError
        if not any(hash):
            return None
        return hash

    @staticmethod
    def as_note(note):
        if not note:
            return None
        if not isinstance(note, (bytes, bytearray, str)):
            raise error.WrongNoteType
        if isinstance(note, str):
            note = note.encode()
        if len(note) > constants.note_max_length:
            raise error.WrongNoteLength
        return note

    @classmethod
    def as_lease(cls, lease):
        try:
            return cls.as_hash(lease)
        except error.WrongHashLengthError:
            raise error.WrongLeaseLengthError

    @staticmethod
    def as_amount(amt):
        if (not isinstance(amt, int)) or isinstance(amt, bool) or amt < 0:
            raise error.WrongAmountType
        return amt

    def estimate_size(self):
        """
        Estimate the encoded size of this transaction once signed.

        The unsigned encoding is measured with the fee field as it currently
        stands, and a constant is added for the signature.

        Returns:
            int: size in bytes
        """
        unsigned_size = len(base64.b64decode(encoding.msgpack_encode(self)))
        return unsigned_size + constants.num_additional_bytes_after_signing

    def set_fee(self, sp, flat_fee=None):
        """
        Compute and assign the fee for this transaction.

        Args:
            sp (SuggestedParams): suggested params the transaction was built from
            flat_fee (bool, optional): overrides sp.flat_fee when given
        """
        if flat_fee is None:
            flat_fee = sp.flat_fee
        if flat_fee:
            fee = sp.fee or 0
        else:
            fee = self.estimate_size() * (sp.fee or 0)
        if fee < constants.min_txn_fee:
            logger.debug(f"Raising {self.type} fee to the minimum. computed: {fee}, minimum: {constants.min_txn_fee}")
            fee = constants.min_txn_fee
        self.fee = fee
        return fee

    def get_txid(self):
        """
        Get the transaction's ID.

        Returns:
            str: transaction ID
        """
        txn = encoding.msgpack_encode(self)
        to_sign = constants.txid_prefix + base64.b64decode(txn)
        txid = encoding.checksum(to_sign)
        txid = base64.b32encode(txid).decode()
        return encoding.undo_padding(txid)

    def bytes_to_sign(self):
        """
        Get the bytes a signer must sign for this transaction.

        Returns:
            bytes: prefixed canonical encoding
        """
        return constants.txid_prefix + base64.b64decode(encoding.msgpack_encode(self))

    def dictify(self):
        d = dict()
        if self.fee:
            d["fee"] = self.fee
        if self.first_valid_round:
            d["fv"] = self.first_valid_round
        if self.genesis_id:
            d["gen"] = self.genesis_id
        d["gh"] = base64.b64decode(self.genesis_hash)
        if self.group:
            d["grp"] = self.group
        d["lv"] = self.last_valid_round
        if self.lease:
            d["lx"] = self.lease
        if self.note:
            d["note"] = self.note
        d["snd"] = encoding.decode_address(self.sender)
        d["type"] = self.type
        if self.rekey_to:
            d["rekey"] = encoding.decode_address(self.rekey_to)

        return d

    @staticmethod
    def undictify(d):
        sp = SuggestedParams(
            d["fee"] if "fee" in d else 0,
            d["fv"] if "fv" in d else 0,
            d["lv"] if "lv" in d else 0,
            base64.b64encode(d["gh"]).decode(),
            d["gen"] if "gen" in d else None,
            flat_fee=True,
        )
        args = {
            "sp": sp,
            "sender": encoding.encode_address(d["snd"]),
            "note": d["note"] if "note" in d else None,
            "lease": d["lx"] if "lx" in d else None,
            "rekey_to": encoding.encode_address(d["rekey"]) if "rekey" in d else None,
        }
        txn_type = d["type"]
        if not isinstance(d["type"], str):
            txn_type = txn_type.decode()
        txn_classes = {
            constants.payment_txn: PaymentTxn,
            constants.keyreg_txn: KeyregTxn,
            constants.assetconfig_txn: AssetConfigTxn,
            constants.assettransfer_txn: AssetTransferTxn,
            constants.assetfreeze_txn: AssetFreezeTxn,
            constants.appcall_txn: ApplicationCallTxn,
        }
        if txn_type not in txn_classes:
            raise error.UnknownTxnTypeError(txn_type)
        txn_class = txn_classes[txn_type]
        args.update(txn_class._undictify(d))
        txn = txn_class(**args)
        # the encoded fee is authoritative; constructors may have re-estimated it
        txn.fee = d["fee"] if "fee" in d else 0
        if "grp" in d:
            txn.group = d["grp"]
        return txn

    @staticmethod
    def creatable_index(index, required=False):
        """Coerce an index for apps or assets to an integer.

        By using this in all constructors, we allow callers to use
        strings as indexes, check our convenience Txn types to ensure
        index is set, and ensure that 0 is always used internally for
        an unset id, not None, so __eq__ works properly.
        """
        i = int(index or 0)
        if i == 0 and required:
            raise error.InvalidIndexError(index)
        if i < 0:
            raise error.InvalidIndexError(index)
        return i

    def __str__(self):
        return str(self.__dict__)


class PaymentTxn(Transaction):
    """
    Represents a payment transaction.

    Args:
        sender (str): address of the sender
        sp (SuggestedParams): suggested params from algod
        receiver (str): address of the receiver
        amt (int): amount in microAlgos to be sent
        close_remainder_to (str, optional): if nonempty, account will be closed
            and remaining algos will be sent to this address
        note (bytes, optional): arbitrary optional bytes
        lease (byte[32], optional): specifies a lease, and no other transaction
            with the same sender and lease can be confirmed in this
            transaction's valid rounds
        rekey_to (str, optional): additionally rekey the sender to this address

    Attributes:
        sender (str)
        fee (int)
        first_valid_round (int)
        last_valid_round (int)
        note (bytes)
        genesis_id (str)
        genesis_hash (str)
        group (bytes)
        receiver (str)
        amt (int)
        close_remainder_to (str)
        type (str)
        lease (byte[32])
        rekey_to (str)
    """

    def __init__(self, sender, sp, receiver, amt, close_remainder_to=None, note=None, lease=None, rekey_to=None):
        Transaction.__init__(self, sender, sp, note, lease, constants.payment_txn, rekey_to)
        if receiver:
            self.receiver = self.as_address(receiver)
        else:
            raise error.ZeroAddressError

        self.amt = self.as_amount(amt)
        self.close_remainder_to = self.as_address(close_remainder_to)
        self.set_fee(sp)

    def dictify(self):
        d = dict()
        if self.amt:
            d["amt"] = self.amt
        if self.close_remainder_to:
            d["close"] = encoding.decode_address(self.close_remainder_to)

        decoded_receiver = encoding.decode_address(self.receiver)
        if any(decoded_receiver):
            d["rcv"] = decoded_receiver

        d.update(super(PaymentTxn, self).dictify())
        od = OrderedDict(sorted(d.items()))

        return od

    @staticmethod
    def _undictify(d):
        args = {
            "close_remainder_to": encoding.encode_address(d["close"]) if "close" in d else None,
            "amt": d["amt"] if "amt" in d else 0,
            "receiver": encoding.encode_address(d["rcv"] if "rcv" in d else bytes(constants.key_len_bytes)),
        }
        return args


class KeyregTxn(Transaction):
    """
    Represents a key registration transaction.

    Args:
        sender (str): address of the sender
        sp (SuggestedParams): suggested params from algod
        votekey (str): base64 encoded participation public key
        selkey (str): base64 encoded VRF public key
        votefst (int): first round to vote
        votelst (int): last round to vote
        votekd (int): vote key dilution
        note (bytes, optional): arbitrary optional bytes
        lease (byte[32], optional): specifies a lease, and no other transaction
            with the same sender and lease can be confirmed in this
            transaction's valid rounds
        rekey_to (str, optional): additionally rekey the sender to this address

    Attributes:
        votepk (str)
        selkey (str)
        votefst (int)
        votelst (int)
        votekd (int)
    """

    def __init__(
        self,
        sender,
        sp,
        votekey,
        selkey,
        votefst,
        votelst,
        votekd,
        note=None,
        lease=None,
        rekey_to=None,
    ):
        Transaction.__init__(self, sender, sp, note, lease, constants.keyreg_txn, rekey_to)
        self.votepk = self.as_participation_key(votekey, "votekey")
        self.selkey = self.as_participation_key(selkey, "selkey")
        self.votefst = int(votefst or 0)
        self.votelst = int(votelst or 0)
        self.votekd = int(votekd or 0)
        self.set_fee(sp)

    @staticmethod
    def as_participation_key(key, field):
        """Check that a base64 key decodes to exactly 32 bytes and return it as text."""
        if isinstance(key, (bytes, bytearray)):
            key = bytes(key).decode(errors="replace")
        if not isinstance(key, str):
            raise error.InvalidKeyMaterialError(field)
        try:
            decoded = base64.b64decode(key, validate=True)
        except (binascii.Error, ValueError):
            raise error.InvalidKeyMaterialError(field)
        if len(decoded) != constants.key_len_bytes:
            raise error.InvalidKeyMaterialError(field)
        return key

    def dictify(self):
        d = {
            "selkey": base64.b64decode(self.selkey),
            "votefst": self.votefst,
            "votekd": self.votekd,
            "votekey": base64.b64decode(self.votepk),
            "votelst": self.votelst,
        }

        d.update(super(KeyregTxn, self).dictify())
        od = OrderedDict(sorted(d.items()))

        return od

    @staticmethod
    def _undictify(d):
        args = {
            "votekey": base64.b64encode(d["votekey"]).decode() if "votekey" in d else None,
            "selkey": base64.b64encode(d["selkey"]).decode() if "selkey" in d else None,
            "votefst": d["votefst"] if "votefst" in d else 0,
            "votelst": d["votelst"] if "votelst" in d else 0,
            "votekd": d["votekd"] if "votekd" in d else 0,
        }
        return args


class AssetConfigTxn(Transaction):
    """
    Represents a transaction for asset creation, reconfiguration, or
    destruction.

    To create an asset, include the following:
        total, default_frozen, unit_name, asset_name,
        manager, reserve, freeze, clawback, url, metadata,
        decimals

    To destroy an asset, include the following:
        index, strict_empty_address_check (set to False)

    To update asset configuration, include the following:
        index, manager, reserve, freeze, clawback,
        strict_empty_address_check (optional)

    Once a management address is left blank in a configuration it can never
    be set again. Every configuration is a fresh one: the current manager
    must be specified again to keep it.

    Args:
        sender (str): address of the sender
        sp (SuggestedParams): suggested params from algod
        index (int, optional): index of the asset
        total (int, optional): total number of base units of this asset created
        default_frozen (bool, optional): whether slots for this asset in user
            accounts are frozen by default
        unit_name (str, optional): hint for the name of a unit of this asset
        asset_name (str, optional): hint for the name of the asset
        manager (str, optional): address allowed to change nonzero addresses
            for this asset
        reserve (str, optional): account whose holdings of this asset should
            be reported as "not minted"
        freeze (str, optional): account allowed to change frozen state of
            holdings of this asset
        clawback (str, optional): account allowed take units of this asset
            from any account
        url (str, optional): a URL where more information about the asset
            can be retrieved
        metadata_hash (str or bytes, optional): a commitment to some unspecified
            asset metadata, at most 32 bytes
        note (bytes, optional): arbitrary optional bytes
        lease (byte[32], optional): specifies a lease, and no other transaction
            with the same sender and lease can be confirmed in this
            transaction's valid rounds
        strict_empty_address_check (bool, optional): set this to False if you
            want to specify empty addresses. Otherwise, if this is left as
            True (the default), having empty addresses will raise an error,
            which will prevent accidentally removing admin access to assets or
            deleting the asset.
        decimals (int, optional): number of digits to use for display after
            decimal. If set to 0, the asset is not divisible. If set to 1, the
            base unit of the asset is in tenths. Must be between 0 and 19,
            inclusive. Defaults to 0.
        rekey_to (str, optional): additionally rekey the sender to this address
    """

    def __init__(
        self,
        sender,
        sp,
        index=None,
        total=None,
        default_frozen=None,
        unit_name=None,
        asset_name=None,
        manager=None,
        reserve=None,
        freeze=None,
        clawback=None,
        url=None,
        metadata_hash=None,
        note=None,
        lease=None,
        strict_empty_address_check=True,
        decimals=0,
        rekey_to=None,
    ):
        if strict_empty_address_check and not (manager and reserve and freeze and clawback):
            raise error.StrictCheckViolationError
        Transaction.__init__(self, sender, sp, note, lease, constants.assetconfig_txn, rekey_to)
        self.index = self.creatable_index(index)
        self.total = self.as_amount(total) if total else None
        self.default_frozen = bool(default_frozen)
        self.decimals = self.as_decimals(decimals)
        self.manager = self.as_address(manager)
        self.reserve = self.as_address(reserve)
        self.freeze = self.as_address(freeze)
        self.clawback = self.as_address(clawback)
        self.unit_name = self.as_bounded_text(unit_name, "unit name", constants.max_asset_unit_name_length)
        self.asset_name = self.as_bounded_text(asset_name, "asset name", constants.max_asset_name_length)
        self.url = self.as_bounded_text(url, "url", constants.max_asset_url_length)
        self.metadata_hash = self.as_metadata_hash(metadata_hash)
        self.set_fee(sp)

    @staticmethod
    def as_decimals(decimals):
        decimals = int(decimals or 0)
        if decimals < 0 or decimals > constants.max_asset_decimals:
            raise error.DecimalsOutOfRangeError(decimals, constants.max_asset_decimals)
        return decimals

    @staticmethod
    def as_bounded_text(value, field, max_length):
        if not value:
            return None
        length = len(value.encode()) if isinstance(value, str) else len(value)
        if length > max_length:
            raise error.FieldTooLongError(field, length, max_length)
        return value

    @staticmethod
    def as_metadata_hash(metadata_hash):
        """Return the metadata commitment zero-padded to 32 bytes, or None when blank."""
        if not metadata_hash:
            return None
        if isinstance(metadata_hash, str):
            metadata_hash = metadata_hash.encode()
        if len(metadata_hash) > constants.metadata_length:
            raise error.FieldTooLongError("asset metadata hash", len(metadata_hash), constants.metadata_length)
        return bytes(metadata_hash).ljust(constants.metadata_length, b"\x00")

    def dictify(self):
        d = dict()

        if (
            self.total
            or self.default_frozen
            or self.unit_name
            or self.asset_name
            or self.manager
            or self.reserve
            or self.freeze
            or self.clawback
            or self.decimals
            or self.url
            or self.metadata_hash
        ):
            apar = OrderedDict()
            if self.metadata_hash:
                apar["am"] = self.metadata_hash
            if self.asset_name:
                apar["an"] = self.asset_name
            if self.url:
                apar["au"] = self.url
            if self.clawback:
                apar["c"] = encoding.decode_address(self.clawback)
            if self.decimals:
                apar["dc"] = self.decimals
            if self.default_frozen:
                apar["df"] = self.default_frozen
            if self.freeze:
                apar["f"] = encoding.decode_address(self.freeze)
            if self.manager:
                apar["m"] = encoding.decode_address(self.manager)
            if self.reserve:
                apar["r"] = encoding.decode_address(self.reserve)
            if self.total:
                apar["t"] = self.total
            if self.unit_name:
                apar["un"] = self.unit_name
            d["apar"] = apar

        if self.index:
            d["caid"] = self.index

        d.update(super(AssetConfigTxn, self).dictify())
        od = OrderedDict(sorted(d.items()))

        return od

    @staticmethod
    def _undictify(d):
        apar = d["apar"] if "apar" in d else {}
        args = {
            "index": d["caid"] if "caid" in d else None,
            "total": apar.get("t"),
            "default_frozen": apar.get("df"),
            "unit_name": apar.get("un"),
            "asset_name": apar.get("an"),
            "manager": encoding.encode_address(apar["m"]) if "m" in apar else None,
            "reserve": encoding.encode_address(apar["r"]) if "r" in apar else None,
            "freeze": encoding.encode_address(apar["f"]) if "f" in apar else None,
            "clawback": encoding.encode_address(apar["c"]) if "c" in apar else None,
            "url": apar.get("au"),
            "metadata_hash": apar.get("am"),
            "decimals": apar.get("dc", 0),
            "strict_empty_address_check": False,
        }
        return args


class AssetTransferTxn(Transaction):
    """
    Represents a transaction for asset transfer.

    To begin accepting an asset, supply the same address as both sender and
    receiver, and set amount to 0.

    To revoke an asset, set revocation_target, and issue the transaction from
    the asset's revocation manager account.

    The fee of this family is always derived from the encoded size, even when
    sp.flat_fee is set; assign txn.fee afterwards to force a flat fee.

    Args:
        sender (str): address of the sender
        sp (SuggestedParams): suggested params from algod
        receiver (str): address of the receiver
        amt (int): amount of asset base units to send
        index (int): index of the asset
        close_assets_to (string, optional): send all of sender's remaining
            assets, after paying `amt` to receiver, to this address
        revocation_target (string, optional): send assets from this address,
            rather than the sender's address (can only be used by an asset's
            revocation manager, also known as clawback)
        note (bytes, optional): arbitrary optional bytes
        lease (byte[32], optional): specifies a lease, and no other transaction
            with the same sender and lease can be confirmed in this
            transaction's valid rounds
        rekey_to (str, optional): additionally rekey the sender to this address

    Attributes:
        sender (str)
        fee (int)
        first_valid_round (int)
        last_valid_round (int)
        genesis_hash (str)
        index (int)
        amount (int)
        receiver (string)
        close_assets_to (string)
        revocation_target (string)
        note (bytes)
        genesis_id (str)
        type (str)
        lease (byte[32])
        rekey_to (str)
    """

    def __init__(
        self,
        sender,
        sp,
        receiver,
        amt,
        index,
        close_assets_to=None,
        revocation_target=None,
        note=None,
        lease=None,
        rekey_to=None,
    ):
        Transaction.__init__(self, sender, sp, note, lease, constants.assettransfer_txn, rekey_to)
        if receiver:
            self.receiver = self.as_address(receiver)
        else:
            raise error.ZeroAddressError
        self.amount = self.as_amount(amt)
        self.index = self.creatable_index(index, required=True)
        self.close_assets_to = self.as_address(close_assets_to)
        self.revocation_target = self.as_address(revocation_target)
        self.set_fee(sp, flat_fee=False)

    def dictify(self):
        d = dict()

        if self.amount:
            d["aamt"] = self.amount
        if self.close_assets_to:
            d["aclose"] = encoding.decode_address(self.close_assets_to)

        decoded_receiver = encoding.decode_address(self.receiver)
        if any(decoded_receiver):
            d["arcv"] = decoded_receiver
        if self.revocation_target:
            d["asnd"] = encoding.decode_address(self.revocation_target)

        if self.index:
            d["xaid"] = self.index

        d.update(super(AssetTransferTxn, self).dictify())
        od = OrderedDict(sorted(d.items()))

        return od

    @staticmethod
    def _undictify(d):
        args = {
            "receiver": encoding.encode_address(d["arcv"] if "arcv" in d else bytes(constants.key_len_bytes)),
            "amt": d["aamt"] if "aamt" in d else 0,
            "index": d["xaid"] if "xaid" in d else None,
            "close_assets_to": encoding.encode_address(d["aclose"]) if "aclose" in d else None,
            "revocation_target": encoding.encode_address(d["asnd"]) if "asnd" in d else None,
        }

        return args


class AssetFreezeTxn(Transaction):
    """
    Represents a transaction for freezing or unfreezing an account's asset
    holdings. Must be issued by the asset's freeze manager.

    Args:
        sender (str): address of the sender, who must be the asset's freeze
            manager
        sp (SuggestedParams): suggested params from algod
        index (int): index of the asset
        target (str): address having its assets frozen or unfrozen
        new_freeze_state (bool): true if the assets should be frozen, false if
            they should be transferrable
        note (bytes, optional): arbitrary optional bytes
        lease (byte[32], optional): specifies a lease, and no other transaction
            with the same sender and lease can be confirmed in this
            transaction's valid rounds
        rekey_to (str, optional): additionally rekey the sender to this address
    """

    def __init__(self, sender, sp, index, target, new_freeze_state, note=None, lease=None, rekey_to=None):
        Transaction.__init__(self, sender, sp, note, lease, constants.assetfreeze_txn, rekey_to)
        self.index = self.creatable_index(index, required=True)
        self.target = self.as_address(target, required=True)
        self.new_freeze_state = new_freeze_state
        self.set_fee(sp)

    def dictify(self):
        d = dict()
        if self.new_freeze_state:
            d["afrz"] = self.new_freeze_state

        d["fadd"] = encoding.decode_address(self.target)

        if self.index:
            d["faid"] = self.index

        d.update(super(AssetFreezeTxn, self).dictify())
        od = OrderedDict(sorted(d.items()))
        return od

    @staticmethod
    def _undictify(d):
        args = {
            "index": d["faid"] if "faid" in d else None,
            "new_freeze_state": d["afrz"] if "afrz" in d else False,
            "target": encoding.encode_address(d["fadd"]),
        }
        return args


class StateSchema:
    """
    Restricts state for an application call.

    Args:
        num_uints (int, optional): number of uints to store
        num_byte_slices (int, optional): number of byte slices to store

    Attributes:
        num_uints (int)
        num_byte_slices (int)
    """

    def __init__(self, num_uints=None, num_byte_slices=None):
        self.num_uints = int(num_uints or 0)
        self.num_byte_slices = int(num_byte_slices or 0)

    @classmethod
    def copy_of(cls, schema):
        """Return an independent copy of `schema`, or an empty schema for None."""
        if schema is None:
            return cls()
        return cls(schema.num_uints, schema.num_byte_slices)

    def is_empty(self):
        return not (self.num_uints or self.num_byte_slices)

    def dictify(self):
        d = dict()
        if self.num_uints:
            d["nui"] = self.num_uints
        if self.num_byte_slices:
            d["nbs"] = self.num_byte_slices
        od = OrderedDict(sorted(d.items()))
        return od

    @staticmethod
    def undictify(d):
        return StateSchema(
            num_uints=d["nui"] if "nui" in d else None,
            num_byte_slices=d["nbs"] if "nbs" in d else None,
        )

    def __eq__(self, other):
        if not isinstance(other, StateSchema):
            return False
        return self.num_uints == other.num_uints and self.num_byte_slices == other.num_byte_slices

    def __repr__(self):
        return "StateSchema(num_uints={}, num_byte_slices={})".format(self.num_uints, self.num_byte_slices)


class OnComplete(IntEnum):
    # NoOpOC indicates that an application transaction will simply call its
    # ApprovalProgram
    NoOpOC = 0

    # OptInOC indicates that an application transaction will allocate some
    # LocalState for the application in the sender's account
    OptInOC = 1

    # CloseOutOC indicates that an application transaction will deallocate
    # some LocalState for the application from the user's account
    CloseOutOC = 2

    # ClearStateOC is similar to CloseOutOC, but may never fail. This
    # allows users to reclaim their minimum balance from an application
    # they no longer wish to opt in to.
    ClearStateOC = 3

    # UpdateApplicationOC indicates that an application transaction will
    # update the ApprovalProgram and ClearStateProgram for the application
    UpdateApplicationOC = 4

    # DeleteApplicationOC indicates that an application transaction will
    # delete the AppParams for the application from the creator's balance
    # record
    DeleteApplicationOC = 5


class ApplicationCallTxn(Transaction):
    """
    Represents a transaction that interacts with the application system.

    State schemas only take effect when the application is created; for any
    call on an existing application (index != 0) they are replaced by empty
    schemas.

    Args:
        sender (str): address of the sender
        sp (SuggestedParams): suggested params from algod
        index (int): index of the application to call; 0 if creating a new application
        on_complete (OnComplete): intEnum representing what app should do on completion
        local_schema (StateSchema, optional): restricts what can be stored by created application;
            must be omitted if not creating an application
        global_schema (StateSchema, optional): restricts what can be stored by created application;
            must be omitted if not creating an application
        approval_program (bytes, optional): the program to run on transaction approval;
            must be omitted if not creating or updating an application
        clear_program (bytes, optional): the program to run when state is being cleared;
            must be omitted if not creating or updating an application
        app_args (list[bytes], optional): list of arguments to the application, each argument itself a buf
        accounts (list[string], optional): list of additional accounts involved in call
        foreign_apps (list[int], optional): list of other applications (identified by index) involved in call
        note (bytes, optional): arbitrary optional bytes
        lease (byte[32], optional): specifies a lease, and no other transaction
            with the same sender and lease can be confirmed in this
            transaction's valid rounds
        rekey_to (str, optional): additionally rekey the sender to this address

    Attributes:
        index (int)
        on_complete (OnComplete)
        local_schema (StateSchema)
        global_schema (StateSchema)
        approval_program (bytes)
        clear_program (bytes)
        app_args (list[bytes])
        accounts (list[str])
        foreign_apps (list[int])
    """

    def __init__(
        self,
        sender,
        sp,
        index,
        on_complete,
        local_schema=None,
        global_schema=None,
        approval_program=None,
        clear_program=None,
        app_args=None,
        accounts=None,
        foreign_apps=None,
        note=None,
        lease=None,
        rekey_to=None,
    ):
        Transaction.__init__(self, sender, sp, note, lease, constants.appcall_txn, rekey_to)
        self.index = self.creatable_index(index)
        self.on_complete = OnComplete(on_complete) if on_complete else OnComplete.NoOpOC
        self.local_schema = StateSchema.copy_of(local_schema)
        self.global_schema = StateSchema.copy_of(global_schema)
        if self.index and not (self.local_schema.is_empty() and self.global_schema.is_empty()):
            logger.debug(f"Dropping state schemas from call on existing application {self.index}")
            self.local_schema = StateSchema()
            self.global_schema = StateSchema()
        self.approval_program = self.as_program(approval_program)
        self.clear_program = self.as_program(clear_program)
        self.app_args = self.as_app_args(app_args)
        self.accounts = parse_accounts(accounts)
        self.foreign_apps = parse_foreign_apps(foreign_apps)
        self.set_fee(sp)

    @staticmethod
    def as_program(program):
        if not program:
            return None
        if not isinstance(program, (bytes, bytearray)):
            raise error.WrongApplicationFieldType("program")
        return bytes(program)

    @staticmethod
    def as_app_args(app_args):
        args = []
        for arg in app_args or ():
            if isinstance(arg, str):
                arg = arg.encode()
            elif isinstance(arg, int) and not isinstance(arg, bool):
                arg = arg.to_bytes(8, "big")
            elif not isinstance(arg, (bytes, bytearray)):
                raise error.WrongApplicationFieldType("application argument")
            args.append(bytes(arg))
        return args

    def dictify(self):
        d = dict()
        if self.index:
            d["apid"] = self.index
        if self.on_complete:
            d["apan"] = int(self.on_complete)
        if not self.local_schema.is_empty():
            d["apls"] = self.local_schema.dictify()
        if not self.global_schema.is_empty():
            d["apgs"] = self.global_schema.dictify()
        if self.approval_program:
            d["apap"] = self.approval_program
        if self.clear_program:
            d["apsu"] = self.clear_program
        if self.app_args:
            d["apaa"] = self.app_args
        if self.accounts:
            d["apat"] = [encoding.decode_address(account) for account in self.accounts]
        if self.foreign_apps:
            d["apfa"] = self.foreign_apps

        d.update(super(ApplicationCallTxn, self).dictify())
        od = OrderedDict(sorted(d.items()))
        return od

    @staticmethod
    def _undictify(d):
        args = {
            "index": d["apid"] if "apid" in d else None,
            "on_complete": d["apan"] if "apan" in d else None,
            "local_schema": StateSchema.undictify(d["apls"]) if "apls" in d else None,
            "global_schema": StateSchema.undictify(d["apgs"]) if "apgs" in d else None,
            "approval_program": d["apap"] if "apap" in d else None,
            "clear_program": d["apsu"] if "apsu" in d else None,
            "app_args": d["apaa"] if "apaa" in d else None,
            "accounts": [encoding.encode_address(account) for account in d["apat"]] if "apat" in d else None,
            "foreign_apps": d["apfa"] if "apfa" in d else None,
        }
        return args


class SignedTransaction:
    """
    Represents a signed transaction.

    Args:
        transaction (Transaction): transaction that was signed
        signature (str): signature of a single address
        authorizing_address (str, optional): the address authorizing the signed transaction, if different from sender

    Attributes:
        transaction (Transaction)
        signature (str)
        authorizing_address (str)
    """

    def __init__(self, transaction, signature, authorizing_address=None):
        self.signature = signature
        self.transaction = transaction
        self.authorizing_address = authorizing_address

    def get_txid(self):
        """
        Get the transaction's ID.

        Returns:
            str: transaction ID
        """
        return self.transaction.get_txid()

    def dictify(self):
        od = OrderedDict()
        if self.signature:
            od["sig"] = base64.b64decode(self.signature)
        od["txn"] = self.transaction.dictify()
        if self.authorizing_address:
            od["sgnr"] = encoding.decode_address(self.authorizing_address)
        return od

    @staticmethod
    def undictify(d):
        sig = None
        if "sig" in d:
            sig = base64.b64encode(d["sig"]).decode()
        auth = None
        if "sgnr" in d:
            auth = encoding.encode_address(d["sgnr"])
        txn = Transaction.undictify(d["txn"])
        stx = SignedTransaction(txn, sig, auth)
        return stx


class MultisigSubsig:
    """
    Attributes:
        public_key (bytes)
        signature (bytes)
    """

    def __init__(self, public_key, signature=None):
        self.public_key = public_key
        self.signature = signature

    def dictify(self):
        od = OrderedDict()
        od["pk"] = self.public_key
        if self.signature:
            od["s"] = self.signature
        return od

    @staticmethod
    def undictify(d):
        return MultisigSubsig(d["pk"], d["s"] if "s" in d else None)


class Multisig:
    """
    Represents a multisig account and signatures for that account. The
    preimage (version, threshold and ordered public keys) determines the
    address; each subsig slot holds a signature or nothing.

    Args:
        version (int): currently, the version is 1
        threshold (int): how many signatures are necessary
        addresses (str[]): addresses in the multisig account

    Attributes:
        version (int)
        threshold (int)
        subsigs (MultisigSubsig[])
    """

    def __init__(self, version, threshold, addresses):
        self.version = version
        self.threshold = threshold
        self.subsigs = [MultisigSubsig(encoding.decode_address(address)) for address in addresses]

    def validate(self):
        """Check if the multisig account is valid."""
        if not self.version == 1:
            raise error.UnknownMsigVersionError
        if self.threshold <= 0 or len(self.subsigs) == 0 or self.threshold > len(self.subsigs):
            raise error.InvalidThresholdError
        for subsig in self.subsigs:
            if subsig.signature is not None and len(subsig.signature) != constants.signature_length:
                raise error.InvalidSignatureError

    def address(self):
        """Return the multisig account address."""
        msig_bytes = (
            bytes(constants.msig_addr_prefix, "utf-8")
            + bytes([self.version])
            + bytes([self.threshold])
            + b"".join(subsig.public_key for subsig in self.subsigs)
        )
        return encoding.encode_address(encoding.checksum(msig_bytes))

    def index_of(self, public_key):
        for i, subsig in enumerate(self.subsigs):
            if subsig.public_key == public_key:
                return i
        raise error.BadPublicKeyError

    def get_multisig_account(self):
        """Return a Multisig object without signatures."""
        msig = Multisig(self.version, self.threshold, [])
        msig.subsigs = [MultisigSubsig(subsig.public_key) for subsig in self.subsigs]
        return msig

    def dictify(self):
        od = OrderedDict()
        od["subsig"] = [subsig.dictify() for subsig in self.subsigs]
        od["thr"] = self.threshold
        od["v"] = self.version
        return od

    @staticmethod
    def undictify(d):
        msig = Multisig(d["v"], d["thr"], [])
        msig.subsigs = [MultisigSubsig.undictify(s) for s in d["subsig"]]
        return msig


class MultisigTransaction:
    """
    Represents a signed transaction from a multisig account.

    Args:
        transaction (Transaction): transaction that was signed
        multisig (Multisig): multisig account and signatures

    Attributes:
        transaction (Transaction)
        multisig (Multisig)
    """

    def __init__(self, transaction, multisig):
        self.transaction = transaction
        self.multisig = multisig

    def get_txid(self):
        return self.transaction.get_txid()

    def dictify(self):
        od = OrderedDict()
        if self.multisig:
            od["msig"] = self.multisig.dictify()
        od["txn"] = self.transaction.dictify()
        return od

    @staticmethod
    def undictify(d):
        msig = None
        if "msig" in d:
            msig = Multisig.undictify(d["msig"])
        txn = Transaction.undictify(d["txn"])
        return MultisigTransaction(txn, msig)


class TxGroup:
    def __init__(self, txns):
        assert isinstance(txns, list)
        self.transactions = txns

    def dictify(self):
        od = OrderedDict()
        od["txlist"] = self.transactions
        return od

    @staticmethod
    def undictify(d):
        return TxGroup(d["txlist"])


def calculate_group_id(txns):
    """
    Calculate the group ID for a list of transactions.

    Args:
        txns (Transaction[]): list of transactions

    Returns:
        bytes: checksum value representing the group ID
    """
    txids = []
    for txn in txns:
        raw_txn = encoding.msgpack_encode(txn)
        to_hash = constants.txid_prefix + base64.b64decode(raw_txn)
        txids.append(encoding.checksum(to_hash))

    group = TxGroup(txids)

    encoded = encoding.msgpack_encode(group)
    to_sign = constants.tgid_prefix + base64.b64decode(encoded)
    return encoding.checksum(to_sign)


def assign_group_id(txns, address=None):
    """
    Assign group id to a given list of unsigned transactions.

    Args:
        txns (Transaction[]): list of unsigned transactions
        address (str): optional sender address specifying which transaction
            to return

    Returns:
        Transaction[]: list of unsigned transactions with group property set
    """
    gid = calculate_group_id(txns)
    result = []
    for txn in txns:
        if address is None or txn.sender == address:
            txn.group = gid
            result.append(txn)
    return result
