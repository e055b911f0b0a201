import base64
import logging
from typing import Optional

from algotxn import sdk as algo_sdk
from algotxn.basic.functional.require import require
from algotxn.data import AddressValidation, SignedTx
from algotxn.interfaces import SignerInterface
from algotxn.sdk.future.transaction import Multisig, MultisigTransaction, SignedTransaction, Transaction

logger = logging.getLogger("app.algotxn")


class AlgoTxnProvider:
    def verify_address(self, address: str) -> AddressValidation:
        _normalized_address, _display_address, _encoding = "", "", None
        is_valid = algo_sdk.encoding.is_valid_address(address)
        if is_valid:
            _normalized_address, _display_address, _encoding = address, address, "BASE32"
        return AddressValidation(
            normalized_address=_normalized_address,
            display_address=_display_address,
            is_valid=is_valid,
            encoding=_encoding,
        )

    def pubkey_to_address(self, pubkey: bytes, encoding: str = "BASE32") -> str:
        require(encoding == "BASE32")
        return algo_sdk.encoding.encode_address(pubkey)

    def sign_transaction(
        self,
        txn: Transaction,
        signer: SignerInterface,
        key_ref: Optional[str] = None,
        authorizing_address: Optional[str] = None,
    ) -> SignedTx:
        """
        Sign a single-signature transaction.

        authorizing_address is the account whose key signs when the sender
        has been rekeyed; key_ref defaults to it, then to the sender.
        """
        key_ref = key_ref or authorizing_address or txn.sender
        signature = signer.sign(txn, key_ref)
        require(
            isinstance(signature, (bytes, bytearray)) and len(signature) == algo_sdk.constants.signature_length,
            algo_sdk.error.InvalidSignatureError(),
        )
        stx = SignedTransaction(txn, base64.b64encode(signature).decode(), authorizing_address)

        return SignedTx(
            txid=stx.get_txid(),
            raw_tx=algo_sdk.encoding.msgpack_encode(stx),
        )

    def sign_multisig_transaction(
        self,
        txn: Transaction,
        multisig: Multisig,
        public_key: bytes,
        signer: SignerInterface,
    ) -> MultisigTransaction:
        """
        Collect one more signature for a multisig transaction.

        The signer receives the current aggregate and must hand back one with
        the same preimage.
        """
        multisig.validate()
        multisig.index_of(public_key)
        partial = signer.sign_partial(txn, public_key, multisig)
        partial.validate()
        require(partial.address() == multisig.address(), algo_sdk.error.BadPublicKeyError())
        signed = sum(1 for subsig in partial.subsigs if subsig.signature)
        logger.debug(f"Multisig {partial.address()} holds {signed} of {partial.threshold} signatures")
        return MultisigTransaction(txn, partial)
