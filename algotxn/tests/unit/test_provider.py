from unittest import TestCase
from unittest.mock import Mock

from algotxn import AlgoTxnProvider
from algotxn.data import AddressValidation, SignedTx
from algotxn.sdk import encoding, error
from algotxn.sdk.future.transaction import (
    AssetTransferTxn,
    Multisig,
    MultisigSubsig,
    PaymentTxn,
    SignedTransaction,
    SuggestedParams,
)

SENDER = "6KRBCIZBFF2BJHGOROIJ2UUXUU6D5QV7F4XZPV2IHJF2QCKMU7S4ECYHUA"
RECEIVER = "GD64YIY3TWGDMCNPP553DZPPR6LDUSFQOIJVFDPPXWEG3FVOJCCDBBHU5A"
SIGNATURE = bytes.fromhex(
    "590bd43db6bc49529468bff5fb390ed8d1212efca463d6b4c4997f9494ce923215777c255f6664f8eff223c13f2fe7dc1258d6c362b496b6e5361ba43ece300f"
)


def _testnet_params(fee=0, flat_fee=False):
    return SuggestedParams(
        fee,
        14363848,
        14364848,
        "SGO1GKSzyE7IEPItTxCByw9x8FmnrCDexi9/cOUJOiI=",
        "testnet-v1.0",
        flat_fee,
        "https://github.com/algorandfoundation/specs/tree/d050b3cade6d5c664df8bd729bf219f179812595",
        1000,
    )


class TestAlgoTxnProvider(TestCase):
    def setUp(self) -> None:
        self.provider = AlgoTxnProvider()

    def test_verify_address(self):
        self.assertEqual(
            AddressValidation(
                normalized_address=RECEIVER,
                display_address=RECEIVER,
                is_valid=True,
                encoding="BASE32",
            ),
            self.provider.verify_address(RECEIVER),
        )
        self.assertEqual(
            AddressValidation(normalized_address="", display_address="", is_valid=False),
            self.provider.verify_address("gd64YIY3TWGDMCNPP553DZPPR6LDUSFQOIJVFDPPXWEG3FVOJCCDBBHU5A"),
        )
        self.assertEqual(
            AddressValidation(normalized_address="", display_address="", is_valid=False),
            self.provider.verify_address("GGD64YIY3TWGDMCNPP553DZPPR6LDUSFQOIJVFDPPXWEG3FVOJCCDBBHU5A"),
        )
        self.assertEqual(
            AddressValidation(normalized_address="", display_address="", is_valid=False),
            self.provider.verify_address("GD64YIY3TWGDMCNPP553DZPPR6LDUSFQOIJVFDPPXWEG3FVOJCCDBBHU5AB"),
        )
        self.assertEqual(
            AddressValidation(normalized_address="", display_address="", is_valid=False),
            self.provider.verify_address("GD64YIY3WGDMCNPP553DZPPR6LDUSFQOIJVFDPPXWEG3FVOJCCDBBHU5A"),
        )
        self.assertEqual(
            AddressValidation(normalized_address="", display_address="", is_valid=False),
            self.provider.verify_address(""),
        )
        self.assertEqual(
            AddressValidation(normalized_address="", display_address="", is_valid=False),
            self.provider.verify_address("0x"),
        )

    def test_pubkey_to_address(self):
        self.assertEqual(
            SENDER,
            self.provider.pubkey_to_address(
                bytes.fromhex("f2a21123212974149cce8b909d5297a53c3ec2bf2f2f97d7483a4ba8094ca7e5"), encoding="BASE32"
            ),
        )

    def test_sign_transaction(self):
        with self.subTest("Sign Algo Transfer Tx"):
            fake_signer = Mock(sign=Mock(return_value=SIGNATURE))
            txn = PaymentTxn(SENDER, _testnet_params(), RECEIVER, 10000)
            self.assertEqual(
                SignedTx(
                    txid="FXCX7KGHFIHI3TCFQGS5WG4WWCMGGK6XD5HR6IA6TSQFR62DGLEA",
                    raw_tx="gqNzaWfEQFkL1D22vElSlGi/9fs5DtjRIS78pGPWtMSZf5SUzpIyFXd8JV9mZPjv8iPBPy/n3BJY1sNitJa25TYbpD7OMA+jdHhuiaNhbXTNJxCjZmVlzQPoomZ2zgDbLMijZ2VurHRlc3RuZXQtdjEuMKJnaMQgSGO1GKSzyE7IEPItTxCByw9x8FmnrCDexi9/cOUJOiKibHbOANswsKNyY3bEIDD9zCMbnYw2Ca9/e7Hl74+WOkiwchNSje+9iG2WrkiEo3NuZMQg8qIRIyEpdBSczouQnVKXpTw+wr8vL5fXSDpLqAlMp+WkdHlwZaNwYXk=",
                ),
                self.provider.sign_transaction(txn, fake_signer),
            )
            fake_signer.sign.assert_called_once_with(txn, SENDER)

        with self.subTest("Sign Algo Asset Transfer Tx"):
            fake_signer = Mock(sign=Mock(return_value=SIGNATURE))
            txn = AssetTransferTxn(SENDER, _testnet_params(fee=10000, flat_fee=True), RECEIVER, 10000, 123456)
            # asset transfers ignore flat_fee; a flat fee is forced afterwards
            txn.fee = 10000
            self.assertEqual(
                SignedTx(
                    txid="A7MFFGKFONB7EBCTNNC475ZQB3AJP4253RIDLTF6XZTVWEEAGT5Q",
                    raw_tx="gqNzaWfEQFkL1D22vElSlGi/9fs5DtjRIS78pGPWtMSZf5SUzpIyFXd8JV9mZPjv8iPBPy/n3BJY1sNitJa25TYbpD7OMA+jdHhuiqRhYW10zScQpGFyY3bEIDD9zCMbnYw2Ca9/e7Hl74+WOkiwchNSje+9iG2WrkiEo2ZlZc0nEKJmds4A2yzIo2dlbqx0ZXN0bmV0LXYxLjCiZ2jEIEhjtRiks8hOyBDyLU8QgcsPcfBZp6wg3sYvf3DlCToiomx2zgDbMLCjc25kxCDyohEjISl0FJzOi5CdUpelPD7Cvy8vl9dIOkuoCUyn5aR0eXBlpWF4ZmVypHhhaWTOAAHiQA==",
                ),
                self.provider.sign_transaction(txn, fake_signer),
            )

        with self.subTest("Signed Tx decodes back"):
            fake_signer = Mock(sign=Mock(return_value=SIGNATURE))
            txn = PaymentTxn(SENDER, _testnet_params(), RECEIVER, 10000)
            raw_tx = self.provider.sign_transaction(txn, fake_signer).raw_tx
            stx = encoding.msgpack_decode(raw_tx)
            self.assertIsInstance(stx, SignedTransaction)
            self.assertEqual(RECEIVER, stx.transaction.receiver)
            self.assertEqual(1000, stx.transaction.fee)
            self.assertEqual(raw_tx, encoding.msgpack_encode(stx))

        with self.subTest("Rekeyed sender"):
            fake_signer = Mock(sign=Mock(return_value=SIGNATURE))
            txn = PaymentTxn(SENDER, _testnet_params(), RECEIVER, 10000)
            signed = self.provider.sign_transaction(txn, fake_signer, authorizing_address=RECEIVER)
            fake_signer.sign.assert_called_once_with(txn, RECEIVER)
            self.assertEqual(RECEIVER, encoding.msgpack_decode(signed.raw_tx).authorizing_address)

        with self.subTest("Malformed signature"):
            fake_signer = Mock(sign=Mock(return_value=SIGNATURE[:10]))
            txn = PaymentTxn(SENDER, _testnet_params(), RECEIVER, 10000)
            with self.assertRaises(error.InvalidSignatureError):
                self.provider.sign_transaction(txn, fake_signer)

    def test_sign_multisig_transaction(self):
        sender_pk = encoding.decode_address(SENDER)
        msig = Multisig(1, 2, [SENDER, RECEIVER])
        txn = PaymentTxn(msig.address(), _testnet_params(), RECEIVER, 10000)

        def _sign_partial(_txn, public_key, partial):
            updated = partial.get_multisig_account()
            for subsig in updated.subsigs:
                if subsig.public_key == public_key:
                    subsig.signature = SIGNATURE
            return updated

        fake_signer = Mock(sign_partial=Mock(side_effect=_sign_partial))

        with self.subTest("Adds one signature"):
            mtx = self.provider.sign_multisig_transaction(txn, msig, sender_pk, fake_signer)
            self.assertEqual(SIGNATURE, mtx.multisig.subsigs[0].signature)
            self.assertIsNone(mtx.multisig.subsigs[1].signature)
            self.assertEqual(txn.get_txid(), mtx.get_txid())
            decoded = encoding.msgpack_decode(encoding.msgpack_encode(mtx))
            self.assertEqual(msig.address(), decoded.multisig.address())
            self.assertEqual(SIGNATURE, decoded.multisig.subsigs[0].signature)

        with self.subTest("Unknown public key"):
            with self.assertRaises(error.BadPublicKeyError):
                self.provider.sign_multisig_transaction(txn, msig, bytes(32), fake_signer)

        with self.subTest("Signer swaps the preimage"):
            other = Multisig(1, 1, [SENDER])
            other.subsigs[0] = MultisigSubsig(sender_pk, SIGNATURE)
            swapping_signer = Mock(sign_partial=Mock(return_value=other))
            with self.assertRaises(error.BadPublicKeyError):
                self.provider.sign_multisig_transaction(txn, msig, sender_pk, swapping_signer)
