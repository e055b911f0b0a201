import abc

from algotxn.sdk.future.transaction import Multisig, Transaction


class SignerInterface(abc.ABC):
    """
    Signing capability supplied by a wallet or key holder. Keys never pass
    through this library; the signer resolves them from `key_ref`.
    """

    @abc.abstractmethod
    def sign(self, txn: Transaction, key_ref: str) -> bytes:
        """
        Sign txn with the key identified by key_ref

        :param txn: unsigned transaction
        :param key_ref: reference of the signing key, usually its address
        :return: 64 bytes ed25519 signature over txn.bytes_to_sign()
        """

    @abc.abstractmethod
    def sign_partial(self, txn: Transaction, public_key: bytes, partial: Multisig) -> Multisig:
        """
        Add the signature of public_key to a multisig aggregate

        :param txn: unsigned transaction
        :param public_key: 32 bytes public key, one of the multisig subsigs
        :param partial: multisig preimage holding the signatures collected so far
        :return: updated multisig aggregate
        """
