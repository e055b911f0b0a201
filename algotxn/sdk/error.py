class AlgoTxnError(Exception):
    """Base class for every input error raised while building a transaction."""


class InvalidAddressError(AlgoTxnError):
    def __init__(self, address=None, reason="invalid address"):
        self.address = address
        if address is None:
            AlgoTxnError.__init__(self, reason)
        else:
            AlgoTxnError.__init__(self, "{}: {!r}".format(reason, address))


class EmptyAddressError(AlgoTxnError):
    def __init__(self):
        AlgoTxnError.__init__(self, "address must not be empty")


class ZeroAddressError(AlgoTxnError):
    def __init__(self):
        AlgoTxnError.__init__(self, "receiver address is required")


class MissingGenesisHashError(AlgoTxnError):
    def __init__(self):
        AlgoTxnError.__init__(self, "transaction must contain a genesis hash")


class WrongHashLengthError(AlgoTxnError):
    def __init__(self):
        AlgoTxnError.__init__(self, "length must be 32 bytes")


class WrongLeaseLengthError(AlgoTxnError):
    def __init__(self):
        AlgoTxnError.__init__(self, "lease length must be 32 bytes")


class WrongNoteType(AlgoTxnError):
    def __init__(self):
        AlgoTxnError.__init__(self, 'note must be of type "bytes" or "str"')


class WrongNoteLength(AlgoTxnError):
    def __init__(self):
        AlgoTxnError.__init__(self, "note length must be at most 1024")


class WrongAmountType(AlgoTxnError):
    def __init__(self):
        AlgoTxnError.__init__(self, "amount (amt) must be a non-negative integer")


class InvalidIndexError(AlgoTxnError):
    def __init__(self, index):
        self.index = index
        AlgoTxnError.__init__(self, "invalid application or asset index: {!r}".format(index))


class FieldTooLongError(AlgoTxnError):
    def __init__(self, field, length, max_length):
        self.field = field
        self.length = length
        self.max_length = max_length
        AlgoTxnError.__init__(self, "{} too long: {} > {}".format(field, length, max_length))


class DecimalsOutOfRangeError(AlgoTxnError):
    def __init__(self, decimals, max_decimals):
        self.decimals = decimals
        AlgoTxnError.__init__(
            self,
            "cannot create an asset with number of decimals {} (more than maximum {})".format(
                decimals, max_decimals
            ),
        )


class InvalidKeyMaterialError(AlgoTxnError):
    def __init__(self, field):
        self.field = field
        AlgoTxnError.__init__(self, "{} must be a base64 encoded 32 byte key".format(field))


class StrictCheckViolationError(AlgoTxnError):
    def __init__(self):
        AlgoTxnError.__init__(
            self,
            "strict empty address checking requested but empty address supplied "
            "to one or more manager addresses",
        )


class UnknownTxnTypeError(AlgoTxnError):
    def __init__(self, txn_type):
        AlgoTxnError.__init__(self, "unknown transaction type: {!r}".format(txn_type))


class InvalidThresholdError(AlgoTxnError):
    def __init__(self):
        AlgoTxnError.__init__(self, "invalid multisig threshold")


class UnknownMsigVersionError(AlgoTxnError):
    def __init__(self):
        AlgoTxnError.__init__(self, "unknown multisig version != 1")


class InvalidSignatureError(AlgoTxnError):
    def __init__(self):
        AlgoTxnError.__init__(self, "signature must be 64 bytes")


class BadPublicKeyError(AlgoTxnError):
    def __init__(self):
        AlgoTxnError.__init__(self, "public key does not belong to the multisig account")


class WrongApplicationFieldType(AlgoTxnError, TypeError):
    def __init__(self, field):
        self.field = field
        AlgoTxnError.__init__(self, "{} has an unsupported type".format(field))
