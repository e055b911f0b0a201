from dataclasses import dataclass
from typing import Optional


@dataclass
class AddressValidation:
    normalized_address: str
    display_address: str
    is_valid: bool
    encoding: Optional[str] = None


@dataclass
class SignedTx:
    txid: str
    raw_tx: str
