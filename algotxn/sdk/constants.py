"""
Contains useful constants.
"""

# transaction types
payment_txn = "pay"
"""str: indicates a payment transaction"""
keyreg_txn = "keyreg"
"""str: indicates a key registration transaction"""
assetconfig_txn = "acfg"
"""str: indicates an asset configuration transaction"""
assetfreeze_txn = "afrz"
"""str: indicates an asset freeze transaction"""
assettransfer_txn = "axfer"
"""str: indicates an asset transfer transaction"""
appcall_txn = "appl"
"""str: indicates an app call transaction, allows creating, deleting, and
interacting with an application"""


# prefixes
txid_prefix = b"TX"
"""bytes: transaction prefix when signing"""
tgid_prefix = b"TG"
"""bytes: transaction group prefix when computing the group ID"""
msig_addr_prefix = "MultisigAddr"
"""str: prefix for multisig addresses"""


hash_len = 32
"""int: how long various hash-like fields should be"""
check_sum_len_bytes = 4
"""int: how long checksums should be"""
key_len_bytes = 32
"""int: how long addresses are in bytes"""
signature_length = 64
"""int: byte length of an ed25519 signature"""
address_len = 58
"""int: how long addresses are in base32, including the checksum"""
min_txn_fee = 1000
"""int: minimum transaction fee"""
num_additional_bytes_after_signing = 75
"""int: number of bytes a signature adds to an encoded transaction"""
metadata_length = 32
"""int: length of asset metadata"""
note_max_length = 1024
"""int: maximum length of note field"""
lease_length = 32
"""int: byte length of leases"""
max_asset_decimals = 19
"""int: maximum value for decimals in assets"""
max_asset_unit_name_length = 8
"""int: maximum byte length of an asset unit name"""
max_asset_name_length = 32
"""int: maximum byte length of an asset name"""
max_asset_url_length = 32
"""int: maximum byte length of an asset url"""
