from typing import Iterable, List, Optional

from algotxn.sdk import encoding, error


def parse_accounts(accounts: Optional[Iterable[str]]) -> List[str]:
    """Validate application call account references, keeping their order.

    Raises InvalidAddressError for the first entry that does not decode; the
    error carries the offending text and its position.
    """
    parsed = []
    for i, account in enumerate(accounts or ()):
        try:
            encoding.decode_address(account)
        except (error.InvalidAddressError, error.EmptyAddressError):
            raise error.InvalidAddressError(account, "invalid account reference at position {}".format(i))
        parsed.append(account)
    return parsed


def parse_foreign_apps(foreign_apps: Optional[Iterable[int]]) -> List[int]:
    return [int(app_id) for app_id in foreign_apps or ()]
