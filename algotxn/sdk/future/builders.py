"""
Builders turning user intent into fee-correct, unsigned transactions.

Every builder validates its arguments, fills in the common header from the
suggested params, sets the fields of its transaction kind and computes the
fee. The first invalid argument raises; nothing is returned on failure.

Addresses are checksummed, human-readable strings. Optional address
arguments left blank mean "not set".
"""

from algotxn.sdk.future.parsers import parse_accounts, parse_foreign_apps  # noqa F401
from algotxn.sdk.future.transaction import (
    ApplicationCallTxn,
    AssetConfigTxn,
    AssetFreezeTxn,
    AssetTransferTxn,
    KeyregTxn,
    OnComplete,
    PaymentTxn,
    StateSchema,
    Transaction,
)


def make_payment_txn(sender, receiver, amount, note, close_remainder_to, sp, lease=None, rekey_to=None):
    """Send `amount` microAlgos from sender to receiver, optionally closing the sender out."""
    return PaymentTxn(
        sender,
        sp,
        receiver,
        amount,
        close_remainder_to=close_remainder_to,
        note=note,
        lease=lease,
        rekey_to=rekey_to,
    )


def make_keyreg_txn(account, note, sp, vote_key, selection_key, vote_first, vote_last, vote_key_dilution):
    """
    Register a participation key for `account`.

    vote_key and selection_key are base64 strings of the 32 byte root
    participation key and VRF key.
    """
    return KeyregTxn(account, sp, vote_key, selection_key, vote_first, vote_last, vote_key_dilution, note=note)


def make_asset_create_txn(
    account,
    note,
    sp,
    total,
    decimals,
    default_frozen,
    manager,
    reserve,
    freeze,
    clawback,
    unit_name,
    asset_name,
    url,
    metadata_hash,
):
    """
    Create a new asset. Blank management addresses leave that role unset,
    and it can never be set later.
    """
    return AssetConfigTxn(
        account,
        sp,
        index=0,
        total=total,
        default_frozen=default_frozen,
        unit_name=unit_name,
        asset_name=asset_name,
        manager=manager,
        reserve=reserve,
        freeze=freeze,
        clawback=clawback,
        url=url,
        metadata_hash=metadata_hash,
        note=note,
        strict_empty_address_check=False,
        decimals=decimals,
    )


def make_asset_config_txn(
    account,
    note,
    sp,
    index,
    new_manager,
    new_reserve,
    new_freeze,
    new_clawback,
    strict_empty_address_checking,
):
    """
    Change the management addresses of an existing asset.

    Nothing is inherited from the current configuration: a blank address
    clears that role permanently. With strict_empty_address_checking any
    blank address raises StrictCheckViolationError instead.
    """
    return AssetConfigTxn(
        account,
        sp,
        index=index,
        manager=new_manager,
        reserve=new_reserve,
        freeze=new_freeze,
        clawback=new_clawback,
        note=note,
        strict_empty_address_check=strict_empty_address_checking,
    )


def make_asset_destroy_txn(account, note, sp, index):
    # a destroy is a configuration with every management address cleared
    return make_asset_config_txn(account, note, sp, index, "", "", "", "", False)


def _transfer_asset(account, recipient, amount, note, sp, index, close_assets_to, revocation_target):
    return AssetTransferTxn(
        account,
        sp,
        recipient,
        amount,
        index,
        close_assets_to=close_assets_to,
        revocation_target=revocation_target,
        note=note,
    )


def make_asset_transfer_txn(account, recipient, amount, note, sp, close_assets_to, index):
    """
    Send `amount` units of asset `index` from account to recipient. The
    recipient must already accept the asset. A non blank close_assets_to
    receives whatever the account holds after the transfer.
    """
    return _transfer_asset(account, recipient, amount, note, sp, index, close_assets_to, "")


def make_asset_acceptance_txn(account, note, sp, index):
    """Opt `account` in to asset `index` by sending itself zero units."""
    return make_asset_transfer_txn(account, account, 0, note, sp, "", index)


def make_asset_revocation_txn(account, target, amount, recipient, note, sp, index):
    """
    Move `amount` units of asset `index` out of `target` into `recipient`.
    The account must be the asset's clawback address.
    """
    Transaction.as_address(target, required=True)
    return _transfer_asset(account, recipient, amount, note, sp, index, "", target)


def make_asset_freeze_txn(account, note, sp, asset_index, target, new_freeze_setting):
    """Freeze or unfreeze the holdings of `target`; issued by the asset's freeze address."""
    return AssetFreezeTxn(account, sp, asset_index, target, new_freeze_setting, note=note)


def make_application_call_txn(
    sender,
    sp,
    app_index,
    app_args,
    accounts,
    foreign_apps,
    on_complete,
    approval_program,
    clear_program,
    global_schema,
    local_schema,
    note=None,
    lease=None,
    rekey_to=None,
):
    """Fully custom application call; the convenience builders below all go through here."""
    return ApplicationCallTxn(
        sender,
        sp,
        app_index,
        on_complete,
        local_schema=local_schema,
        global_schema=global_schema,
        approval_program=approval_program,
        clear_program=clear_program,
        app_args=app_args,
        accounts=accounts,
        foreign_apps=foreign_apps,
        note=note,
        lease=lease,
        rekey_to=rekey_to,
    )


def make_application_create_txn(
    sender,
    sp,
    on_complete,
    approval_program,
    clear_program,
    global_schema,
    local_schema,
    app_args=None,
    accounts=None,
    foreign_apps=None,
    note=None,
    lease=None,
    rekey_to=None,
):
    return make_application_call_txn(
        sender,
        sp,
        0,
        app_args,
        accounts,
        foreign_apps,
        on_complete,
        approval_program,
        clear_program,
        global_schema,
        local_schema,
        note=note,
        lease=lease,
        rekey_to=rekey_to,
    )


def make_application_update_txn(
    sender,
    sp,
    app_index,
    approval_program,
    clear_program,
    app_args=None,
    accounts=None,
    foreign_apps=None,
    note=None,
    lease=None,
    rekey_to=None,
):
    return make_application_call_txn(
        sender,
        sp,
        app_index,
        app_args,
        accounts,
        foreign_apps,
        OnComplete.UpdateApplicationOC,
        approval_program,
        clear_program,
        StateSchema(),
        StateSchema(),
        note=note,
        lease=lease,
        rekey_to=rekey_to,
    )


def _make_existing_application_txn(
    on_complete, sender, sp, app_index, app_args, accounts, foreign_apps, note, lease, rekey_to
):
    return make_application_call_txn(
        sender,
        sp,
        app_index,
        app_args,
        accounts,
        foreign_apps,
        on_complete,
        None,
        None,
        StateSchema(),
        StateSchema(),
        note=note,
        lease=lease,
        rekey_to=rekey_to,
    )


def make_application_delete_txn(
    sender, sp, app_index, app_args=None, accounts=None, foreign_apps=None, note=None, lease=None, rekey_to=None
):
    return _make_existing_application_txn(
        OnComplete.DeleteApplicationOC, sender, sp, app_index, app_args, accounts, foreign_apps, note, lease, rekey_to
    )


def make_application_opt_in_txn(
    sender, sp, app_index, app_args=None, accounts=None, foreign_apps=None, note=None, lease=None, rekey_to=None
):
    """Allocate local state for the sender in application `app_index`."""
    return _make_existing_application_txn(
        OnComplete.OptInOC, sender, sp, app_index, app_args, accounts, foreign_apps, note, lease, rekey_to
    )


def make_application_close_out_txn(
    sender, sp, app_index, app_args=None, accounts=None, foreign_apps=None, note=None, lease=None, rekey_to=None
):
    """Deallocate the sender's local state in application `app_index`."""
    return _make_existing_application_txn(
        OnComplete.CloseOutOC, sender, sp, app_index, app_args, accounts, foreign_apps, note, lease, rekey_to
    )


def make_application_clear_state_txn(
    sender, sp, app_index, app_args=None, accounts=None, foreign_apps=None, note=None, lease=None, rekey_to=None
):
    """Clear the sender's local state; the application cannot reject this."""
    return _make_existing_application_txn(
        OnComplete.ClearStateOC, sender, sp, app_index, app_args, accounts, foreign_apps, note, lease, rekey_to
    )


def make_application_no_op_txn(
    sender, sp, app_index, app_args=None, accounts=None, foreign_apps=None, note=None, lease=None, rekey_to=None
):
    return _make_existing_application_txn(
        OnComplete.NoOpOC, sender, sp, app_index, app_args, accounts, foreign_apps, note, lease, rekey_to
    )
