"""
Atomic transaction groups

https://developer.algorand.org/docs/get-details/atomic_transfers/
"""
from typing import Any

from algosdk import account, constants
from algosdk.error import ConfirmationTimeoutError
from algosdk.transaction import (
    Transaction,
    SignedTransaction,
    assign_group_id,
    wait_for_confirmation,
)
from algosdk.v2client.algod import AlgodClient

from mintbooth.algorand.errors import (
    handle_algod_errors,
    TransactionConfirmationTimeout,
)
from mintbooth.algorand.model import TxnId
from mintbooth.algorand.transactions import (
    decode_transaction_group,
    InvalidTransactionEncoding,
)


def group_transactions(txns: list[Transaction]) -> list[Transaction]:
    """
    Assigns the same group ID to all transactions, i.e., they will be committed all-or-nothing.

    Any group ID previously assigned to the transactions is replaced.

    :exception ValueError: if the group is empty or exceeds the protocol group size limit
    """
    if not txns:
        raise ValueError("transaction group must not be empty")
    if len(txns) > constants.tx_group_limit:
        raise ValueError(
            f"transaction group size must not exceed {constants.tx_group_limit}"
        )
    for txn in txns:
        txn.group = None
    return assign_group_id(txns)


def sign_transaction_group(
    group: list[Transaction | SignedTransaction],
    private_key: str,
) -> list[SignedTransaction]:
    """
    Signs the unsigned transactions in the group that are sent by the private key's account.

    :exception InvalidTransactionEncoding: if an unsigned transaction belongs to another account
    """
    signer = account.address_from_private_key(private_key)
    signed_txns: list[SignedTransaction] = []
    for txn in group:
        if isinstance(txn, SignedTransaction):
            signed_txns.append(txn)
        elif txn.sender == signer:
            signed_txns.append(txn.sign(private_key))
        else:
            raise InvalidTransactionEncoding(
                f"unsigned transaction sender is not the signer: {txn.sender}"
            )
    return signed_txns


@handle_algod_errors
def sign_and_submit_group(
    algod_client: AlgodClient,
    encoded_group: list[str],
    private_key: str,
    wait_rounds: int = 4,
) -> dict[str, Any]:
    """
    Completes a partially signed group, submits it, and waits for it to be confirmed.

    :param encoded_group: base64 encoded transactions, as returned by the free mint pool endpoint
    :param private_key: used to sign the transactions that are still unsigned
    :param wait_rounds: max number of rounds to wait for confirmation
    :return: pending transaction info for the first transaction in the group
    :exception TransactionConfirmationTimeout: if not confirmed within `wait_rounds`
    :exception AlgodRequestError: if the node rejects the group
    """
    signed_txns = sign_transaction_group(
        decode_transaction_group(encoded_group),
        private_key,
    )
    txid = TxnId(algod_client.send_transactions(signed_txns))
    try:
        return wait_for_confirmation(algod_client, txid, wait_rounds)
    except ConfirmationTimeoutError as err:
        raise TransactionConfirmationTimeout(
            f"transaction not confirmed after {wait_rounds} rounds: {txid}"
        ) from err
