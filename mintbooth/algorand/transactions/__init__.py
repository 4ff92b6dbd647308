"""
Provides support to create and encode Algorand transactions.
"""
from algosdk import encoding
from algosdk.transaction import Transaction, SignedTransaction, SuggestedParams
from algosdk.v2client.algod import AlgodClient
from ulid import ULID

from mintbooth.algorand.errors import handle_algod_errors


class InvalidTransactionEncoding(ValueError):
    """
    The payload is not a base64 encoded msgpack transaction of the expected type
    """


def create_lease() -> bytes:
    """
    Generates a unique 32 byte lease, which can be used to set the transaction lease.

    While the lease is active, i.e., within the transaction's validity window, no other transaction
    from the same sender with the same lease can be confirmed.
    """
    return str(ULID().to_uuid()).replace("-", "").encode()


def encode_transaction(txn: Transaction | SignedTransaction) -> str:
    """
    :return: base64 encoded msgpack transaction
    """
    return encoding.msgpack_encode(txn)


def decode_transaction(encoded_txn: str) -> Transaction:
    """
    Decodes an unsigned transaction.

    :param encoded_txn: base64 encoded msgpack transaction
    :exception InvalidTransactionEncoding: if the payload cannot be decoded into an unsigned transaction
    """
    decoded = _decode(encoded_txn)
    if not isinstance(decoded, Transaction):
        raise InvalidTransactionEncoding("expected an unsigned transaction")
    return decoded


def decode_transaction_group(
    encoded_txns: list[str],
) -> list[Transaction | SignedTransaction]:
    """
    Decodes a transaction group which may contain both signed and unsigned transactions.

    :exception InvalidTransactionEncoding: if any entry is not a transaction
    """
    group: list[Transaction | SignedTransaction] = []
    for encoded_txn in encoded_txns:
        decoded = _decode(encoded_txn)
        if not isinstance(decoded, (Transaction, SignedTransaction)):
            raise InvalidTransactionEncoding("expected a transaction")
        group.append(decoded)
    return group


def _decode(encoded_txn: str):
    if not isinstance(encoded_txn, str) or not encoded_txn:
        raise InvalidTransactionEncoding("transaction is required")
    try:
        return encoding.msgpack_decode(encoded_txn)
    except Exception as err:  # pylint: disable=broad-exception-caught
        # algosdk surfaces malformed payloads as binascii, msgpack, KeyError, etc
        raise InvalidTransactionEncoding("transaction could not be decoded") from err


@handle_algod_errors
def get_suggested_params(algod_client: AlgodClient) -> SuggestedParams:
    """
    :return: current network transaction parameters, using the suggested flat fee
    :exception AlgodRequestError: if the request fails
    """
    return algod_client.suggested_params()
