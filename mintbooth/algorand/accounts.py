"""
Algorand account related utility functions
"""
from dataclasses import dataclass, field
from typing import Any

from algosdk import account
from algosdk.transaction import Transaction, SignedTransaction
from algosdk.v2client.algod import AlgodClient
from algosdk.v2client.indexer import IndexerClient

from mintbooth.algorand.errors import handle_algod_errors, handle_indexer_errors
from mintbooth.algorand.model import Address, AccountBalance, Mnemonic, TxnId


@handle_algod_errors
def get_account_balance(address: Address, algod_client: AlgodClient) -> AccountBalance:
    """
    Returns the account's ALGO balance and minimum balance requirement.

    :exception AccountDoesNotExist: if the node does not know the account
    :exception AlgodRequestError: if the request fails
    """
    account_info: dict[str, Any] = algod_client.account_info(address)  # type: ignore
    return AccountBalance.from_account_info(account_info)


@handle_indexer_errors
def get_transaction_sender(txid: TxnId, indexer_client: IndexerClient) -> Address:
    """
    Looks up a confirmed transaction on the indexer.

    :return: transaction sender
    :exception IndexerRequestError: if the transaction is not found or the request fails
    """
    result: dict[str, Any] = indexer_client.transaction(txid)  # type: ignore
    return Address(result["transaction"]["sender"])


@dataclass(slots=True, frozen=True)
class SponsorAccount:
    """
    Custodial account that pays for free mints.

    The private key is loaded once at startup. Signing does not mutate any state.
    """

    address: Address
    _private_key: str = field(repr=False)

    @classmethod
    def from_mnemonic(cls, word_list: Mnemonic | str) -> "SponsorAccount":
        """
        :exception ValueError: if the mnemonic is invalid
        """
        if isinstance(word_list, str):
            word_list = Mnemonic.from_word_list(word_list)
        private_key = word_list.to_private_key()
        return cls(
            address=Address(account.address_from_private_key(private_key)),
            _private_key=private_key,
        )

    @classmethod
    def from_private_key(cls, private_key: str) -> "SponsorAccount":
        """
        :param private_key: base64 encoded Algorand private key
        """
        return cls(
            address=Address(account.address_from_private_key(private_key)),
            _private_key=private_key,
        )

    def sign(self, txn: Transaction) -> SignedTransaction:
        """
        :exception ValueError: if the sponsor is not the transaction sender
        """
        if txn.sender != self.address:
            raise ValueError("sponsor can only sign its own transactions")
        return txn.sign(self._private_key)
