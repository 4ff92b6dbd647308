"""
In-process algod and indexer clients used in place of a running Algorand node
"""
from typing import Any

from algosdk import account, mnemonic
from algosdk.error import AlgodHTTPError, IndexerHTTPError
from algosdk.transaction import (
    AssetCreateTxn,
    SignedTransaction,
    SuggestedParams,
)

from mintbooth.algorand.model import Address, TxnId

# testnet genesis
GENESIS_HASH = "SGO1GKSzyE7IEPItTxCByw9x8FmnrCDexi9/cOUJOiI="
GENESIS_ID = "testnet-v1.0"


def suggested_params(first_round: int = 1000) -> SuggestedParams:
    return SuggestedParams(
        fee=1000,
        first=first_round,
        last=first_round + 1000,
        gh=GENESIS_HASH,
        gen=GENESIS_ID,
        flat_fee=True,
        min_fee=1000,
    )


def generate_test_account() -> tuple[str, Address]:
    """
    :return: private key, address
    """
    private_key, address = account.generate_account()
    return private_key, Address(address)


def generate_test_mnemonic() -> tuple[str, Address]:
    """
    :return: mnemonic, address
    """
    private_key, address = generate_test_account()
    return mnemonic.from_private_key(private_key), address


def photo_mint_txn(creator: Address) -> AssetCreateTxn:
    """
    Unsigned transaction that mints a photo NFT
    """
    return AssetCreateTxn(
        sender=creator,
        sp=suggested_params(),
        total=1,
        decimals=0,
        default_frozen=False,
        manager=creator,
        unit_name="PHOTO",
        asset_name="Booth Photo",
        url="ipfs://bafybeigdyrzt5sfp7udm7hu76uh7y26nf3efuylqabf3oclgtqy55fbzdi#arc3",
    )


class FakeAlgodClient:
    """
    Simulates the algod endpoints used by the booth
    """

    def __init__(self, last_round: int = 1000):
        self.accounts: dict[str, dict[str, Any]] = {}
        self.last_round = last_round
        self.catchup_time = 0
        self.sent: list[list[SignedTransaction]] = []
        self.confirmed: set[str] = set()
        # when True, submitted transactions are confirmed immediately
        self.auto_confirm = True
        # when set, every request fails with this error
        self.error: Exception | None = None
        self.suggested_params_calls = 0

    def _check_error(self):
        if self.error is not None:
            raise self.error

    def set_account(self, address: Address, amount: int, min_balance: int = 100_000):
        self.accounts[address] = {
            "address": address,
            "amount": amount,
            "min-balance": min_balance,
        }

    def account_info(self, address: str, **kwargs) -> dict[str, Any]:
        self._check_error()
        try:
            return dict(self.accounts[address])
        except KeyError as err:
            raise AlgodHTTPError("account not found", 404) from err

    def suggested_params(self) -> SuggestedParams:
        self._check_error()
        self.suggested_params_calls += 1
        return suggested_params(self.last_round)

    def send_transactions(self, txns: list[SignedTransaction], **kwargs) -> str:
        self._check_error()
        self.sent.append(list(txns))
        txid = txns[0].get_txid()
        if self.auto_confirm:
            self.confirmed.update(txn.get_txid() for txn in txns)
        return txid

    def status(self, **kwargs) -> dict[str, Any]:
        self._check_error()
        return {"last-round": self.last_round, "catchup-time": self.catchup_time}

    def status_after_block(self, block_num: int, **kwargs) -> dict[str, Any]:
        self.last_round = max(self.last_round, block_num)
        return self.status()

    def pending_transaction_info(self, transaction_id: str, **kwargs) -> dict[str, Any]:
        if transaction_id in self.confirmed:
            return {"confirmed-round": self.last_round, "pool-error": ""}
        return {"confirmed-round": 0, "pool-error": ""}


class FakeIndexerClient:
    """
    Simulates the indexer endpoints used by the booth
    """

    def __init__(self):
        self.transactions: dict[str, dict[str, Any]] = {}
        self.errors: list[str] = []
        self.error: Exception | None = None

    def add_transaction(self, txid: TxnId, sender: Address):
        self.transactions[txid] = {"id": txid, "sender": sender}

    def transaction(self, txn_id: str, **kwargs) -> dict[str, Any]:
        if self.error is not None:
            raise self.error
        try:
            return {"transaction": self.transactions[txn_id], "current-round": 1000}
        except KeyError as err:
            raise IndexerHTTPError(f"no transaction found for transaction id: {txn_id}") from err

    def health(self, **kwargs) -> dict[str, Any]:
        if self.error is not None:
            raise self.error
        return {"db-available": True, "is-migrating": False, "round": 1000, "errors": self.errors}
