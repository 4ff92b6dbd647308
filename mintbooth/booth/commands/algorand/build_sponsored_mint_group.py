"""
Builds the fee sponsored free mint transaction group
"""
from algosdk.v2client.algod import AlgodClient

from mintbooth.algorand.accounts import SponsorAccount, get_account_balance
from mintbooth.algorand.model import Address, MicroAlgos, TxnId
from mintbooth.algorand.params import MintCost
from mintbooth.algorand.transactions import (
    InvalidTransactionEncoding,
    decode_transaction,
    encode_transaction,
    get_suggested_params,
)
from mintbooth.algorand.transactions.group import group_transactions
from mintbooth.algorand.transactions.payment import sponsor_payment
from mintbooth.booth.commands.algorand.get_free_mint_status import GetFreeMintStatus
from mintbooth.booth.commands.data.free_mint_claim import StoreFreeMintClaim
from mintbooth.booth.domain.free_mint import FreeMintStatus
from mintbooth.booth.errors import ValidationError, FreeMintAlreadyClaimed
from mintbooth.core.command import Command


def sponsor_amount(
    available_balance: int,
    required_amount: MicroAlgos = MintCost.REQUIRED_MINT_AMOUNT,
) -> MicroAlgos:
    """
    Computes how much the sponsor contributes towards the user's mint.

    If the user's balance above its minimum balance exceeds the required amount, then the sponsor pays the
    full required amount. Otherwise, the sponsor pays the absolute difference between the user's available
    balance and the required amount.

    NOTE: an account whose available balance exactly equals the required amount receives 0.

    :param available_balance: account balance - minimum balance, which may be negative
    """
    if available_balance > required_amount:
        return required_amount
    return MicroAlgos(abs(available_balance - required_amount))


class BuildSponsoredMintGroup(Command[str, list[str]]):
    """
    Takes the user's unsigned mint transaction and returns it grouped with a signed sponsor payment:

    - index 0: sponsor -> user payment, signed by the sponsor
    - index 1: user mint transaction, still unsigned

    The claim record is stored as the last step, i.e., if any Algorand request fails, then nothing is stored.

    :exception ValidationError: if the transaction cannot be decoded
    :exception FreeMintAlreadyClaimed: if the sender already claimed its free mint
    :exception AlgorandRequestError: if an algod request fails
    """

    def __init__(
        self,
        algod_client: AlgodClient,
        sponsor: SponsorAccount,
        get_free_mint_status: GetFreeMintStatus,
        store_free_mint_claim: StoreFreeMintClaim,
    ):
        self._algod_client = algod_client
        self._sponsor = sponsor
        self._get_free_mint_status = get_free_mint_status
        self._store_free_mint_claim = store_free_mint_claim

    def __call__(self, encoded_txn: str) -> list[str]:
        logger = self.get_logger()

        try:
            mint_txn = decode_transaction(encoded_txn)
        except InvalidTransactionEncoding as err:
            raise ValidationError(f"Invalid transaction: {err}") from err
        wallet_address = Address(mint_txn.sender)

        if self._get_free_mint_status(wallet_address) == FreeMintStatus.CLAIMED:
            logger.info("free mint already claimed: %s", wallet_address)
            raise FreeMintAlreadyClaimed

        balance = get_account_balance(wallet_address, self._algod_client)
        amount = sponsor_amount(balance.available)

        payment = sponsor_payment(
            sponsor=self._sponsor.address,
            receiver=wallet_address,
            amount=amount,
            suggested_params=get_suggested_params(self._algod_client),
        )
        payment, mint_txn = group_transactions([payment, mint_txn])
        signed_payment = self._sponsor.sign(payment)

        txid = TxnId(signed_payment.get_txid())
        self._store_free_mint_claim((wallet_address, txid))
        logger.info(
            "free mint group built: wallet=%s available_balance=%s sponsor_amount=%s txid=%s",
            wallet_address,
            balance.available,
            amount,
            txid,
        )

        return [encode_transaction(signed_payment), encode_transaction(mint_txn)]
