"""
Reconciles a wallet's free mint claim against the chain
"""
from algosdk.v2client.indexer import IndexerClient

from mintbooth.algorand.accounts import get_transaction_sender
from mintbooth.algorand.model import Address
from mintbooth.booth.commands.data.free_mint_claim import GetFreeMintClaim
from mintbooth.booth.domain.free_mint import FreeMintStatus
from mintbooth.core.command import Command


class GetFreeMintStatus(Command[Address, FreeMintStatus]):
    """
    A wallet's free mint is claimed if its recorded sponsor payment was confirmed on-chain, i.e., the indexer
    finds the recorded transaction and its sender is the sponsor account.

    Indexer lookup failures are logged and treated as not claimed. Status is always derived from the chain,
    never from the claim record alone.
    """

    def __init__(
        self,
        indexer_client: IndexerClient,
        sponsor_address: Address,
        get_free_mint_claim: GetFreeMintClaim,
    ):
        self._indexer_client = indexer_client
        self._sponsor_address = sponsor_address
        self._get_free_mint_claim = get_free_mint_claim

    def __call__(self, wallet_address: Address) -> FreeMintStatus:
        claim = self._get_free_mint_claim(wallet_address)
        if claim is None:
            return FreeMintStatus.NOT_CLAIMED

        try:
            sender = get_transaction_sender(claim.txid, self._indexer_client)
        except Exception as err:  # pylint: disable=broad-exception-caught
            # a built group that was never submitted is not found on the indexer
            self.get_logger().warning(
                "free mint claim lookup failed: wallet=%s txid=%s : %s",
                wallet_address,
                claim.txid,
                err,
            )
            return FreeMintStatus.NOT_CLAIMED

        if sender == self._sponsor_address:
            return FreeMintStatus.CLAIMED
        return FreeMintStatus.NOT_CLAIMED
