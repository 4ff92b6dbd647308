"""
Algorand protocol parameters used by the booth

https://developer.algorand.org/docs/get-details/parameter_tables/
"""

from typing import Final

from algosdk.util import algos_to_microalgos

from mintbooth.algorand.model import MicroAlgos


class MintCost:
    # pylint: disable=too-few-public-methods

    """
    Cost of minting a single ARC-3 photo NFT from a user wallet.

    0.1 ALGO covers the minimum balance increase for holding the newly created asset,
    and 0.001 ALGO covers the asset creation transaction fee.
    """

    ASSET_MIN_BALANCE: Final[MicroAlgos] = MicroAlgos(algos_to_microalgos(0.1))
    TXN_FEE: Final[MicroAlgos] = MicroAlgos(algos_to_microalgos(0.001))

    # 0.101 ALGO
    REQUIRED_MINT_AMOUNT: Final[MicroAlgos] = MicroAlgos(ASSET_MIN_BALANCE + TXN_FEE)
