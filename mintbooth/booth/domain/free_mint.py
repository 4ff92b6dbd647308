"""
Free mint domain model
"""
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from mintbooth.algorand.model import Address, TxnId


class FreeMintStatus(StrEnum):
    """
    A wallet's free mint is only claimed once the sponsor payment is found on-chain.
    """

    CLAIMED = "claimed"
    NOT_CLAIMED = "not_claimed"


@dataclass(slots=True)
class FreeMintClaim:
    """
    Points to the sponsor payment of the most recently built free mint group for a wallet.

    The claim is an intent, not proof - see :class:`FreeMintStatus`.
    """

    wallet_address: Address
    # ID of the sponsor payment transaction, i.e., group index 0
    txid: TxnId
    created_at: datetime
    updated_at: datetime
