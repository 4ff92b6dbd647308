"""
Print request domain model
"""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from mintbooth.algorand.model import Address


class PrintRequestStatus(StrEnum):
    """
    Print fulfillment lifecycle: pending -> in_progress -> completed -> collected

    NOTE: transitions are not enforced, i.e., an admin can set any status at any time.
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    COLLECTED = "collected"

    @classmethod
    def values(cls) -> list[str]:
        return [status.value for status in cls]


class TShirtSize(StrEnum):
    """
    T-shirt sizes the booth prints on
    """

    S = "S"
    M = "M"
    L = "L"
    XL = "XL"

    @classmethod
    def values(cls) -> list[str]:
        return [size.value for size in cls]


@dataclass(slots=True)
class PrintRequest:
    """
    Request to print a wallet's NFT on a T-shirt
    """

    id: int  # pylint: disable=invalid-name
    wallet_address: Address
    # stored as text regardless of whether the client submitted it as a number
    asset_id: str
    tshirt_size: TShirtSize
    status: PrintRequestStatus
    created_at: datetime
    updated_at: datetime
