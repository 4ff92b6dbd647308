"""
Free mint claim data model
"""
from datetime import datetime, UTC
from typing import cast

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from mintbooth.algorand.model import Address, TxnId
from mintbooth.booth.data import Base
from mintbooth.booth.data.support import as_utc
from mintbooth.booth.domain.free_mint import FreeMintClaim


class TFreeMintClaim(Base):
    """
    Free mint claim database table model

    One row per wallet. Rebuilding the free mint group replaces `txid` in place.
    """

    __tablename__ = "free_mint_claim"

    id: Mapped[int] = mapped_column(  # pylint: disable=invalid-name
        primary_key=True,
        autoincrement=True,
        init=False,
    )
    wallet_address: Mapped[str] = mapped_column(String(58), unique=True)
    txid: Mapped[str] = mapped_column(String(52))
    created_at: Mapped[datetime] = mapped_column()
    updated_at: Mapped[datetime] = mapped_column()

    @classmethod
    def create(cls, wallet_address: Address, txid: TxnId) -> "TFreeMintClaim":
        now = datetime.now(UTC)
        return cls(
            wallet_address=wallet_address,
            txid=txid,
            created_at=now,
            updated_at=now,
        )

    def update_txid(self, txid: TxnId):
        self.txid = cast(Mapped[str], txid)
        self.updated_at = cast(Mapped[datetime], datetime.now(UTC))

    def to_free_mint_claim(self) -> FreeMintClaim:
        return FreeMintClaim(
            wallet_address=Address(self.wallet_address),
            txid=TxnId(self.txid),
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )
