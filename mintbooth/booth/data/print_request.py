"""
Print request data model
"""
from datetime import datetime, UTC
from typing import cast

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from mintbooth.algorand.model import Address
from mintbooth.booth.data import Base
from mintbooth.booth.data.support import as_utc
from mintbooth.booth.domain.print_request import (
    PrintRequest,
    PrintRequestStatus,
    TShirtSize,
)


class TPrintRequest(Base):
    """
    Print request database table model

    Each wallet can have at most one print request, which is enforced by the unique constraint on `wallet_address`.
    """

    __tablename__ = "print_request"

    id: Mapped[int] = mapped_column(  # pylint: disable=invalid-name
        primary_key=True,
        autoincrement=True,
        init=False,
    )

    wallet_address: Mapped[str] = mapped_column(String(58), unique=True)
    asset_id: Mapped[str] = mapped_column(String(64))
    tshirt_size: Mapped[TShirtSize] = mapped_column()
    status: Mapped[PrintRequestStatus] = mapped_column(index=True)

    created_at: Mapped[datetime] = mapped_column(index=True)
    updated_at: Mapped[datetime] = mapped_column()

    @classmethod
    def create(
        cls,
        wallet_address: Address,
        asset_id: str,
        tshirt_size: TShirtSize,
    ) -> "TPrintRequest":
        """
        New print requests are always `pending`
        """
        now = datetime.now(UTC)
        return cls(
            wallet_address=wallet_address,
            asset_id=asset_id,
            tshirt_size=tshirt_size,
            status=PrintRequestStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    def update_status(self, status: PrintRequestStatus):
        """
        Sets the status and refreshes `updated_at`
        """
        self.status = cast(Mapped[PrintRequestStatus], status)
        self.updated_at = cast(Mapped[datetime], datetime.now(UTC))

    def to_print_request(self) -> PrintRequest:
        """
        Converts this instance into a PrintRequest instance
        """
        return PrintRequest(
            id=self.id,
            wallet_address=Address(self.wallet_address),
            asset_id=self.asset_id,
            tshirt_size=TShirtSize(self.tshirt_size),
            status=PrintRequestStatus(self.status),
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )
