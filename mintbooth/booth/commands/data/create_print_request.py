"""
Command to admit a new print request into the print queue
"""
from dataclasses import dataclass
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from mintbooth.algorand.model import Address
from mintbooth.booth.commands.data import SqlAlchemySupport, count_print_requests
from mintbooth.booth.commands.data.settings import GetOrInitSettings
from mintbooth.booth.data.print_request import TPrintRequest
from mintbooth.booth.domain.print_request import PrintRequest, TShirtSize
from mintbooth.booth.errors import (
    ValidationError,
    BoothPaused,
    BoothFull,
    PrintRequestAlreadyExists,
)
from mintbooth.core.command import Command


def find_print_request(session: Session, wallet_address: Address) -> TPrintRequest | None:
    return session.scalar(
        select(TPrintRequest).where(TPrintRequest.wallet_address == wallet_address)
    )


@dataclass(slots=True)
class NewPrintRequest:
    """
    Validated print request submission
    """

    wallet_address: Address
    asset_id: str
    tshirt_size: TShirtSize

    @classmethod
    def parse(
        cls,
        wallet_address: Any,
        asset_id: Any,
        tshirt_size: Any,
    ) -> "NewPrintRequest":
        """
        :param asset_id: may be submitted as a number or as text - it is always stored as text
        :exception ValidationError: if a field is missing or invalid
        """
        if not wallet_address or not asset_id or isinstance(asset_id, bool):
            raise ValidationError("wallet_address and asset_id are required")
        if not isinstance(wallet_address, str):
            raise ValidationError("wallet_address must be a string")

        try:
            size = TShirtSize(tshirt_size)
        except ValueError as err:
            raise ValidationError(
                f"Invalid tshirt_size. Must be one of: {', '.join(TShirtSize.values())}"
            ) from err

        return cls(
            wallet_address=Address(wallet_address),
            asset_id=str(asset_id),
            tshirt_size=size,
        )


class CreatePrintRequest(
    Command[NewPrintRequest, PrintRequest],
    SqlAlchemySupport,
):
    """
    Admission checks are applied in order:

    1. booth is not paused
    2. booth is not full - the print request count is always read fresh within the insert transaction
    3. wallet does not already have a print request

    Wallet uniqueness is enforced by the database. If a concurrent request for the same wallet wins the race,
    the unique constraint violation is reported the same way as when the print request already exists.

    :exception BoothPaused:
    :exception BoothFull:
    :exception PrintRequestAlreadyExists: carries the wallet's existing print request
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        get_or_init_settings: GetOrInitSettings,
    ):
        super().__init__(session_factory)
        self._get_or_init_settings = get_or_init_settings

    def __call__(self, request: NewPrintRequest) -> PrintRequest:
        logger = self.get_logger()

        settings = self._get_or_init_settings()
        if settings.is_paused:
            logger.info("print request rejected - booth is paused: %s", request.wallet_address)
            raise BoothPaused

        try:
            with self._session_factory.begin() as session:
                count = count_print_requests(session)
                if count >= settings.max_print_requests:
                    logger.info(
                        "print request rejected - booth is full (%s/%s): %s",
                        count,
                        settings.max_print_requests,
                        request.wallet_address,
                    )
                    raise BoothFull

                existing = find_print_request(session, request.wallet_address)
                if existing is not None:
                    raise PrintRequestAlreadyExists(existing.to_print_request())

                print_request = TPrintRequest.create(
                    request.wallet_address,
                    request.asset_id,
                    request.tshirt_size,
                )
                session.add(print_request)
                session.flush()
                result = print_request.to_print_request()
        except IntegrityError as err:
            existing_print_request = self._get_existing(request.wallet_address)
            if existing_print_request is None:
                raise
            raise PrintRequestAlreadyExists(existing_print_request) from err

        logger.info(
            "print request created: id=%s wallet=%s asset=%s",
            result.id,
            result.wallet_address,
            result.asset_id,
        )
        return result

    def _get_existing(self, wallet_address: Address) -> PrintRequest | None:
        with self._session_factory() as session:
            existing = find_print_request(session, wallet_address)
            return None if existing is None else existing.to_print_request()
