"""
Retrieves a wallet's print request from the database
"""
from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from mintbooth.algorand.model import Address
from mintbooth.booth.data.print_request import TPrintRequest
from mintbooth.booth.domain.print_request import PrintRequest


class GetPrintRequest:
    """
    Retrieves the PrintRequest for the specified wallet
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def __call__(self, wallet_address: Address) -> PrintRequest | None:
        with self._session_factory() as session:
            print_request = session.scalar(
                select(TPrintRequest).where(
                    TPrintRequest.wallet_address == wallet_address
                )
            )
            if print_request is None:
                return None

            return print_request.to_print_request()
