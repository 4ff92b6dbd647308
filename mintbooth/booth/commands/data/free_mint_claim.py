"""
Free mint claim ledger commands
"""
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mintbooth.algorand.model import Address, TxnId
from mintbooth.booth.commands.data import SqlAlchemySupport
from mintbooth.booth.data.free_mint_claim import TFreeMintClaim
from mintbooth.booth.domain.free_mint import FreeMintClaim
from mintbooth.core.command import Command


def _find_claim(session: Session, wallet_address: Address) -> TFreeMintClaim | None:
    return session.scalar(
        select(TFreeMintClaim).where(TFreeMintClaim.wallet_address == wallet_address)
    )


class GetFreeMintClaim(SqlAlchemySupport):
    """
    Retrieves the wallet's free mint claim record.

    NOTE: a claim record does not mean the free mint was claimed. It records the latest sponsor payment
    that was built for the wallet, which may never have been submitted.
    """

    def __call__(self, wallet_address: Address) -> FreeMintClaim | None:
        with self._session_factory() as session:
            claim = _find_claim(session, wallet_address)
            return None if claim is None else claim.to_free_mint_claim()


class StoreFreeMintClaim(
    Command[tuple[Address, TxnId], FreeMintClaim],
    SqlAlchemySupport,
):
    """
    Inserts the wallet's claim record, or replaces the txid on the existing record.

    If a concurrent request inserted the wallet's record first, then the insert is retried as an update.
    """

    def __call__(self, args: tuple[Address, TxnId]) -> FreeMintClaim:
        wallet_address, txid = args
        try:
            result = self._upsert(wallet_address, txid)
        except IntegrityError:
            result = self._upsert(wallet_address, txid)

        self.get_logger().info(
            "free mint claim stored: wallet=%s txid=%s", wallet_address, txid
        )
        return result

    def _upsert(self, wallet_address: Address, txid: TxnId) -> FreeMintClaim:
        with self._session_factory.begin() as session:
            claim = _find_claim(session, wallet_address)
            if claim is None:
                claim = TFreeMintClaim.create(wallet_address, txid)
                session.add(claim)
            else:
                claim.update_txid(txid)
            session.flush()
            return claim.to_free_mint_claim()
