"""
Provides support for data commands
"""

from abc import ABC

from sqlalchemy import func, select
from sqlalchemy.orm import sessionmaker, Session

from mintbooth.booth.data.print_request import TPrintRequest

# largest value that can be bound to an INTEGER column, i.e., signed 64 bit
MAX_SQL_INTEGER = 2**63 - 1


class SqlAlchemySupport(ABC):
    """
    SqlAlchemySupport
    """

    # pylint: disable=too-few-public-methods

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory


def count_print_requests(session: Session) -> int:
    """
    :return: live number of print requests
    """
    return session.scalar(select(func.count(TPrintRequest.id))) or 0
