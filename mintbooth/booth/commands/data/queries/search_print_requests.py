"""
Command for paging through the print queue
"""
import math
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Select, select, func

from mintbooth.booth.commands.data import MAX_SQL_INTEGER, SqlAlchemySupport
from mintbooth.booth.data.print_request import TPrintRequest
from mintbooth.booth.domain.print_request import PrintRequest, PrintRequestStatus
from mintbooth.booth.errors import ValidationError
from mintbooth.core.command import Command

DEFAULT_PAGE = 1
MAX_LIMIT = 50


@dataclass(slots=True)
class PrintRequestSearchRequest:
    """
    Print request search request

    Results are sorted by `created_at`, and then by `id` for print requests created at the same instant.
    """

    page: int = DEFAULT_PAGE
    limit: int = MAX_LIMIT
    # None means all print requests
    status: PrintRequestStatus | None = None
    # sort order, i.e., ascending or descending
    asc: bool = False

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(slots=True)
class PrintRequestSearchResult:
    """
    Print request search result
    """

    print_requests: list[PrintRequest]

    page: int
    limit: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.limit)


def parse_page_limit(page: Any = None, limit: Any = None) -> tuple[int, int]:
    """
    - `page` defaults to 1 and must be >= 1
    - `limit` defaults to 50 and is clamped to [1, 50]

    Values that are not whole numbers fall back to the defaults.

    :exception ValidationError: if page < 1
    """
    page = _parse_int(page, DEFAULT_PAGE)
    if page < 1:
        raise ValidationError("Page must be greater than 0")

    limit = _parse_int(limit, MAX_LIMIT)
    return page, min(max(limit, 1), MAX_LIMIT)


def _parse_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def parse_status_filter(status: str | None) -> PrintRequestStatus | None:
    """
    Unrecognized status values, including "all", are ignored, i.e., no status filter is applied.
    """
    try:
        return PrintRequestStatus(status)
    except ValueError:
        return None


class SearchPrintRequests(
    Command[PrintRequestSearchRequest, PrintRequestSearchResult],
    SqlAlchemySupport,
):
    """
    SearchPrintRequests
    """

    def __call__(self, request: PrintRequestSearchRequest) -> PrintRequestSearchResult:
        logger = super().get_logger()

        def build_where_clause(select_clause: Select) -> Select:
            if request.status is None:
                return select_clause
            return select_clause.where(TPrintRequest.status == request.status)

        def add_sort(select_clause: Select) -> Select:
            if request.asc:
                return select_clause.order_by(TPrintRequest.created_at, TPrintRequest.id)
            return select_clause.order_by(
                TPrintRequest.created_at.desc(), TPrintRequest.id.desc()
            )

        # pylint: disable=not-callable
        count_query = build_where_clause(select(func.count(TPrintRequest.id)))
        logger.debug("count_query: %s", count_query)

        with self._session_factory() as session:
            total_count = session.scalar(count_query) or 0
            if request.offset > MAX_SQL_INTEGER:
                # page is past the end of any table
                return PrintRequestSearchResult(
                    print_requests=[],
                    page=request.page,
                    limit=request.limit,
                    total_count=total_count,
                )

            query = add_sort(build_where_clause(select(TPrintRequest)))
            query = query.limit(request.limit).offset(request.offset)
            logger.debug("query: %s", query)

            return PrintRequestSearchResult(
                print_requests=[
                    print_request.to_print_request()
                    for print_request in session.scalars(query)
                ],
                page=request.page,
                limit=request.limit,
                total_count=total_count,
            )
