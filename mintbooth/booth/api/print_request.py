"""
Print request endpoints
"""
from fastapi import APIRouter, status

from mintbooth.algorand.model import Address
from mintbooth.booth.api.dependencies import BoothApp, Admin
from mintbooth.booth.api.schemas import (
    CreatePrintRequestBody,
    PrintRequestModel,
    PrintRequestPage,
    UpdatePrintRequestStatusBody,
)
from mintbooth.booth.commands.data.create_print_request import NewPrintRequest
from mintbooth.booth.commands.data.queries.search_print_requests import (
    PrintRequestSearchRequest,
    parse_page_limit,
    parse_status_filter,
)
from mintbooth.booth.commands.data.update_print_request_status import (
    PrintRequestStatusUpdate,
)
from mintbooth.booth.errors import PrintRequestNotFound

router = APIRouter(tags=["print-request"])


@router.post("/print-request", status_code=status.HTTP_201_CREATED)
def create_print_request(
    body: CreatePrintRequestBody, booth_app: BoothApp
) -> PrintRequestModel:
    request = NewPrintRequest.parse(
        wallet_address=body.wallet_address,
        asset_id=body.asset_id,
        tshirt_size=body.tshirt_size,
    )
    return PrintRequestModel.from_domain(booth_app.create_print_request(request))


@router.get("/check-print-request/{wallet_address}")
def check_print_request(wallet_address: str, booth_app: BoothApp) -> PrintRequestModel:
    print_request = booth_app.get_print_request(Address(wallet_address))
    if print_request is None:
        raise PrintRequestNotFound("No print request found")
    return PrintRequestModel.from_domain(print_request)


@router.get("/print-request")
def list_print_requests(
    booth_app: BoothApp,
    page: str | None = None,
    limit: str | None = None,
) -> PrintRequestPage:
    """
    Newest print requests first
    """
    page_number, page_limit = parse_page_limit(page, limit)
    result = booth_app.search_print_requests(
        PrintRequestSearchRequest(page=page_number, limit=page_limit, asc=False)
    )
    return PrintRequestPage.from_search_result(result)


@router.get("/admin/print-request")
def list_print_requests_for_admin(
    booth_app: BoothApp,
    _admin: Admin,
    page: str | None = None,
    limit: str | None = None,
    status: str | None = None,  # pylint: disable=redefined-outer-name
) -> PrintRequestPage:
    """
    Oldest print requests first, i.e., in fulfillment order
    """
    page_number, page_limit = parse_page_limit(page, limit)
    result = booth_app.search_print_requests(
        PrintRequestSearchRequest(
            page=page_number,
            limit=page_limit,
            status=parse_status_filter(status),
            asc=True,
        )
    )
    return PrintRequestPage.from_search_result(result)


@router.patch("/print-request/{id}")
def update_print_request_status(
    id: str,  # pylint: disable=redefined-builtin,invalid-name
    body: UpdatePrintRequestStatusBody,
    booth_app: BoothApp,
    _admin: Admin,
) -> PrintRequestModel:
    update = PrintRequestStatusUpdate.parse(id=id, status=body.status)
    return PrintRequestModel.from_domain(booth_app.update_print_request_status(update))
