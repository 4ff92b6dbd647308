"""
REST API request and response models

Request fields are loosely typed, i.e., fields are validated by the booth commands which report the same
error messages regardless of how the request was malformed.
"""
from datetime import datetime
from typing import Any

from pydantic import BaseModel

from mintbooth.booth.commands.data.queries.search_print_requests import (
    PrintRequestSearchResult,
)
from mintbooth.booth.domain.print_request import (
    PrintRequest,
    PrintRequestStatus,
    TShirtSize,
)
from mintbooth.booth.domain.settings import BoothSettings, BoothStatus
from mintbooth.booth.domain.free_mint import FreeMintStatus


class CreatePrintRequestBody(BaseModel):
    wallet_address: Any = None
    # the frontend submits the asset ID as a number
    asset_id: Any = None
    tshirt_size: Any = None


class UpdatePrintRequestStatusBody(BaseModel):
    status: Any = None


class UpdateSettingsBody(BaseModel):
    is_paused: Any = None
    max_print_requests: Any = None


class AdminLoginBody(BaseModel):
    username: Any = None
    password: Any = None


class FreeMintPoolTxnBody(BaseModel):
    # base64 encoded msgpack unsigned transaction
    txn: Any = None


class PrintRequestModel(BaseModel):
    id: int
    wallet_address: str
    asset_id: str
    tshirt_size: TShirtSize
    status: PrintRequestStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, print_request: PrintRequest) -> "PrintRequestModel":
        return cls(
            id=print_request.id,
            wallet_address=print_request.wallet_address,
            asset_id=print_request.asset_id,
            tshirt_size=print_request.tshirt_size,
            status=print_request.status,
            created_at=print_request.created_at,
            updated_at=print_request.updated_at,
        )


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    totalPages: int  # pylint: disable=invalid-name


class PrintRequestPage(BaseModel):
    data: list[PrintRequestModel]
    pagination: Pagination

    @classmethod
    def from_search_result(cls, result: PrintRequestSearchResult) -> "PrintRequestPage":
        return cls(
            data=[
                PrintRequestModel.from_domain(print_request)
                for print_request in result.print_requests
            ],
            pagination=Pagination(
                page=result.page,
                limit=result.limit,
                total=result.total_count,
                totalPages=result.total_pages,
            ),
        )


class SettingsModel(BaseModel):
    id: int
    is_paused: bool
    max_print_requests: int
    current_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, booth_settings: BoothSettings) -> "SettingsModel":
        settings = booth_settings.settings
        return cls(
            id=settings.id,
            is_paused=settings.is_paused,
            max_print_requests=settings.max_print_requests,
            current_count=booth_settings.current_count,
            created_at=settings.created_at,
            updated_at=settings.updated_at,
        )


class BoothStatusModel(BaseModel):
    is_paused: bool
    max_print_requests: int
    current_count: int
    available: bool

    @classmethod
    def from_domain(cls, status: BoothStatus) -> "BoothStatusModel":
        return cls(
            is_paused=status.is_paused,
            max_print_requests=status.max_print_requests,
            current_count=status.current_count,
            available=status.available,
        )


class TokenModel(BaseModel):
    token: str


class FreeMintStatusModel(BaseModel):
    status: FreeMintStatus


class FreeMintGroupModel(BaseModel):
    # index 0 is the signed sponsor payment, followed by the unsigned user transaction
    group: list[str]
