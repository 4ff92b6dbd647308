"""
Booth REST API client
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import httpx

from mintbooth.algorand.model import Address
from mintbooth.booth.domain.free_mint import FreeMintStatus
from mintbooth.booth.domain.print_request import (
    PrintRequest,
    PrintRequestStatus,
    TShirtSize,
)
from mintbooth.booth.domain.settings import BoothStatus
from mintbooth.core.logging import get_logger


class BoothApiError(Exception):
    """
    Booth API returned an error response
    """

    def __init__(self, status_code: int, message: str, payload: dict[str, Any]):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        # full error response body, e.g., includes 'printRequest' for 409 responses
        self.payload = payload


@dataclass(slots=True)
class PrintRequestPage:
    print_requests: list[PrintRequest]
    page: int
    limit: int
    total: int
    total_pages: int


@dataclass(slots=True)
class AdminSettings:
    id: int  # pylint: disable=invalid-name
    is_paused: bool
    max_print_requests: int
    current_count: int
    created_at: datetime
    updated_at: datetime


def to_print_request(data: dict[str, Any]) -> PrintRequest:
    return PrintRequest(
        id=data["id"],
        wallet_address=Address(data["wallet_address"]),
        asset_id=data["asset_id"],
        tshirt_size=TShirtSize(data["tshirt_size"]),
        status=PrintRequestStatus(data["status"]),
        created_at=datetime.fromisoformat(data["created_at"]),
        updated_at=datetime.fromisoformat(data["updated_at"]),
    )


def to_print_request_page(data: dict[str, Any]) -> PrintRequestPage:
    pagination = data["pagination"]
    return PrintRequestPage(
        print_requests=[to_print_request(item) for item in data["data"]],
        page=pagination["page"],
        limit=pagination["limit"],
        total=pagination["total"],
        total_pages=pagination["totalPages"],
    )


def to_admin_settings(data: dict[str, Any]) -> AdminSettings:
    return AdminSettings(
        id=data["id"],
        is_paused=data["is_paused"],
        max_print_requests=data["max_print_requests"],
        current_count=data["current_count"],
        created_at=datetime.fromisoformat(data["created_at"]),
        updated_at=datetime.fromisoformat(data["updated_at"]),
    )


class BoothApiClient:
    """
    The HTTP client is injected, i.e., the caller owns it and is responsible for closing it.

    >>> client = BoothApiClient(httpx.Client(base_url="http://localhost:3001"))  # doctest: +SKIP

    Admin endpoints require an admin token, which is set by :meth:`login`.
    """

    def __init__(self, http: httpx.Client, admin_token: str | None = None):
        self._http = http
        self.admin_token = admin_token
        self._logger = get_logger(self)

    def _request(
        self,
        method: str,
        path: str,
        *,
        admin: bool = False,
        **kwargs: Any,
    ) -> Any:
        headers = kwargs.pop("headers", {})
        if admin and self.admin_token:
            headers["Authorization"] = f"Bearer {self.admin_token}"

        response = self._http.request(method, path, headers=headers, **kwargs)
        if response.is_success:
            return response.json()

        try:
            payload = response.json()
        except ValueError:
            payload = {"error": response.text}
        if not isinstance(payload, dict):
            payload = {"error": str(payload)}
        message = payload.get("error") or f"HTTP error: {response.status_code}"
        self._logger.debug("%s %s -> %s : %s", method, path, response.status_code, message)
        raise BoothApiError(response.status_code, message, payload)

    # print requests

    def create_print_request(
        self,
        wallet_address: Address,
        asset_id: int | str,
        tshirt_size: TShirtSize,
    ) -> PrintRequest:
        """
        :exception BoothApiError: 409 if the wallet already has a print request, 403 if the booth is paused or full
        """
        return to_print_request(
            self._request(
                "POST",
                "/print-request",
                json={
                    "wallet_address": wallet_address,
                    "asset_id": asset_id,
                    "tshirt_size": str(tshirt_size),
                },
            )
        )

    def check_print_request(self, wallet_address: Address) -> PrintRequest | None:
        """
        :return: None if the wallet has no print request
        """
        try:
            return to_print_request(
                self._request("GET", f"/check-print-request/{wallet_address}")
            )
        except BoothApiError as err:
            if err.status_code == 404:
                return None
            raise

    def list_print_requests(self, page: int = 1, limit: int = 50) -> PrintRequestPage:
        return to_print_request_page(
            self._request(
                "GET", "/print-request", params={"page": page, "limit": limit}
            )
        )

    def list_print_requests_for_admin(
        self,
        page: int = 1,
        limit: int = 50,
        status: PrintRequestStatus | None = None,
    ) -> PrintRequestPage:
        params: dict[str, Any] = {"page": page, "limit": limit}
        if status is not None:
            params["status"] = str(status)
        return to_print_request_page(
            self._request("GET", "/admin/print-request", admin=True, params=params)
        )

    def update_print_request_status(
        self, print_request_id: int, status: PrintRequestStatus
    ) -> PrintRequest:
        return to_print_request(
            self._request(
                "PATCH",
                f"/print-request/{print_request_id}",
                admin=True,
                json={"status": str(status)},
            )
        )

    # admin

    def login(self, username: str, password: str) -> str:
        """
        Logs in as admin. The returned token is used for subsequent admin requests.
        """
        result = self._request(
            "POST",
            "/admin-login",
            json={"username": username, "password": password},
        )
        self.admin_token = result["token"]
        return self.admin_token

    def get_settings(self) -> AdminSettings:
        return to_admin_settings(self._request("GET", "/admin/settings", admin=True))

    def update_settings(
        self,
        is_paused: bool | None = None,
        max_print_requests: int | None = None,
    ) -> AdminSettings:
        patch: dict[str, Any] = {}
        if is_paused is not None:
            patch["is_paused"] = is_paused
        if max_print_requests is not None:
            patch["max_print_requests"] = max_print_requests
        return to_admin_settings(
            self._request("PATCH", "/admin/settings", admin=True, json=patch)
        )

    # booth

    def booth_status(self) -> BoothStatus:
        data = self._request("GET", "/booth-status")
        return BoothStatus(
            is_paused=data["is_paused"],
            max_print_requests=data["max_print_requests"],
            current_count=data["current_count"],
        )

    def free_mint_status(self, wallet_address: Address) -> FreeMintStatus:
        data = self._request("GET", f"/free-mint-status/{wallet_address}")
        return FreeMintStatus(data["status"])

    def free_mint_pool_txn(self, encoded_txn: str) -> list[str]:
        """
        :param encoded_txn: base64 encoded unsigned mint transaction
        :return: transaction group - the signed sponsor payment followed by the unsigned mint transaction
        :exception BoothApiError: 400 if the free mint was already claimed
        """
        data = self._request("POST", "/free-mint-pool-txn", json={"txn": encoded_txn})
        return data["group"]
