"""
Booth errors

Every error carries a human readable message that is safe to return to API clients.
"""
from dataclasses import dataclass

from mintbooth.booth.domain.print_request import PrintRequest


class BoothError(Exception):
    """
    Base exception for booth errors
    """

    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(BoothError):
    """
    Malformed or missing input
    """

    message = "Invalid request"


class PrintRequestNotFound(BoothError):
    """
    Print request does not exist
    """

    message = "Print request not found"


@dataclass(eq=False)
class PrintRequestAlreadyExists(BoothError):
    """
    The wallet already has a print request
    """

    print_request: PrintRequest

    def __post_init__(self):
        super().__init__("Wallet address already has a print request")


class BoothUnavailable(BoothError):
    """
    Base exception for business rules that reject new print requests
    """

    reason: str = "booth_unavailable"


class BoothPaused(BoothUnavailable):
    """
    The booth is paused
    """

    message = "Print booth is currently paused"
    reason = "booth_paused"


class BoothFull(BoothUnavailable):
    """
    The print queue is at capacity
    """

    message = "Print booth has reached its maximum number of print requests"
    reason = "booth_full"


class FreeMintAlreadyClaimed(BoothError):
    """
    The wallet's free mint has already been confirmed on-chain
    """

    message = "Free mint already claimed"


class Unauthorized(BoothError):
    """
    Admin credential is missing or invalid
    """

    message = "Unauthorized"


class Forbidden(BoothError):
    """
    Credential is valid, but does not grant admin access
    """

    message = "Forbidden: Admin access required"


class Misconfigured(BoothError):
    """
    Required server configuration is missing
    """
