"""
Maps exceptions to HTTP error responses

Error response bodies have the form: {"error": "<message>"}
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mintbooth.algorand.errors import AlgorandRequestError
from mintbooth.booth.api.schemas import PrintRequestModel
from mintbooth.booth.errors import (
    BoothError,
    BoothUnavailable,
    FreeMintAlreadyClaimed,
    Forbidden,
    Misconfigured,
    PrintRequestAlreadyExists,
    PrintRequestNotFound,
    Unauthorized,
    ValidationError,
)

INTERNAL_SERVER_ERROR = "Internal server error"

logger = logging.getLogger("mintbooth.api")


def status_code(err: BoothError) -> int:
    """
    :return: HTTP status code for the booth error
    """
    # pylint: disable=too-many-return-statements
    match err:
        case ValidationError() | FreeMintAlreadyClaimed():
            return status.HTTP_400_BAD_REQUEST
        case Unauthorized():
            return status.HTTP_401_UNAUTHORIZED
        case Forbidden() | BoothUnavailable():
            return status.HTTP_403_FORBIDDEN
        case PrintRequestNotFound():
            return status.HTTP_404_NOT_FOUND
        case PrintRequestAlreadyExists():
            return status.HTTP_409_CONFLICT
        case _:
            return status.HTTP_500_INTERNAL_SERVER_ERROR


def booth_error_handler(_request: Request, err: BoothError) -> JSONResponse:
    content: dict = {"error": err.message}
    match err:
        case PrintRequestAlreadyExists():
            content["printRequest"] = PrintRequestModel.from_domain(
                err.print_request
            ).model_dump(mode="json")
        case BoothUnavailable():
            content["reason"] = err.reason
        case Misconfigured():
            logger.error("server is misconfigured: %s", err.message)

    return JSONResponse(status_code=status_code(err), content=content)


def request_validation_error_handler(
    _request: Request, err: RequestValidationError
) -> JSONResponse:
    messages = [error.get("msg", "invalid") for error in err.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "; ".join(messages) or "Invalid request"},
    )


def algorand_request_error_handler(request: Request, err: Exception) -> JSONResponse:
    logger.warning(
        "Algorand request failed: %s %s : %r", request.method, request.url.path, err
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_SERVER_ERROR},
    )


def unexpected_error_handler(request: Request, err: Exception) -> JSONResponse:
    logger.error(
        "unexpected error: %s %s",
        request.method,
        request.url.path,
        exc_info=err,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_SERVER_ERROR},
    )


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(BoothError, booth_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(AlgorandRequestError, algorand_request_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
