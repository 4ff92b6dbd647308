"""
Public booth endpoints: booth status, free mints, and health
"""
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from mintbooth.algorand.model import Address
from mintbooth.booth.api.dependencies import BoothApp
from mintbooth.booth.api.schemas import (
    BoothStatusModel,
    FreeMintGroupModel,
    FreeMintPoolTxnBody,
    FreeMintStatusModel,
)
from mintbooth.core.health_check import (
    HealthCheckStatus,
    overall_status,
    run_health_checks,
)

router = APIRouter(tags=["booth"])


@router.get("/booth-status")
def booth_status(booth_app: BoothApp) -> BoothStatusModel:
    return BoothStatusModel.from_domain(booth_app.get_booth_status())


@router.get("/free-mint-status/{wallet_address}")
def free_mint_status(wallet_address: str, booth_app: BoothApp) -> FreeMintStatusModel:
    return FreeMintStatusModel(
        status=booth_app.get_free_mint_status(Address(wallet_address))
    )


@router.post("/free-mint-pool-txn")
def free_mint_pool_txn(
    body: FreeMintPoolTxnBody, booth_app: BoothApp
) -> FreeMintGroupModel:
    """
    Returns the user's mint transaction grouped with the sponsor payment that funds it.

    The user must sign the mint transaction, and then submit the whole group.
    """
    return FreeMintGroupModel(group=booth_app.build_sponsored_mint_group(body.txn))


@router.get("/health")
def health(booth_app: BoothApp) -> JSONResponse:
    """
    Returns 503 if any health check is RED
    """
    results = run_health_checks(booth_app.health_checks)
    status = overall_status(results)
    return JSONResponse(
        status_code=503 if status == HealthCheckStatus.RED else 200,
        content={
            "status": "ok" if status == HealthCheckStatus.GREEN else "degraded",
            "checks": {result.name: result.to_dict() for result in results},
        },
    )
