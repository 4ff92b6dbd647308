"""
Admin endpoints
"""
from fastapi import APIRouter, Response

from mintbooth.booth.api.dependencies import BoothApp, Admin
from mintbooth.booth.api.schemas import (
    AdminLoginBody,
    SettingsModel,
    TokenModel,
    UpdateSettingsBody,
)
from mintbooth.booth.auth import TOKEN_TTL
from mintbooth.booth.commands.data.settings import parse_settings_update

ADMIN_TOKEN_COOKIE = "admin_token"

router = APIRouter(tags=["admin"])


@router.post("/admin-login")
def admin_login(
    body: AdminLoginBody, response: Response, booth_app: BoothApp
) -> TokenModel:
    """
    The token is returned in the response body for bearer authentication, and is also set as an HTTP only cookie.
    """
    token = booth_app.admin_auth.login(body.username, body.password)
    response.set_cookie(
        key=ADMIN_TOKEN_COOKIE,
        value=token,
        max_age=int(TOKEN_TTL.total_seconds()),
        httponly=True,
        secure=booth_app.config.server.production,
        samesite="lax",
    )
    return TokenModel(token=token)


@router.get("/admin/settings")
def get_settings(booth_app: BoothApp, _admin: Admin) -> SettingsModel:
    return SettingsModel.from_domain(booth_app.get_booth_settings())


@router.patch("/admin/settings")
def update_settings(
    body: UpdateSettingsBody, booth_app: BoothApp, _admin: Admin
) -> SettingsModel:
    update = parse_settings_update(body.model_dump(exclude_unset=True))
    return SettingsModel.from_domain(booth_app.update_settings(update))
