"""
FastAPI dependencies
"""
from typing import Annotated

from fastapi import Depends, Header, Request

from mintbooth.booth.app import App
from mintbooth.booth.auth import AdminPrincipal


def get_booth_app(request: Request) -> App:
    return request.app.state.booth_app


BoothApp = Annotated[App, Depends(get_booth_app)]


def require_admin(
    booth_app: BoothApp,
    authorization: Annotated[str | None, Header()] = None,
) -> AdminPrincipal:
    """
    :exception Unauthorized:
    :exception Forbidden:
    """
    return booth_app.admin_auth.authenticate(authorization)


Admin = Annotated[AdminPrincipal, Depends(require_admin)]
