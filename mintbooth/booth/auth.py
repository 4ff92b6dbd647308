"""
Admin authorization

Admins log in with the configured credentials and receive a signed JWT asserting the admin role.
The token is presented as a bearer token on admin requests.
"""
import hmac
from dataclasses import dataclass, field
from datetime import datetime, timedelta, UTC
from typing import Any

import jwt

from mintbooth.booth.errors import (
    ValidationError,
    Unauthorized,
    Forbidden,
    Misconfigured,
)
from mintbooth.core.logging import get_logger

ADMIN_ROLE = "admin"
TOKEN_TTL = timedelta(days=7)
JWT_ALGORITHM = "HS256"
BEARER_PREFIX = "Bearer "


@dataclass(slots=True, frozen=True)
class AdminCredentials:
    username: str = ""
    password: str = field(default="", repr=False)
    jwt_secret: str = field(default="", repr=False)


@dataclass(slots=True, frozen=True)
class AdminPrincipal:
    """
    Verified admin token claims
    """

    role: str
    issued_at: datetime
    expires_at: datetime


class AdminAuth:
    """
    Issues and verifies admin tokens
    """

    def __init__(self, credentials: AdminCredentials):
        self._credentials = credentials
        self._logger = get_logger(self)

    def login(self, username: Any, password: Any) -> str:
        """
        :return: signed admin token, which expires after 7 days
        :exception ValidationError: if username or password is missing
        :exception Misconfigured: if admin credentials or the JWT secret are not configured
        :exception Unauthorized: if the credentials do not match
        """
        if not username or not password:
            raise ValidationError("Username and password are required")
        if not self._credentials.username or not self._credentials.password:
            raise Misconfigured("Admin credentials not configured")

        if not (
            _matches(str(username), self._credentials.username)
            and _matches(str(password), self._credentials.password)
        ):
            self._logger.info("admin login failed: username=%s", username)
            raise Unauthorized("Invalid credentials")

        if not self._credentials.jwt_secret:
            raise Misconfigured("JWT_SECRET not configured")

        issued_at = datetime.now(UTC)
        token = jwt.encode(
            {
                "role": ADMIN_ROLE,
                "iat": issued_at,
                "exp": issued_at + TOKEN_TTL,
            },
            self._credentials.jwt_secret,
            algorithm=JWT_ALGORITHM,
        )
        self._logger.info("admin logged in: username=%s", username)
        return token

    def authenticate(self, authorization: str | None) -> AdminPrincipal:
        """
        :param authorization: Authorization HTTP header value, i.e., 'Bearer <token>'
        :exception Unauthorized: if the token is missing, malformed, expired, lacks a required claim, or the signature is invalid
        :exception Forbidden: if the token does not grant the admin role
        :exception Misconfigured: if the JWT secret is not configured
        """
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            raise Unauthorized("Unauthorized: No token provided")
        if not self._credentials.jwt_secret:
            raise Misconfigured("JWT_SECRET not configured")

        token = authorization[len(BEARER_PREFIX) :]
        try:
            claims = jwt.decode(
                token,
                self._credentials.jwt_secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["exp", "iat", "role"]},
            )
        except jwt.InvalidTokenError as err:
            raise Unauthorized("Unauthorized: Invalid token") from err

        if claims.get("role") != ADMIN_ROLE:
            raise Forbidden

        return AdminPrincipal(
            role=claims["role"],
            issued_at=_claim_time(claims, "iat"),
            expires_at=_claim_time(claims, "exp"),
        )


def _matches(value: str, expected: str) -> bool:
    return hmac.compare_digest(value.encode(), expected.encode())


def _claim_time(claims: dict[str, Any], name: str) -> datetime:
    return datetime.fromtimestamp(claims[name], UTC)
