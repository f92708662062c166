"""
Access-token verification.

Tokens are issued by the identity provider; this service only checks the
signature, expiry and claims. `build_access_token` mints a token with the same
claims for local tooling and tests.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

import jwt

from core import settings

DEFAULT_JWT_SECRET = "dev-change-this-secret"
REQUIRED_CLAIMS = ["sub", "exp", "type"]


class AuthSecurityError(RuntimeError):
    pass


@dataclass(frozen=True)
class AccessClaims:
    user_id: int
    email: str


def jwt_secret() -> str:
    # In production, set JWT_SECRET in environment.
    return settings.env_str("JWT_SECRET", DEFAULT_JWT_SECRET)


def jwt_algorithm() -> str:
    return settings.env_str("JWT_ALG", "HS256")


def access_token_expire_minutes() -> int:
    return settings.env_int("ACCESS_TOKEN_EXPIRE_MIN", 15)


def build_access_token(*, user_id: int, email: str, expires_in_s: int | None = None) -> str:
    issued_at = int(time.time())
    if expires_in_s is None:
        expires_in_s = access_token_expire_minutes() * 60
    return jwt.encode(
        {
            "sub": str(user_id),
            "email": email,
            "type": "access",
            "iat": issued_at,
            "exp": issued_at + expires_in_s,
        },
        jwt_secret(),
        algorithm=jwt_algorithm(),
    )


def decode_access_token(token: str) -> AccessClaims:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        payload = jwt.decode(
            raw,
            jwt_secret(),
            algorithms=[jwt_algorithm()],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as exc:
        raise AuthSecurityError("Access token has expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    if str(payload["type"]).strip().lower() != "access":
        raise AuthSecurityError("Token is not an access token.")

    subject = str(payload["sub"]).strip()
    # isdigit() alone accepts "²" and other digits int() rejects.
    if not (subject.isascii() and subject.isdigit()):
        raise AuthSecurityError("Invalid access token subject.")

    return AccessClaims(user_id=int(subject), email=str(payload.get("email") or ""))
