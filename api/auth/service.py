"""
Identity verification: bearer token -> `Identity`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fastapi import HTTPException, status

from . import repository, security

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """The verified caller. Board ownership is keyed on `id`."""

    id: int
    email: str


def unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_identity_from_access_token(access_token: str) -> Identity:
    try:
        claims = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        logger.debug("token_rejected reason=%s", exc)
        raise unauthorized(str(exc)) from exc

    user_row = await repository.get_user_by_id(claims.user_id)
    if user_row is None:
        raise unauthorized("User not found.")
    if not bool(user_row.get("is_active", False)):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is inactive.",
        )
    return Identity(id=int(user_row["id"]), email=str(user_row["email"]))
