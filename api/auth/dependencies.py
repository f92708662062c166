"""
Auth dependencies for protected FastAPI routes.

Routes declare `Depends(get_current_identity)` and receive the verified
`Identity` as a plain argument.
"""

from __future__ import annotations

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from . import service

# auto_error=False so a missing header is a 401 with our own message, not 403.
bearer_scheme = HTTPBearer(auto_error=False)


async def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    if credentials is None:
        raise service.unauthorized("Authorization must be: Bearer <token>.")
    token = (credentials.credentials or "").strip()
    if not token:
        raise service.unauthorized("Authorization must be: Bearer <token>.")
    return token


async def get_current_identity(access_token: str = Depends(get_bearer_token)) -> service.Identity:
    return await service.get_identity_from_access_token(access_token)
