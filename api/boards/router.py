"""
Boards API endpoints.

All routes require a bearer token; every lookup is scoped to the caller.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from auth import dependencies as auth_dependencies
from auth.service import Identity

from . import properties, schemas, service

router = APIRouter(prefix="/boards")


@router.get("", response_model=list[schemas.BoardResponse])
async def list_boards(
    identity: Identity = Depends(auth_dependencies.get_current_identity),
) -> list[schemas.BoardResponse]:
    return await service.list_boards(identity)


@router.post("", response_model=schemas.BoardResponse, status_code=status.HTTP_201_CREATED)
async def create_board(
    payload: Any = Body(default=None),
    identity: Identity = Depends(auth_dependencies.get_current_identity),
) -> schemas.BoardResponse:
    return await service.create_board(identity, payload)


@router.get("/properties")
async def board_properties(
    _: Identity = Depends(auth_dependencies.get_current_identity),
) -> dict:
    """
    Allowed values for `background`, `icon` and `filter`.
    """
    return properties.catalog()


@router.get("/{board_id}", response_model=schemas.BoardResponse)
async def get_board(
    board_id: str,
    identity: Identity = Depends(auth_dependencies.get_current_identity),
) -> schemas.BoardResponse:
    return await service.get_board(identity, board_id)


@router.put("/{board_id}", response_model=schemas.BoardResponse)
async def update_board(
    board_id: str,
    payload: Any = Body(default=None),
    identity: Identity = Depends(auth_dependencies.get_current_identity),
) -> schemas.BoardResponse:
    """
    Partial update: only the fields present in the body change.
    """
    return await service.update_board(identity, board_id, payload)


@router.delete("/{board_id}", response_model=schemas.BoardResponse)
async def delete_board(
    board_id: str,
    identity: Identity = Depends(auth_dependencies.get_current_identity),
) -> schemas.BoardResponse:
    return await service.delete_board(identity, board_id)
