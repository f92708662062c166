"""
Board business logic.

Each operation receives the verified `Identity` explicitly, runs a single
owner-scoped repository call, and reports failures as `BoardsError`
subclasses:

- bad payload -> InvalidData (400)
- missing board, someone else's board, malformed id -> BoardNotFound (404)
- store failure on create/update -> InvalidData (400), logged as a store error
- store failure on list/get/delete -> ServerError (500)
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from auth.service import Identity

from . import repository, schemas
from .errors import BoardNotFound, InvalidData, ServerError

logger = logging.getLogger(__name__)

NO_BOARDS_MESSAGE = "You haven't got any boards"


def parse_board_id(raw: str) -> UUID | None:
    try:
        return UUID(str(raw).strip())
    except ValueError:
        return None


def _require_board_id(raw: str, *, identity: Identity) -> UUID:
    board_id = parse_board_id(raw)
    if board_id is None:
        logger.debug("board_id_malformed owner=%s raw=%r", identity.id, raw)
        raise BoardNotFound()
    return board_id


def _require_valid(result: schemas.ValidationResult) -> Any:
    if not result.ok:
        raise InvalidData(error=result.describe())
    return result.payload


async def list_boards(identity: Identity) -> list[schemas.BoardResponse]:
    try:
        rows = await repository.list_boards(owner_id=identity.id)
    except Exception as exc:
        logger.exception("board_list_failed owner=%s", identity.id)
        raise ServerError(error=str(exc)) from exc

    if not rows:
        raise BoardNotFound(NO_BOARDS_MESSAGE)
    return [schemas.BoardResponse.from_row(row) for row in rows]


async def create_board(identity: Identity, raw_payload: Any) -> schemas.BoardResponse:
    payload: schemas.BoardCreate = _require_valid(schemas.validate_create(raw_payload))

    try:
        row = await repository.insert_board(
            owner_id=identity.id,
            title_board=payload.title_board,
            background=payload.background,
            icon=payload.icon,
            filter_type=payload.filter,
        )
    except Exception as exc:
        logger.exception("board_create_store_failed owner=%s", identity.id)
        raise InvalidData(error=str(exc)) from exc

    board = schemas.BoardResponse.from_row(row)
    logger.info("board_created board_id=%s owner=%s", board.id, identity.id)
    return board


async def get_board(identity: Identity, raw_board_id: str) -> schemas.BoardResponse:
    board_id = _require_board_id(raw_board_id, identity=identity)

    try:
        row = await repository.get_board(board_id, owner_id=identity.id)
    except Exception as exc:
        logger.exception("board_get_failed board_id=%s owner=%s", board_id, identity.id)
        raise ServerError(error=str(exc)) from exc

    if row is None:
        raise BoardNotFound()
    return schemas.BoardResponse.from_row(row)


async def update_board(identity: Identity, raw_board_id: str, raw_payload: Any) -> schemas.BoardResponse:
    # No body at all means "change nothing"; every update field is optional.
    if raw_payload is None:
        raw_payload = {}
    payload: schemas.BoardUpdate = _require_valid(schemas.validate_update(raw_payload))
    board_id = _require_board_id(raw_board_id, identity=identity)
    changes = payload.changes()

    try:
        row = await repository.update_board(board_id, owner_id=identity.id, changes=changes)
    except Exception as exc:
        logger.exception("board_update_store_failed board_id=%s owner=%s", board_id, identity.id)
        raise InvalidData(error=str(exc)) from exc

    if row is None:
        raise BoardNotFound()
    logger.info(
        "board_updated board_id=%s owner=%s fields=%s",
        board_id,
        identity.id,
        ",".join(sorted(changes)) or "-",
    )
    return schemas.BoardResponse.from_row(row)


async def delete_board(identity: Identity, raw_board_id: str) -> schemas.BoardResponse:
    board_id = _require_board_id(raw_board_id, identity=identity)

    try:
        row = await repository.delete_board(board_id, owner_id=identity.id)
    except Exception as exc:
        logger.exception("board_delete_failed board_id=%s owner=%s", board_id, identity.id)
        raise ServerError(error=str(exc)) from exc

    if row is None:
        raise BoardNotFound()
    logger.info("board_deleted board_id=%s owner=%s", board_id, identity.id)
    return schemas.BoardResponse.from_row(row)
