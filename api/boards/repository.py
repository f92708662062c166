"""
Board persistence (raw SQL).

Every statement filters on both `id` and `owner_id`, so a board owned by
someone else behaves exactly like a missing one.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID, uuid4

from core import db

BOARD_COLUMNS = "id, owner_id, title_board, background, icon, filter_type, created_at, updated_at"

# schema attribute -> column
UPDATABLE_COLUMNS = {
    "title_board": "title_board",
    "background": "background",
    "icon": "icon",
    "filter": "filter_type",
}


async def list_boards(*, owner_id: int) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {BOARD_COLUMNS}
        FROM boards
        WHERE owner_id = $1
        ORDER BY created_at ASC, id ASC
        """,
        owner_id,
    )


async def insert_board(
    *,
    owner_id: int,
    title_board: str,
    background: str | None = None,
    icon: str | None = None,
    filter_type: str | None = None,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO boards (id, owner_id, title_board, background, icon, filter_type)
        VALUES ($1, $2, $3, $4, $5, $6)
        RETURNING {BOARD_COLUMNS}
        """,
        uuid4(),
        owner_id,
        title_board,
        background,
        icon,
        filter_type,
    )
    if row is None:
        raise RuntimeError("Failed to insert board.")
    return row


async def get_board(board_id: UUID, *, owner_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {BOARD_COLUMNS}
        FROM boards
        WHERE id = $1
          AND owner_id = $2
        """,
        board_id,
        owner_id,
    )


async def update_board(board_id: UUID, *, owner_id: int, changes: dict[str, Any]) -> dict | None:
    """
    Apply only the given fields; columns not in `changes` keep their value.

    An empty `changes` still bumps `updated_at` and returns the row.
    """
    assignments = ["updated_at = now()"]
    args: list[Any] = [board_id, owner_id]
    for name, value in changes.items():
        column = UPDATABLE_COLUMNS.get(name)
        if column is None:
            raise ValueError(f"Board field '{name}' cannot be updated.")
        args.append(value)
        assignments.append(f"{column} = ${len(args)}")
    set_clause = ", ".join(assignments)

    return await db.fetch_one(
        f"""
        UPDATE boards
        SET {set_clause}
        WHERE id = $1
          AND owner_id = $2
        RETURNING {BOARD_COLUMNS}
        """,
        *args,
    )


async def delete_board(board_id: UUID, *, owner_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        DELETE FROM boards
        WHERE id = $1
          AND owner_id = $2
        RETURNING {BOARD_COLUMNS}
        """,
        board_id,
        owner_id,
    )
