"""Shared fixtures: in-memory board store, known users, signed tokens."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from auth import repository as auth_repository
from auth import security
from auth.service import Identity
from boards import repository as boards_repository

TEST_SECRET = "test-secret-with-enough-bytes-for-hs256"

USERS = {
    1: {"id": 1, "email": "u1@example.com", "is_active": True},
    2: {"id": 2, "email": "u2@example.com", "is_active": True},
    3: {"id": 3, "email": "inactive@example.com", "is_active": False},
}


class FakeBoardStore:
    """Mimics `boards.repository` with the same owner-scoped filters."""

    def __init__(self) -> None:
        self.rows: dict[UUID, dict] = {}

    async def list_boards(self, *, owner_id: int) -> list[dict]:
        rows = [dict(r) for r in self.rows.values() if r["owner_id"] == owner_id]
        return sorted(rows, key=lambda r: r["created_at"])

    async def insert_board(
        self,
        *,
        owner_id: int,
        title_board: str,
        background: str | None = None,
        icon: str | None = None,
        filter_type: str | None = None,
    ) -> dict:
        now = datetime.now(timezone.utc)
        row = {
            "id": uuid4(),
            "owner_id": owner_id,
            "title_board": title_board,
            "background": background,
            "icon": icon,
            "filter_type": filter_type,
            "created_at": now,
            "updated_at": now,
        }
        self.rows[row["id"]] = row
        return dict(row)

    def _owned(self, board_id: UUID, owner_id: int) -> dict | None:
        row = self.rows.get(board_id)
        if row is None or row["owner_id"] != owner_id:
            return None
        return row

    async def get_board(self, board_id: UUID, *, owner_id: int) -> dict | None:
        row = self._owned(board_id, owner_id)
        return dict(row) if row is not None else None

    async def update_board(self, board_id: UUID, *, owner_id: int, changes: dict) -> dict | None:
        row = self._owned(board_id, owner_id)
        if row is None:
            return None
        for name, value in changes.items():
            row[boards_repository.UPDATABLE_COLUMNS[name]] = value
        row["updated_at"] = datetime.now(timezone.utc)
        return dict(row)

    async def delete_board(self, board_id: UUID, *, owner_id: int) -> dict | None:
        row = self._owned(board_id, owner_id)
        if row is None:
            return None
        return self.rows.pop(board_id)


@pytest.fixture(autouse=True)
def jwt_env(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    monkeypatch.setenv("JWT_ALG", "HS256")


@pytest.fixture
def store(monkeypatch) -> FakeBoardStore:
    fake = FakeBoardStore()
    for name in ("list_boards", "insert_board", "get_board", "update_board", "delete_board"):
        monkeypatch.setattr(boards_repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def users(monkeypatch) -> dict:
    async def get_user_by_id(user_id: int) -> dict | None:
        return USERS.get(user_id)

    monkeypatch.setattr(auth_repository, "get_user_by_id", get_user_by_id)
    return USERS


@pytest.fixture
def client(store, users) -> TestClient:
    from main import app

    # No context manager: the lifespan (DB pool) is not started.
    return TestClient(app)


@pytest.fixture
def identity() -> Identity:
    return Identity(id=1, email="u1@example.com")


def auth_header(user_id: int) -> dict[str, str]:
    token = security.build_access_token(user_id=user_id, email=USERS.get(user_id, {}).get("email", "x@example.com"))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers():
    return auth_header
