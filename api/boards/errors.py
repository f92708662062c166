"""
Board failures as seen by API clients.

Each error knows its HTTP status; `main.py` renders them as
`{"message": ..., "error": ...}`.
"""

from __future__ import annotations


class BoardsError(RuntimeError):
    status_code = 500
    default_message = "Server error"

    def __init__(self, message: str | None = None, *, error: str | None = None) -> None:
        self.message = message or self.default_message
        self.error = error
        super().__init__(self.message)

    def to_body(self) -> dict[str, str]:
        body = {"message": self.message}
        if self.error:
            body["error"] = self.error
        return body


class InvalidData(BoardsError):
    status_code = 400
    default_message = "Invalid data"


class BoardNotFound(BoardsError):
    status_code = 404
    default_message = "Board not found"


class ServerError(BoardsError):
    status_code = 500
    default_message = "Server error"
