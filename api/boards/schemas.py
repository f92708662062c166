"""
Board request/response schemas and payload validation.

Request bodies are validated by `validate_create` / `validate_update`, which
return a `ValidationResult` instead of raising, so the service decides how a
bad payload is reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .properties import Background, FilterType, Icon


class _BoardFields(BaseModel):
    # Unknown keys (including "owner") are dropped, not rejected.
    model_config = ConfigDict(extra="ignore", use_enum_values=True)

    background: Background | None = None
    icon: Icon | None = None
    filter: FilterType | None = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        # Only runs for keys that were sent; omitted keys keep their default.
        if value is None:
            raise ValueError("must not be null")
        return value


class BoardCreate(_BoardFields):
    title_board: str = Field(..., alias="titleBoard", min_length=1)


class BoardUpdate(_BoardFields):
    title_board: str | None = Field(default=None, alias="titleBoard", min_length=1)

    def changes(self) -> dict[str, Any]:
        """
        Only the fields present in the request body, keyed by attribute name.
        """
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name in self.model_fields_set
        }


class BoardResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    owner: int
    title_board: str
    background: str | None = None
    icon: str | None = None
    filter: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "BoardResponse":
        return cls(
            id=row["id"],
            owner=int(row["owner_id"]),
            title_board=str(row["title_board"]),
            background=row.get("background"),
            icon=row.get("icon"),
            filter=row.get("filter_type"),
            created_at=row.get("created_at"),
            updated_at=row.get("updated_at"),
        )


@dataclass(frozen=True)
class Violation:
    field: str
    message: str

    def __str__(self) -> str:
        return f'"{self.field}" {self.message}'


@dataclass(frozen=True)
class ValidationResult:
    payload: BoardCreate | BoardUpdate | None = None
    violations: tuple[Violation, ...] = ()

    @property
    def ok(self) -> bool:
        return self.payload is not None and not self.violations

    def describe(self) -> str:
        return "; ".join(str(v) for v in self.violations)


def _violations(exc: ValidationError) -> tuple[Violation, ...]:
    found = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        message = str(err.get("msg") or "is invalid")
        # "Value error, must not be null" -> "must not be null"
        message = message.removeprefix("Value error, ")
        found.append(Violation(field=loc or "body", message=message))
    return tuple(found)


def _validate(model: type[BoardCreate] | type[BoardUpdate], raw: Any) -> ValidationResult:
    if not isinstance(raw, dict):
        return ValidationResult(violations=(Violation(field="body", message="must be an object"),))
    try:
        return ValidationResult(payload=model.model_validate(raw))
    except ValidationError as exc:
        return ValidationResult(violations=_violations(exc))


def validate_create(raw: Any) -> ValidationResult:
    return _validate(BoardCreate, raw)


def validate_update(raw: Any) -> ValidationResult:
    return _validate(BoardUpdate, raw)
