"""Shared base fields for all models."""

import uuid
from datetime import datetime, timezone
from typing import Annotated, ClassVar

from pydantic import AfterValidator, BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


def as_utc(value: datetime | None) -> datetime | None:
    """Return an aware UTC datetime; naive values are taken to be UTC.

    SQLite hands timestamps back without tzinfo, PostgreSQL with it.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UTCDatetime = Annotated[datetime, AfterValidator(as_utc)]


def timestamp_field(**kwargs):
    """Field stored as TIMESTAMP WITH TIME ZONE."""
    return Field(sa_type=DateTime(timezone=True), **kwargs)


class TimestampMixin(SQLModel):
    """Created / updated timestamps injected into every table."""

    created_at: datetime = timestamp_field(default_factory=utcnow, nullable=False)
    updated_at: datetime = timestamp_field(default_factory=utcnow, nullable=False)


# ── Wire schemas ─────────────────────────────────────────────

class CamelModel(BaseModel):
    """Request / response schema with camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PatchModel(CamelModel):
    """Partial-update body.

    A field is part of the patch only if the client sent it, which
    ``model_fields_set`` records; an explicit ``null`` counts as sent.
    Subclasses name their patchable fields in ``patchable``.
    """

    patchable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def require_one_field(self):
        if not self.patch_fields():
            raise ValueError("At least one field must be provided to update.")
        return self

    def patch_fields(self) -> dict:
        return self.model_dump(include=set(self.patchable), exclude_unset=True)
