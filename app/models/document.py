"""PdfDocument model — metadata for a PDF opened by a user.

The binary itself lives in external storage; ``source_url`` holds the URL
or storage key.
"""

from datetime import datetime

from pydantic import Field as SchemaField
from sqlmodel import Field, SQLModel

from app.models.base import (
    CamelModel,
    PatchModel,
    TimestampMixin,
    UTCDatetime,
    new_id,
    timestamp_field,
)


class PdfDocument(TimestampMixin, SQLModel, table=True):
    __tablename__ = "pdf_documents"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    user_id: str = Field(nullable=False, index=True)

    title: str | None = Field(default=None)
    source_type: str | None = Field(default=None)  # "upload", "url"
    source_url: str | None = Field(default=None)
    page_count: int | None = Field(default=None)
    last_opened_at: datetime | None = timestamp_field(default=None, nullable=True)


# ── Pydantic schemas ─────────────────────────────────────────

class _DocumentFields(CamelModel):
    title: str | None = None
    source_type: str | None = None
    source_url: str | None = None
    page_count: int | None = SchemaField(default=None, ge=0)
    last_opened_at: UTCDatetime | None = None


class DocumentCreate(_DocumentFields):
    pass


class DocumentUpdate(_DocumentFields, PatchModel):
    patchable = ("title", "source_type", "source_url", "page_count", "last_opened_at")

    id: str = SchemaField(min_length=1)


class DocumentRead(CamelModel):
    id: str
    user_id: str
    title: str | None
    source_type: str | None
    source_url: str | None
    page_count: int | None
    last_opened_at: UTCDatetime | None
    created_at: UTCDatetime
    updated_at: UTCDatetime


class DocumentRef(CamelModel):
    """Body for actions that only name a document."""

    document_id: str = SchemaField(min_length=1)
