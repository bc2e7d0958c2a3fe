"""PdfPage model — cached text for one page of a PdfDocument."""

from datetime import datetime

from pydantic import Field as SchemaField
from sqlalchemy import Text
from sqlmodel import Column, Field, SQLModel

from app.models.base import CamelModel, UTCDatetime, new_id, timestamp_field, utcnow


class PdfPage(SQLModel, table=True):
    __tablename__ = "pdf_pages"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    document_id: str = Field(foreign_key="pdf_documents.id", nullable=False, index=True)

    # 1-based; not unique per document
    page_number: int = Field(nullable=False)
    text_content: str | None = Field(default=None, sa_column=Column(Text))

    created_at: datetime = timestamp_field(default_factory=utcnow, nullable=False)


# ── Pydantic schemas ─────────────────────────────────────────

class PageCreate(CamelModel):
    document_id: str = SchemaField(min_length=1)
    page_number: int = SchemaField(ge=1, strict=True)
    text_content: str | None = None


class PageRead(CamelModel):
    id: str
    document_id: str
    page_number: int
    text_content: str | None
    created_at: UTCDatetime
