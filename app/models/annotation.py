"""PdfAnnotation model — a highlight, note or underline on a PdfDocument."""

from pydantic import Field as SchemaField
from sqlalchemy import Text
from sqlmodel import Column, Field, SQLModel

from app.models.base import CamelModel, PatchModel, TimestampMixin, UTCDatetime, new_id


class PdfAnnotation(TimestampMixin, SQLModel, table=True):
    __tablename__ = "pdf_annotations"

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    document_id: str = Field(foreign_key="pdf_documents.id", nullable=False, index=True)
    page_id: str | None = Field(default=None, foreign_key="pdf_pages.id", nullable=True, index=True)

    # Author, kept on the row so it can be filtered without a join
    user_id: str = Field(nullable=False, index=True)

    annotation_type: str | None = Field(default=None)  # "highlight", "note", "underline"
    # Serialized selection geometry; opaque here
    selection_json: str | None = Field(default=None, sa_column=Column(Text))
    comment: str | None = Field(default=None, sa_column=Column(Text))
    color: str | None = Field(default=None)


# ── Pydantic schemas ─────────────────────────────────────────

class AnnotationCreate(CamelModel):
    document_id: str = SchemaField(min_length=1)
    page_id: str | None = None
    annotation_type: str | None = None
    selection_json: str | None = None
    comment: str | None = None
    color: str | None = None


class AnnotationUpdate(PatchModel):
    patchable = ("page_id", "annotation_type", "selection_json", "comment", "color")

    id: str = SchemaField(min_length=1)
    document_id: str = SchemaField(min_length=1)
    page_id: str | None = None
    annotation_type: str | None = None
    selection_json: str | None = None
    comment: str | None = None
    color: str | None = None


class AnnotationDelete(CamelModel):
    id: str = SchemaField(min_length=1)
    document_id: str = SchemaField(min_length=1)


class AnnotationRead(CamelModel):
    id: str
    document_id: str
    page_id: str | None
    user_id: str
    annotation_type: str | None
    selection_json: str | None
    comment: str | None
    color: str | None
    created_at: UTCDatetime
    updated_at: UTCDatetime
