"""create pdf_documents, pdf_pages and pdf_annotations

Revision ID: 3f1a9c2e7b40
Revises: 
Create Date: 2026-10-18 09:12:44.210381

"""
from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = '3f1a9c2e7b40'
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "pdf_documents",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=True),
        sa.Column("source_type", sa.String(), nullable=True),
        sa.Column("source_url", sa.String(), nullable=True),
        sa.Column("page_count", sa.Integer(), nullable=True),
        sa.Column("last_opened_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_pdf_documents_user_id", "pdf_documents", ["user_id"])

    op.create_table(
        "pdf_pages",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("document_id", sa.String(), sa.ForeignKey("pdf_documents.id"), nullable=False),
        sa.Column("page_number", sa.Integer(), nullable=False),
        sa.Column("text_content", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_pdf_pages_document_id", "pdf_pages", ["document_id"])

    op.create_table(
        "pdf_annotations",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("document_id", sa.String(), sa.ForeignKey("pdf_documents.id"), nullable=False),
        sa.Column("page_id", sa.String(), sa.ForeignKey("pdf_pages.id"), nullable=True),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("annotation_type", sa.String(), nullable=True),
        sa.Column("selection_json", sa.Text(), nullable=True),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("color", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_pdf_annotations_document_id", "pdf_annotations", ["document_id"])
    op.create_index("ix_pdf_annotations_page_id", "pdf_annotations", ["page_id"])
    op.create_index("ix_pdf_annotations_user_id", "pdf_annotations", ["user_id"])


def downgrade() -> None:
    op.drop_table("pdf_annotations")
    op.drop_table("pdf_pages")
    op.drop_table("pdf_documents")
