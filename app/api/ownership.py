"""Ownership checks rooted at the document.

Lookups filter on id AND owner in one query, so a document that exists but
belongs to someone else looks exactly like one that does not exist.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.core.errors import NotFound
from app.models.document import PdfDocument
from app.models.page import PdfPage


async def require_owned_document(
    session: AsyncSession,
    document_id: str,
    user_id: str,
) -> PdfDocument:
    stmt = select(PdfDocument).where(
        PdfDocument.id == document_id,
        PdfDocument.user_id == user_id,
    )
    result = await session.execute(stmt)
    document = result.scalar_one_or_none()
    if document is None:
        raise NotFound("PDF document not found.")
    return document


async def require_owned_page(
    session: AsyncSession,
    page_id: str,
    document_id: str,
    user_id: str,
) -> PdfPage:
    """Return the page only if it sits in a document the user owns."""
    await require_owned_document(session, document_id, user_id)

    stmt = select(PdfPage).where(
        PdfPage.id == page_id,
        PdfPage.document_id == document_id,
    )
    result = await session.execute(stmt)
    page = result.scalar_one_or_none()
    if page is None:
        raise NotFound("PDF page not found.")
    return page
