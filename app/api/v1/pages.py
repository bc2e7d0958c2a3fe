"""Page actions — access follows ownership of the parent document."""

import logging

from fastapi import APIRouter
from sqlmodel import select

from app.api.deps import Context, require_user
from app.api.ownership import require_owned_document
from app.models.base import CamelModel, utcnow
from app.models.document import DocumentRef
from app.models.envelope import ActionResult, ItemList
from app.models.page import PageCreate, PageRead, PdfPage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/actions", tags=["pages"])


class PagePayload(CamelModel):
    page: PageRead


@router.post("/createPage", response_model=ActionResult[PagePayload])
async def create_page(
    body: PageCreate,
    ctx: Context,
) -> ActionResult[PagePayload]:
    """Store a page's extracted text.

    Page numbers are not checked for uniqueness within the document.
    """
    user = require_user(ctx)
    await require_owned_document(ctx.session, body.document_id, user.id)

    page = PdfPage(
        document_id=body.document_id,
        page_number=body.page_number,
        text_content=body.text_content,
        created_at=utcnow(),
    )
    ctx.session.add(page)
    await ctx.session.commit()
    await ctx.session.refresh(page)

    logger.info("Created page %s (#%d) in document %s", page.id, page.page_number, page.document_id)
    return ActionResult[PagePayload](data=PagePayload(page=PageRead.model_validate(page)))


@router.post("/listPages", response_model=ActionResult[ItemList[PageRead]])
async def list_pages(
    body: DocumentRef,
    ctx: Context,
) -> ActionResult[ItemList[PageRead]]:
    user = require_user(ctx)
    await require_owned_document(ctx.session, body.document_id, user.id)

    stmt = select(PdfPage).where(PdfPage.document_id == body.document_id)
    result = await ctx.session.execute(stmt)
    items = [PageRead.model_validate(p) for p in result.scalars().all()]

    return ActionResult[ItemList[PageRead]](data=ItemList[PageRead](items=items, total=len(items)))
