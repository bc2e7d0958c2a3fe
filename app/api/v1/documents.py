"""Document actions — every query scoped to the calling user."""

import logging

from fastapi import APIRouter
from sqlmodel import select

from app.api.deps import Context, require_user
from app.api.ownership import require_owned_document
from app.models.base import CamelModel, utcnow
from app.models.document import DocumentCreate, DocumentRead, DocumentUpdate, PdfDocument
from app.models.envelope import ActionResult, ItemList

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/actions", tags=["documents"])


class DocumentPayload(CamelModel):
    document: DocumentRead


def _to_result(document: PdfDocument) -> ActionResult[DocumentPayload]:
    return ActionResult[DocumentPayload](
        data=DocumentPayload(document=DocumentRead.model_validate(document)),
    )


@router.post("/createDocument", response_model=ActionResult[DocumentPayload])
async def create_document(
    ctx: Context,
    body: DocumentCreate | None = None,
) -> ActionResult[DocumentPayload]:
    """Create a document record; every metadata field may be filled in later."""
    user = require_user(ctx)
    body = body or DocumentCreate()
    now = utcnow()

    document = PdfDocument(
        user_id=user.id,
        title=body.title,
        source_type=body.source_type,
        source_url=body.source_url,
        page_count=body.page_count,
        last_opened_at=body.last_opened_at,
        created_at=now,
        updated_at=now,
    )
    ctx.session.add(document)
    await ctx.session.commit()
    await ctx.session.refresh(document)

    logger.info("Created document %s for user %s", document.id, user.id)
    return _to_result(document)


@router.post("/updateDocument", response_model=ActionResult[DocumentPayload])
async def update_document(
    body: DocumentUpdate,
    ctx: Context,
) -> ActionResult[DocumentPayload]:
    user = require_user(ctx)
    document = await require_owned_document(ctx.session, body.id, user.id)

    for field, value in body.patch_fields().items():
        setattr(document, field, value)

    document.updated_at = utcnow()
    ctx.session.add(document)
    await ctx.session.commit()
    await ctx.session.refresh(document)

    logger.info("Updated document %s", document.id)
    return _to_result(document)


@router.post("/listDocuments", response_model=ActionResult[ItemList[DocumentRead]])
async def list_documents(ctx: Context) -> ActionResult[ItemList[DocumentRead]]:
    user = require_user(ctx)

    stmt = select(PdfDocument).where(PdfDocument.user_id == user.id)
    result = await ctx.session.execute(stmt)
    items = [DocumentRead.model_validate(d) for d in result.scalars().all()]

    return ActionResult[ItemList[DocumentRead]](
        data=ItemList[DocumentRead](items=items, total=len(items)),
    )
