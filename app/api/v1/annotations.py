"""Annotation actions — scoped to the owner of the parent document.

Listing is not filtered by author: the document owner sees every
annotation on the document.
"""

import logging

from fastapi import APIRouter
from sqlalchemy import delete
from sqlmodel import select

from app.api.deps import Context, require_user
from app.api.ownership import require_owned_document, require_owned_page
from app.core.errors import NotFound
from app.models.annotation import (
    AnnotationCreate,
    AnnotationDelete,
    AnnotationRead,
    AnnotationUpdate,
    PdfAnnotation,
)
from app.models.base import CamelModel, utcnow
from app.models.document import DocumentRef
from app.models.envelope import ActionAck, ActionResult, ItemList

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/actions", tags=["annotations"])


class AnnotationPayload(CamelModel):
    annotation: AnnotationRead


def _to_result(annotation: PdfAnnotation) -> ActionResult[AnnotationPayload]:
    return ActionResult[AnnotationPayload](
        data=AnnotationPayload(annotation=AnnotationRead.model_validate(annotation)),
    )


@router.post("/createAnnotation", response_model=ActionResult[AnnotationPayload])
async def create_annotation(
    body: AnnotationCreate,
    ctx: Context,
) -> ActionResult[AnnotationPayload]:
    user = require_user(ctx)
    await require_owned_document(ctx.session, body.document_id, user.id)

    if body.page_id:
        await require_owned_page(ctx.session, body.page_id, body.document_id, user.id)

    now = utcnow()
    annotation = PdfAnnotation(
        document_id=body.document_id,
        page_id=body.page_id or None,
        user_id=user.id,
        annotation_type=body.annotation_type,
        selection_json=body.selection_json,
        comment=body.comment,
        color=body.color,
        created_at=now,
        updated_at=now,
    )
    ctx.session.add(annotation)
    await ctx.session.commit()
    await ctx.session.refresh(annotation)

    logger.info("Created annotation %s in document %s", annotation.id, annotation.document_id)
    return _to_result(annotation)


@router.post("/updateAnnotation", response_model=ActionResult[AnnotationPayload])
async def update_annotation(
    body: AnnotationUpdate,
    ctx: Context,
) -> ActionResult[AnnotationPayload]:
    """Apply a partial update.

    Sending ``pageId: null`` detaches the annotation from its page.
    """
    user = require_user(ctx)
    await require_owned_document(ctx.session, body.document_id, user.id)

    update_data = body.patch_fields()
    if update_data.get("page_id") is not None:
        await require_owned_page(ctx.session, update_data["page_id"], body.document_id, user.id)

    stmt = select(PdfAnnotation).where(
        PdfAnnotation.id == body.id,
        PdfAnnotation.document_id == body.document_id,
    )
    result = await ctx.session.execute(stmt)
    annotation = result.scalar_one_or_none()
    if annotation is None:
        raise NotFound("Annotation not found.")

    for field, value in update_data.items():
        setattr(annotation, field, value)

    annotation.updated_at = utcnow()
    ctx.session.add(annotation)
    await ctx.session.commit()
    await ctx.session.refresh(annotation)

    logger.info("Updated annotation %s", annotation.id)
    return _to_result(annotation)


@router.post("/deleteAnnotation", response_model=ActionAck)
async def delete_annotation(
    body: AnnotationDelete,
    ctx: Context,
) -> ActionAck:
    user = require_user(ctx)
    await require_owned_document(ctx.session, body.document_id, user.id)

    stmt = delete(PdfAnnotation).where(
        PdfAnnotation.id == body.id,
        PdfAnnotation.document_id == body.document_id,
    )
    result = await ctx.session.execute(stmt)
    await ctx.session.commit()

    if result.rowcount == 0:
        raise NotFound("Annotation not found.")

    logger.info("Deleted annotation %s from document %s", body.id, body.document_id)
    return ActionAck()


@router.post("/listAnnotations", response_model=ActionResult[ItemList[AnnotationRead]])
async def list_annotations(
    body: DocumentRef,
    ctx: Context,
) -> ActionResult[ItemList[AnnotationRead]]:
    user = require_user(ctx)
    await require_owned_document(ctx.session, body.document_id, user.id)

    stmt = select(PdfAnnotation).where(PdfAnnotation.document_id == body.document_id)
    result = await ctx.session.execute(stmt)
    items = [AnnotationRead.model_validate(a) for a in result.scalars().all()]

    return ActionResult[ItemList[AnnotationRead]](
        data=ItemList[AnnotationRead](items=items, total=len(items)),
    )
