"""Import all models so SQLModel.metadata picks them up."""

from app.models.annotation import (
    AnnotationCreate,
    AnnotationDelete,
    AnnotationRead,
    AnnotationUpdate,
    PdfAnnotation,
)
from app.models.document import (
    DocumentCreate,
    DocumentRead,
    DocumentRef,
    DocumentUpdate,
    PdfDocument,
)
from app.models.page import PageCreate, PageRead, PdfPage

__all__ = [
    "AnnotationCreate",
    "AnnotationDelete",
    "AnnotationRead",
    "AnnotationUpdate",
    "DocumentCreate",
    "DocumentRead",
    "DocumentRef",
    "DocumentUpdate",
    "PageCreate",
    "PageRead",
    "PdfAnnotation",
    "PdfDocument",
    "PdfPage",
]
