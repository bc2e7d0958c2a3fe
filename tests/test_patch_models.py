"""Partial-update schemas: which fields count as supplied."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from app.models.annotation import AnnotationUpdate
from app.models.document import DocumentUpdate


def test_only_sent_fields_are_patched():
    body = AnnotationUpdate.model_validate({"id": "a", "documentId": "d", "comment": "hi"})
    assert body.patch_fields() == {"comment": "hi"}


def test_explicit_null_is_patched():
    body = AnnotationUpdate.model_validate({"id": "a", "documentId": "d", "pageId": None})
    assert body.patch_fields() == {"page_id": None}


def test_identifiers_are_not_patch_fields():
    with pytest.raises(ValidationError, match="At least one field"):
        DocumentUpdate.model_validate({"id": "doc"})


def test_offset_timestamps_become_utc():
    body = DocumentUpdate.model_validate({"id": "doc", "lastOpenedAt": "2026-03-01T12:00:00+02:00"})
    assert body.patch_fields() == {"last_opened_at": datetime(2026, 3, 1, 10, 0, 0, tzinfo=timezone.utc)}


def test_naive_timestamps_are_read_as_utc():
    body = DocumentUpdate.model_validate({"id": "doc", "lastOpenedAt": "2026-03-01T12:00:00"})
    value = body.patch_fields()["last_opened_at"]
    assert value == datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert value.tzinfo is not None
