"""Uniform ``{success, data}`` response shapes shared by every action."""

from typing import Generic, TypeVar

from app.models.base import CamelModel

T = TypeVar("T")


class ActionResult(CamelModel, Generic[T]):
    success: bool = True
    data: T


class ActionAck(CamelModel):
    """Returned by actions that have nothing to send back."""

    success: bool = True


class ItemList(CamelModel, Generic[T]):
    items: list[T]
    total: int
