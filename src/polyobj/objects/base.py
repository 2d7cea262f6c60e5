from __future__ import annotations

import copy
import io
from typing import Generic, Optional, Protocol, Type, TypeVar

from polyobj.objects.registry import register_variant

T = TypeVar("T")
V = TypeVar("V", bound="Object")


class TextSink(Protocol):
    def write(self, s: str) -> int:
        ...


@register_variant(kind="object")
class Object(Generic[T]):
    """
    Value holder with an identity and a payload.

    The id and payload are fixed at construction; the payload is copied in
    and only copies are handed out. Variants override
    ``render`` to change the textual form and must override ``duplicate``
    so a copy keeps the variant's runtime type.

    Example:
        >>> obj = Object(0, "Data 1")
        >>> str(obj)
        'Object ID: 0, Data: Data 1'
    """

    __slots__ = ("_id", "_data")

    def __init__(self, id: int, data: T):
        self._id = id
        self._data = copy.deepcopy(data)

    @property
    def id(self) -> int:
        return self._id

    @property
    def data(self) -> T:
        """A copy of the payload; the object keeps its own."""
        return copy.deepcopy(self._data)

    def render(self, sink: TextSink) -> None:
        sink.write(f"Object ID: {self._id}, Data: {self._data}")

    def duplicate(self) -> "Object[T]":
        return Object(self._id, self._data)

    def __str__(self) -> str:
        buf = io.StringIO()
        self.render(buf)
        return buf.getvalue()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, data={self._data!r})"


def as_variant(obj: Object, variant: Type[V]) -> Optional[V]:
    """Checked downcast: return ``obj`` if it is a ``variant``, else None."""
    if isinstance(obj, variant):
        return obj
    return None
