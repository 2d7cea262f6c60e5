from __future__ import annotations

from polyobj.objects.base import Object, TextSink, as_variant
from polyobj.objects.registry import register_variant


@register_variant(kind="special")
class SpecialObject(Object[str]):
    """Object[str] variant that tags its rendering as special."""

    __slots__ = ()

    def render(self, sink: TextSink) -> None:
        sink.write(f"Special Object ID: {self.id}, Data: {self.data}")

    def duplicate(self) -> "SpecialObject":
        return SpecialObject(self.id, self._data)


def is_special(obj: Object) -> bool:
    return as_variant(obj, SpecialObject) is not None
