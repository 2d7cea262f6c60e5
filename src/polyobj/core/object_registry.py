from __future__ import annotations

from typing import Any, Iterator, List, Optional, Type, Union

from polyobj.bootstrap import load_builtin_variants
from polyobj.core.exceptions import RegistryReleasedError
from polyobj.core.id_generator import IDGenerator
from polyobj.core.logger import get_logger
from polyobj.objects.base import Object
from polyobj.objects.registry import VariantRegistry


class ObjectRegistry:
    """
    Owning collection of live objects.

    Identifiers come from the registry's own IDGenerator, so objects created
    through one registry never share an id. Objects are kept in creation
    order until ``release()`` drops them all.

    Example:
        >>> with ObjectRegistry() as registry:
        ...     first = registry.create("object", "Data 1")
        ...     second = registry.create("special", "Data 2")
        >>> len(registry)
        0
    """

    def __init__(self, id_generator: Optional[IDGenerator] = None):
        self._ids = id_generator or IDGenerator()
        self._objects: List[Object] = []
        self._released = False
        self.log = get_logger(__name__)

    def create(self, variant: Union[str, Type[Object]], data: Any) -> Object:
        """Build a new object of ``variant`` (a kind name or class) and take ownership of it."""
        if self._released:
            raise RegistryReleasedError("Cannot create objects on a released registry")

        if isinstance(variant, str):
            load_builtin_variants()
            variant_class = VariantRegistry.get(variant)
        else:
            variant_class = variant

        obj = variant_class(self._ids.next(), data)
        self._objects.append(obj)
        self.log.debug(f"Created {obj!r}")
        return obj

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Drop every owned object. Safe to call more than once."""
        if self._released:
            return
        count = len(self._objects)
        self._objects.clear()
        self._released = True
        self.log.debug(f"Released {count} object(s)")

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Object]:
        return iter(self._objects)

    def __getitem__(self, index: int) -> Object:
        return self._objects[index]

    def __enter__(self) -> "ObjectRegistry":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
