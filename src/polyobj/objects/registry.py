from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, List, Optional, Tuple, Type

from polyobj.core.exceptions import PolyobjException


class VariantRegistryError(PolyobjException, RuntimeError):
    pass


class VariantRegistry:
    _registry: ClassVar[Dict[str, Type[Any]]] = {}

    @classmethod
    def register(
        cls,
        *,
        kind: str,
        variant_class: Type[Any],
        overwrite: bool = False,
    ) -> None:
        # Each variant must provide its own duplicate(); an inherited one would
        # hand back the parent type.
        if "duplicate" not in vars(variant_class):
            raise VariantRegistryError(
                f"Variant {variant_class.__name__} for kind={kind!r} must override duplicate()"
            )
        if not overwrite and kind in cls._registry:
            existing = cls._registry[kind]
            raise VariantRegistryError(
                f"Variant already registered for kind={kind!r}: {existing}"
            )
        cls._registry[kind] = variant_class
        kinds = registered_kinds(variant_class)
        if kind not in kinds:
            variant_class.__variant_kinds__ = kinds + (kind,)

    @classmethod
    def get(cls, kind: str) -> Type[Any]:
        try:
            return cls._registry[kind]
        except KeyError as exc:
            raise VariantRegistryError(
                f"No variant registered for kind={kind!r}"
            ) from exc

    @classmethod
    def try_get(cls, kind: str) -> Optional[Type[Any]]:
        return cls._registry.get(kind)

    @classmethod
    def kinds(cls) -> List[str]:
        return sorted(cls._registry)

    @classmethod
    def clear(cls) -> None:
        cls._registry.clear()


def registered_kinds(variant_class: Type[Any]) -> Tuple[str, ...]:
    """Kinds a class was registered under, ignoring kinds inherited from a parent."""
    return vars(variant_class).get("__variant_kinds__", ())


def register_variant(
    *,
    kind: str,
    overwrite: bool = False,
) -> Callable[[Type[Any]], Type[Any]]:
    def decorator(variant_class: Type[Any]) -> Type[Any]:
        VariantRegistry.register(
            kind=kind,
            variant_class=variant_class,
            overwrite=overwrite,
        )
        return variant_class

    return decorator
