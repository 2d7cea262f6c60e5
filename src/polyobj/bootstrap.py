from __future__ import annotations

import importlib
from typing import Iterable


BUILTIN_VARIANT_MODULES: tuple[str, ...] = (
    "polyobj.objects.base",
    "polyobj.objects.special",
)


_LOADED = False


def load_builtin_variants(*, reload: bool = False, modules: Iterable[str] = BUILTIN_VARIANT_MODULES) -> None:
    """Import built-in variant modules so their decorators register them.

    In production, call with reload=False (default) so imports are cheap.
    In tests, call with reload=True to reset the registry to the built-in
    variants. Classes already imported are re-registered rather than
    re-created, so isinstance checks keep working.
    """

    global _LOADED

    if _LOADED and not reload:
        return

    from polyobj.objects.registry import VariantRegistry, registered_kinds

    if reload:
        VariantRegistry.clear()

    for module_name in modules:
        module = importlib.import_module(module_name)
        if not reload:
            continue
        for value in vars(module).values():
            if not isinstance(value, type) or value.__module__ != module.__name__:
                continue
            for kind in registered_kinds(value):
                VariantRegistry.register(kind=kind, variant_class=value, overwrite=True)

    _LOADED = True
