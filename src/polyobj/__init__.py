"""polyobj.

Polymorphic object demonstration: objects with overridable rendering,
type-preserving duplication, runtime variant checks and distinct failure kinds.
"""

from polyobj.core.exceptions import CustomException1, CustomException2, PolyobjException
from polyobj.core.id_generator import IDGenerator
from polyobj.core.object_registry import ObjectRegistry
from polyobj.driver import DemoDriver
from polyobj.objects.base import Object, as_variant
from polyobj.objects.special import SpecialObject, is_special
from polyobj.cli import main, validate_config

__version__ = "0.1.0"

__all__ = [
    "CustomException1",
    "CustomException2",
    "DemoDriver",
    "IDGenerator",
    "Object",
    "ObjectRegistry",
    "PolyobjException",
    "SpecialObject",
    "as_variant",
    "is_special",
    "main",
    "validate_config",
]
