from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from polyobj.bootstrap import load_builtin_variants
from polyobj.objects.registry import VariantRegistry


class ObjectSpec(BaseModel):
    kind: str = "object"                        # Registered variant kind ("object", "special", ...)
    data: Any                                   # Payload; any YAML/JSON value

    @field_validator("kind")
    @classmethod
    def kind_must_be_registered(cls, value: str) -> str:
        load_builtin_variants()
        if VariantRegistry.try_get(value) is None:
            raise ValueError(
                f"Unknown object kind {value!r}; registered kinds: {VariantRegistry.kinds()}"
            )
        return value


def _default_objects() -> List[ObjectSpec]:
    return [
        ObjectSpec(kind="object", data="Data 1"),
        ObjectSpec(kind="special", data="Data 2"),
        ObjectSpec(kind="object", data="Data 3"),
    ]


class DemoConfig(BaseModel):
    """Scenario run by the demo driver.

    Indices refer to positions in ``objects`` (0-based). The defaults
    reproduce the canonical nine-line run.
    """
    name: str = "default"

    objects: List[ObjectSpec] = Field(default_factory=_default_objects)

    rerender: List[int] = Field(default_factory=lambda: [0, 1])   # Objects rendered again with a label
    duplicate: Optional[int] = 2                # Object to duplicate, or None to skip
    capability_check: Optional[int] = 1         # Object to test for the special variant, or None to skip
    demonstrate_failures: bool = True

    @model_validator(mode="after")
    def indices_in_range(self) -> "DemoConfig":
        count = len(self.objects)
        named = [("rerender", i) for i in self.rerender]
        if self.duplicate is not None:
            named.append(("duplicate", self.duplicate))
        if self.capability_check is not None:
            named.append(("capability_check", self.capability_check))

        for field_name, index in named:
            if not 0 <= index < count:
                raise ValueError(
                    f"{field_name} index {index} is out of range for {count} object(s)"
                )
        return self
