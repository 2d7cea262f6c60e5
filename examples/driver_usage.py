"""
Example: running the demo driver programmatically.

Run from the repository root, e.g. ``python examples/driver_usage.py``.
"""

import io

from polyobj import DemoDriver, ObjectRegistry, SpecialObject, as_variant
from polyobj.cli import load_config


# =============================================================================
# Example 1: Default scenario to stdout
# =============================================================================
result = DemoDriver(run_id="example-default").run()
print(f"Default run finished: {result.status} ({len(result.lines)} lines)")


# =============================================================================
# Example 2: Scenario file captured into a buffer
# =============================================================================
buf = io.StringIO()
result = DemoDriver(run_id="example-yaml").run(load_config("examples/special_clone.yaml"), out=buf)
print(buf.getvalue(), end="")
print(f"Capability check on object 2: {result.capability_check}")


# =============================================================================
# Example 3: Using the registry directly
# =============================================================================
with ObjectRegistry() as registry:
    plain = registry.create("object", {"count": 1})
    special = registry.create(SpecialObject, "tagged")

    for obj in registry:
        print(obj)

    print(as_variant(plain, SpecialObject))       # None
    print(as_variant(special, SpecialObject).duplicate())
