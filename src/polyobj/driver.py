from __future__ import annotations

import sys
import uuid
from typing import Any, Callable, Dict, Optional, TextIO, Union

from polyobj.core.contracts import DemoResult
from polyobj.core.exceptions import CustomException1, CustomException2, PolyobjException
from polyobj.core.logger import get_logger, push_run_id, reset_run_id
from polyobj.core.object_registry import ObjectRegistry
from polyobj.models.demo_config import DemoConfig
from polyobj.objects.base import Object
from polyobj.objects.special import is_special

Emit = Callable[[str], None]


def rerender_label(index: int, obj: Object) -> str:
    label = f"Object {index + 1}"
    if is_special(obj):
        label += " (Special)"
    return label


def capability_line(obj: Object) -> str:
    if is_special(obj):
        return "Dynamic cast successful. Object is a SpecialObject."
    return "Dynamic cast failed. Object is not a SpecialObject."


class DemoDriver:
    """
    Runs the object demonstration described by a DemoConfig.

    The run builds the configured objects and renders each one. It then
    re-renders a labelled subset, renders a duplicate, performs a capability
    check and raises each failure kind under its own handler.

    Example:
        >>> from polyobj import DemoDriver
        >>> result = DemoDriver().run()
        >>> result.status
        'success'
    """

    def __init__(self, run_id: Optional[str | int] = None):
        """
        Initialize the driver.

        Args:
            run_id: Identifier for this run, attached to every log record.
                    If not provided, a UUID will be generated.
        """
        self.run_id = str(run_id) if run_id is not None else str(uuid.uuid4())
        self.log = get_logger(__name__)

    def run(
        self,
        cfg: Union[Dict[str, Any], DemoConfig, None] = None,
        out: Optional[TextIO] = None,
    ) -> DemoResult:
        """
        Execute the demonstration.

        Args:
            cfg: Scenario as a dict (validated here), a DemoConfig, or None
                 for the default scenario.
            out: Text sink for the demo lines. Defaults to sys.stdout.

        Returns:
            DemoResult with the emitted lines and exit code.

        Raises:
            ValidationError: If a config dict is invalid (pydantic will raise this).
        """
        if cfg is None:
            cfg = DemoConfig()
        elif isinstance(cfg, dict):
            cfg = DemoConfig.model_validate(cfg)

        sink = out if out is not None else sys.stdout
        result = DemoResult(run_id=self.run_id, name=cfg.name)

        def emit(line: str) -> None:
            sink.write(line + "\n")
            result.lines.append(line)

        token = push_run_id(self.run_id)
        try:
            self.log.info(f"Starting demo: {cfg.name}")
            try:
                self._run_steps(cfg, emit, result)
            except PolyobjException as exc:
                # Reached only when a failure kind has no handler of its own
                emit(f"Caught exception: {exc}")
                self.log.error(f"Unhandled {type(exc).__name__} reached the catch-all handler")
                result.exit_code = 1
            self.log.info(f"Demo finished with status: {result.status}")
            return result
        finally:
            reset_run_id(token)

    def _run_steps(self, cfg: DemoConfig, emit: Emit, result: DemoResult) -> None:
        with ObjectRegistry() as registry:
            for item in cfg.objects:
                registry.create(item.kind, item.data)

            for obj in registry:
                emit(str(obj))

            for index in cfg.rerender:
                obj = registry[index]
                emit(f"{rerender_label(index, obj)}: {obj}")

            if cfg.duplicate is not None:
                clone = registry[cfg.duplicate].duplicate()
                self.log.debug(f"Duplicated object {clone.id} as {type(clone).__name__}")
                emit(f"Cloned Object {cfg.duplicate + 1}: {clone}")
                del clone

            if cfg.capability_check is not None:
                target = registry[cfg.capability_check]
                result.capability_check = is_special(target)
                self.log.debug(f"Capability check on object {target.id}: {result.capability_check}")
                emit(capability_line(target))

            if cfg.demonstrate_failures:
                self._demonstrate_failures(emit, result)

    def _demonstrate_failures(self, emit: Emit, result: DemoResult) -> None:
        try:
            raise CustomException1()
        except CustomException1 as ex:
            emit(f"Caught CustomException1: {ex}")
            result.caught.append(type(ex).__name__)

        try:
            raise CustomException2()
        except CustomException2 as ex:
            emit(f"Caught CustomException2: {ex}")
            result.caught.append(type(ex).__name__)

        self.log.debug(f"Caught failure kinds: {result.caught}")


def run_demo(run_id: Optional[str] = None, cfg: Union[Dict[str, Any], DemoConfig, None] = None) -> DemoResult:
    """Convenience wrapper mirroring DemoDriver(run_id).run(cfg)."""
    return DemoDriver(run_id).run(cfg)
