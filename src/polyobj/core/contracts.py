from dataclasses import dataclass, field
from typing import List, Literal, Optional

RunStatus = Literal["success", "failed"]


@dataclass
class DemoResult:
    """Outcome of one driver run.

    ``lines`` holds exactly what was written to the output sink, without
    trailing newlines, in the order it was written.
    """
    run_id: str                                 # Unique run identifier
    name: str                                   # Config name
    lines: List[str] = field(default_factory=list)
    capability_check: Optional[bool] = None     # None when the check was skipped
    caught: List[str] = field(default_factory=list)  # Failure kinds caught by their own handler
    exit_code: int = 0

    @property
    def status(self) -> RunStatus:
        return "success" if self.exit_code == 0 else "failed"
