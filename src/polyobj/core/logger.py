import logging
import sys
import contextvars
from typing import Optional

# Context variable to carry the current demo run id across the call chain
_RUN_ID: contextvars.ContextVar[str] = contextvars.ContextVar("run_id", default="-")


class _RunIdFilter(logging.Filter):
    """Logging filter that injects the run_id from contextvars into the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.run_id = _RUN_ID.get()
        return True


def _build_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | run=%(run_id)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _ensure_handler() -> None:
    root = logging.getLogger()
    for h in root.handlers:
        if isinstance(h, logging.StreamHandler) and any(isinstance(f, _RunIdFilter) for f in h.filters):
            return

    # stdout carries the demo lines, so diagnostics go to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter())
    handler.addFilter(_RunIdFilter())
    root.addHandler(handler)


def configure_root_logger(level: str = "WARNING") -> None:
    """
    Configure the root handler and the polyobj namespace logger.

    Args:
        level: Log level for polyobj logs (DEBUG, INFO, WARNING, ERROR).
               Other libraries keep whatever level the root logger has.

    Safe to call multiple times; it will not duplicate handlers (idempotent).
    """
    _ensure_handler()
    logging.getLogger("polyobj").setLevel(getattr(logging, level.upper(), logging.WARNING))


def get_logger(name: str = "polyobj") -> logging.Logger:
    """
    Get a module-specific logger. Handlers live on the root logger; the level
    is controlled through configure_root_logger().
    """
    _ensure_handler()
    return logging.getLogger(name)


def push_run_id(run_id: Optional[str]) -> Optional[contextvars.Token]:
    """Set the current run id in context and return a token for later reset."""
    if not run_id:
        return None
    return _RUN_ID.set(run_id)


def reset_run_id(token: Optional[contextvars.Token]) -> None:
    """Reset the run id context using the provided token (if any)."""
    if token is None:
        return
    _RUN_ID.reset(token)


def current_run_id() -> str:
    return _RUN_ID.get()
