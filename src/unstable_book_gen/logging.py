"""
Logging configuration and timing helpers.

Provides a single entry point for configuring structured logging with
structlog, plus ``log_step`` for logging the duration of pipeline stages.

Configuration is read from arguments or environment variables:
- BOOKGEN_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR (default: INFO)
- BOOKGEN_LOG_FORMAT: json | console (default: console)

Usage:
    from unstable_book_gen.logging import configure_logging, get_logger, log_step

    configure_logging()
    log = get_logger(__name__)

    with log_step("reconcile.lang", features=12) as timer:
        written = reconcile()
        timer.add_metric("generated", len(written))
"""

import logging
import os
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Literal

import structlog
from structlog.types import Processor

_configured = False


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | str | None = None,
    format: Literal["json", "console"] | str | None = None,
    force: bool = False,
) -> None:
    """
    Configure structured logging for the application.

    Should be called once at startup (CLI entry). Subsequent calls are
    no-ops unless force=True.

    Args:
        level: Log level (overrides BOOKGEN_LOG_LEVEL env var)
        format: Output format (overrides BOOKGEN_LOG_FORMAT env var)
        force: Reconfigure even if already configured
    """
    global _configured

    if _configured and not force:
        return

    log_level = (level or os.environ.get("BOOKGEN_LOG_LEVEL", "INFO")).upper()
    log_format = (format or os.environ.get("BOOKGEN_LOG_FORMAT", "console")).lower()

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # stdlib handler carries the rendered structlog message
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level),
        force=True,
    )
    logging.getLogger("unstable_book_gen").setLevel(getattr(logging, log_level))

    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


@dataclass
class TimingResult:
    """Result of a timed step."""

    step: str
    started_at: float = field(default_factory=time.perf_counter)
    ended_at: float | None = None
    metrics: dict[str, Any] = field(default_factory=dict)

    def stop(self) -> "TimingResult":
        """Record end time."""
        self.ended_at = time.perf_counter()
        return self

    @property
    def duration_ms(self) -> float:
        """Duration in milliseconds."""
        end = self.ended_at if self.ended_at is not None else time.perf_counter()
        return (end - self.started_at) * 1000

    def add_metric(self, key: str, value: Any) -> "TimingResult":
        """Add a metric to include in the end-of-step log."""
        self.metrics[key] = value
        return self

    def to_log_dict(self) -> dict[str, Any]:
        """Convert to dict for logging."""
        result: dict[str, Any] = {"duration_ms": round(self.duration_ms, 2)}
        result.update(self.metrics)
        return result


@contextmanager
def log_step(event: str, level: str = "info", **extra_metrics: Any) -> Iterator[TimingResult]:
    """
    Context manager that logs step start/end with timing.

    Logs:
    - Start: DEBUG level (event.start)
    - End: INFO level (event.end) with duration_ms and metrics
    - Errors propagate without an end log; the CLI reports them once

    Args:
        event: Event name (e.g., "reconcile.lang")
        level: Log level for end message ("info" or "debug")
        **extra_metrics: Additional metrics to include in logs
    """
    log = get_logger("unstable_book_gen.timing")
    timer = TimingResult(step=event, metrics=dict(extra_metrics))

    log.debug(f"{event}.start", **extra_metrics)
    yield timer
    timer.stop()

    getattr(log, level)(f"{event}.end", **timer.to_log_dict())
