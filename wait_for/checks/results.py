from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CheckResult:
    """Outcome of a successful attempt; failures are raised as CheckFailed."""

    latency_ms: int
    status_code: int | None = None
