from __future__ import annotations

import logging
import time

import requests

from wait_for.checks.results import CheckResult
from wait_for.config import settings
from wait_for.errors import HttpStatusFailed, RequestFailed
from wait_for.formatting import format_status
from wait_for.output import Reporter

logger = logging.getLogger(__name__)


def run_http(
    url: str,
    reporter: Reporter,
    quiet: bool = False,
    timeout_s: float = settings.HTTP_TIMEOUT_S,
) -> CheckResult:
    start = time.perf_counter()
    try:
        r = requests.get(url, timeout=timeout_s)
    except requests.RequestException as exc:
        raise RequestFailed(
            f"Failed to send HTTP request to {url}: {exc.__class__.__name__}: {exc}"
        ) from exc

    latency_ms = int((time.perf_counter() - start) * 1000)
    status = format_status(r.status_code, r.reason)
    logger.debug("GET %s -> %s in %d ms", url, status, latency_ms)

    if not 200 <= r.status_code < 300:
        raise HttpStatusFailed(
            f"HTTP request to {url} failed with status: {status}",
            status_code=r.status_code,
        )

    if not quiet:
        reporter.success(f"HTTP request to {url} succeeded (status: {status})")
    return CheckResult(latency_ms=latency_ms, status_code=r.status_code)
