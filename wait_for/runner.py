from __future__ import annotations

import logging
import time
from typing import Callable

from wait_for.checks.http_check import run_http
from wait_for.checks.results import CheckResult
from wait_for.checks.tcp_check import run_tcp
from wait_for.config import settings
from wait_for.errors import CheckFailed, WaitTimeout
from wait_for.models import HostPortTarget, Target, WaitConfig
from wait_for.output import Reporter

logger = logging.getLogger(__name__)


def check_once(target: Target, reporter: Reporter, quiet: bool) -> CheckResult:
    if isinstance(target, HostPortTarget):
        return run_tcp(target.host, target.port, reporter, quiet=quiet)
    return run_http(target.url, reporter, quiet=quiet)


def wait_until_available(
    config: WaitConfig,
    reporter: Reporter,
    *,
    check: Callable[[Target, Reporter, bool], CheckResult] = check_once,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> CheckResult:
    """
    Poll the target until a check succeeds or the overall timeout runs out.

    The timeout is only looked at between attempts, so an attempt that is
    already running finishes (up to its own per-attempt timeout) before a
    WaitTimeout is raised. Errors other than CheckFailed are not retried.
    """
    start = clock()
    quiet = config.quiet
    if not quiet:
        reporter.info(f"Waiting for {config.target} to become available...")

    timeout = config.timeout
    attempt = 0
    while True:
        if timeout is not None and clock() - start >= timeout.total_seconds():
            raise WaitTimeout(config.timeout_s)

        attempt += 1
        try:
            res = check(config.target, reporter, quiet)
        except CheckFailed as exc:
            logger.debug("attempt %d for %s failed: %s", attempt, config.target, exc)
            if not quiet:
                reporter.warning(f"Check failed: {exc}")
                reporter.warning("Retrying in 1 second...")
        else:
            logger.debug(
                "attempt %d for %s succeeded in %d ms",
                attempt,
                config.target,
                res.latency_ms,
            )
            if not quiet:
                reporter.success("Service is available!")
            return res

        sleep(settings.RETRY_INTERVAL_S)
