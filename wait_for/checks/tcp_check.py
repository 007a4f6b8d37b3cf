from __future__ import annotations

import logging
import socket
import time

from wait_for.checks.results import CheckResult
from wait_for.config import settings
from wait_for.errors import ConnectFailed, NoAddresses, ResolutionFailed
from wait_for.formatting import format_sockaddr
from wait_for.output import Reporter

logger = logging.getLogger(__name__)


def resolution_host(host: str) -> str:
    # getaddrinfo wants IPv6 literals without the URL-style brackets
    if host.startswith("[") and host.endswith("]"):
        return host[1:-1]
    return host


def resolve(host: str, port: int) -> list[tuple]:
    try:
        infos = socket.getaddrinfo(resolution_host(host), port, type=socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError) as exc:
        raise ResolutionFailed(f"Failed to resolve address: {host}:{port}: {exc}") from exc

    if not infos:
        raise NoAddresses(f"No addresses found for {host}:{port}")
    return infos


def run_tcp(
    host: str,
    port: int,
    reporter: Reporter,
    quiet: bool = False,
    timeout_s: float = settings.TCP_CONNECT_TIMEOUT_S,
) -> CheckResult:
    errors: list[tuple[str, str]] = []

    for family, socktype, proto, _, sockaddr in resolve(host, port):
        addr = format_sockaddr(family, sockaddr)
        start = time.perf_counter()
        try:
            with socket.socket(family, socktype, proto) as sock:
                sock.settimeout(timeout_s)
                sock.connect(sockaddr)
        except OSError as e:
            errors.append((addr, str(e)))
            logger.debug("connect to %s failed: %s", addr, e)
            if not quiet:
                reporter.warning(f"Connection to {addr} failed: {e}")
            continue

        latency_ms = int((time.perf_counter() - start) * 1000)
        logger.debug("connect to %s succeeded in %d ms", addr, latency_ms)
        if not quiet:
            reporter.success(f"Connection to {host}:{port} succeeded")
        return CheckResult(latency_ms=latency_ms)

    raise ConnectFailed(f"Failed to connect to {host}:{port}", errors=errors)
