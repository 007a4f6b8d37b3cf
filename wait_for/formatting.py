from __future__ import annotations

import socket
from typing import Any


def format_sockaddr(family: int, sockaddr: tuple[Any, ...]) -> str:
    # IPv6 sockaddr is (host, port, flowinfo, scope_id)
    host, port = sockaddr[0], sockaddr[1]
    if family == socket.AF_INET6:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def format_status(status_code: int, reason: str | None) -> str:
    if reason:
        return f"{status_code} {reason}"
    return str(status_code)
