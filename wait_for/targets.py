from __future__ import annotations

import re

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from wait_for.errors import EmptyHost, InvalidFormat, InvalidPort, InvalidUrl
from wait_for.models import HostPortTarget, Target, UrlTarget

_URL_PREFIXES = ("http://", "https://")
_PORT_RE = re.compile(r"\+?[0-9]+")
_http_url = TypeAdapter(AnyHttpUrl)


def _parse_port(raw: str) -> int:
    if not _PORT_RE.fullmatch(raw):
        raise InvalidPort(raw)
    port = int(raw)
    if port > 65535:
        raise InvalidPort(raw)
    return port


def parse_target(raw: str) -> Target:
    """
    Classify a target string as a URL or a host:port pair.

    The URL is kept exactly as given so requests see what the user typed.
    For host:port the split happens at the last colon, which leaves bare
    IPv6 hosts such as ``::1:8080`` usable.
    """
    if raw.startswith(_URL_PREFIXES):
        try:
            _http_url.validate_python(raw)
        except ValidationError as exc:
            raise InvalidUrl(raw) from exc
        return UrlTarget(url=raw)

    host, sep, port_str = raw.rpartition(":")
    if not sep:
        raise InvalidFormat()

    port = _parse_port(port_str)
    if not host:
        raise EmptyHost()

    return HostPortTarget(host=host, port=port)
