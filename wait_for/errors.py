from __future__ import annotations


class WaitForError(RuntimeError):
    pass


class TargetParseError(WaitForError):
    pass


class InvalidFormat(TargetParseError):
    def __init__(self) -> None:
        super().__init__("Target must be in format 'host:port' or 'http(s)://...'")


class InvalidUrl(TargetParseError):
    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid URL format: {url}")
        self.url = url


class InvalidPort(TargetParseError):
    def __init__(self, port: str) -> None:
        super().__init__(f"Invalid port number: {port}")
        self.port = port


class EmptyHost(TargetParseError):
    def __init__(self) -> None:
        super().__init__("Host cannot be empty")


class ResolutionFailed(WaitForError):
    pass


class NoAddresses(WaitForError):
    pass


class CheckFailed(WaitForError):
    """A single availability attempt failed; the wait loop retries these."""


class ConnectFailed(CheckFailed):
    def __init__(self, message: str, errors: list[tuple[str, str]]) -> None:
        super().__init__(message)
        self.errors = errors


class RequestFailed(CheckFailed):
    pass


class HttpStatusFailed(CheckFailed):
    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class WaitTimeout(WaitForError):
    def __init__(self, timeout_s: int) -> None:
        super().__init__(f"Timeout waiting for service after {timeout_s} seconds")
        self.timeout_s = timeout_s


class SpawnFailed(WaitForError):
    def __init__(self, program: str, reason: str | None = None) -> None:
        message = f"Failed to execute command: {program}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.program = program
