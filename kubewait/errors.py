from typing import Optional


class WaitError(Exception):
    """Base class for every fatal condition of a wait run."""

    exit_code = 1


class ConfigError(WaitError, ValueError):
    exit_code = 2


class ClientError(WaitError, RuntimeError):
    pass


class ListError(ClientError):
    def __init__(self, kind: str, cause: Exception):
        self.kind = kind
        self.cause = cause
        super().__init__(f"failed to list {kind}s: {cause}")


class DataError(WaitError, ValueError):
    pass


class TimeoutExceeded(WaitError, TimeoutError):
    exit_code = 3

    def __init__(self, kind: str, timeout: Optional[float] = None):
        self.kind = kind
        self.timeout = timeout
        msg = f"Timeout reached while waiting for {kind}s to become ready"
        if timeout is not None:
            msg += f" (after {timeout:g}s)"
        super().__init__(msg)
