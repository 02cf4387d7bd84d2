"""Exceptions raised by the endpoint benchmark."""


class BenchError(Exception):
    """Base class for rpc_bench errors."""


class KeypairLoadError(BenchError):
    """The keypair file could not be read or parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load keypair from {path}: {reason}")


class ResultAlreadyCompletedError(BenchError):
    """complete() was called on a result that is already finalized."""


class WorkerCrashedError(BenchError):
    """A probe worker terminated abnormally instead of returning a result."""

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f"Probe worker for {endpoint} terminated abnormally")
