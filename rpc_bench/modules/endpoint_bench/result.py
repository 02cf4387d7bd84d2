"""
Benchmark Result
================
Per-endpoint record of timing, liveness and transaction outcome.

A result is created when its worker starts, mutated only by that worker,
finalized with complete(), and read-only while the report is rendered.
"""

import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from solders.signature import Signature

from rpc_bench.modules.endpoint_bench.errors import ResultAlreadyCompletedError


NOT_AVAILABLE = "N/A"


def format_system_time(timestamp: float) -> str:
    """Render a wall-clock timestamp in local time with millisecond precision."""
    dt = datetime.fromtimestamp(timestamp).astimezone()
    return f"{dt.strftime('%Y-%m-%d %H:%M:%S')}.{dt.microsecond // 1000:03d} {dt.strftime('%Z')}"


def format_duration(seconds: float) -> str:
    """Render an elapsed time with two decimals in the largest fitting unit."""
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.2f}µs"
    return f"{seconds * 1e9:.2f}ns"


@dataclass
class BenchmarkResult:
    """Outcome of probing one endpoint."""

    endpoint: str
    start_time: float = field(default_factory=time.perf_counter)
    start_system_time: float = field(default_factory=time.time)
    end_time: Optional[float] = None
    end_system_time: Optional[float] = None
    block_height: Optional[int] = None
    error: Optional[str] = None
    transaction_signature: Optional[Signature] = None
    transaction_block_height: Optional[int] = None

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def complete(self) -> None:
        """Stamp the end time. Allowed exactly once."""
        if self.end_time is not None:
            raise ResultAlreadyCompletedError(f"Result for {self.endpoint} is already completed")
        self.end_time = time.perf_counter()
        self.end_system_time = time.time()

    @property
    def is_completed(self) -> bool:
        return self.end_time is not None

    @property
    def succeeded(self) -> bool:
        return self.block_height is not None

    def duration(self) -> Optional[float]:
        """Elapsed seconds between construction and complete(), if completed."""
        if self.end_time is None:
            return None
        return self.end_time - self.start_time

    # =========================================================================
    # SETTERS
    # =========================================================================

    def set_error(self, error: str) -> None:
        self.error = error

    def set_block_height(self, height: int) -> None:
        self.block_height = height

    def set_transaction_signature(self, signature: Signature) -> None:
        self.transaction_signature = signature

    def set_transaction_block_height(self, height: int) -> None:
        self.transaction_block_height = height

    # =========================================================================
    # RENDERING
    # =========================================================================

    def status(self) -> str:
        # Block height wins when a later stage also recorded an error
        if self.block_height is not None:
            return f"Success (Block Height: {self.block_height})"
        if self.error is not None:
            return f"Error: {self.error}"
        return "Unknown Status"

    def display(self) -> str:
        """Render the fixed-format report block for this endpoint."""
        duration = self.duration()
        end_time = (
            format_system_time(self.end_system_time)
            if self.end_system_time is not None
            else NOT_AVAILABLE
        )
        signature = (
            str(self.transaction_signature)
            if self.transaction_signature is not None
            else "No signature"
        )
        tx_block_height = (
            str(self.transaction_block_height)
            if self.transaction_block_height is not None
            else NOT_AVAILABLE
        )
        error_details = f"Error Details: {self.error}\n" if self.error is not None else ""

        return (
            f"Endpoint: {self.endpoint}\n"
            f"Start Time: {format_system_time(self.start_system_time)}\n"
            f"End Time: {end_time}\n"
            f"Status: {self.status()}\n"
            f"Transaction Signature: {signature}\n"
            f"Transaction Block Height: {tx_block_height}\n"
            f"{error_details}"
            f"Duration: {format_duration(duration) if duration is not None else NOT_AVAILABLE}\n"
        )
