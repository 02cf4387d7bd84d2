"""
Endpoint Bench Configuration
============================
Tunables for the probe workers and the fan-out runner.
"""

from dataclasses import dataclass
from typing import Optional

from solana.rpc.commitment import Commitment, Confirmed

from rpc_bench.shared.config.settings import Settings


@dataclass(frozen=True)
class BenchConfig:
    """Configuration shared read-only by every probe worker."""

    # Transaction probe
    transfer_lamports: int = 1  # Self-transfer amount
    skip_preflight: bool = False
    commitment: Commitment = Confirmed

    # Network
    timeout: float = 10.0  # Per-call HTTP timeout (seconds)

    # Fan-out: None means one thread per endpoint
    max_workers: Optional[int] = None

    @classmethod
    def from_settings(cls, **overrides) -> "BenchConfig":
        """Build a config from environment settings, then apply non-None overrides."""
        values = {
            "transfer_lamports": Settings.TRANSFER_LAMPORTS,
            "timeout": Settings.RPC_TIMEOUT,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def pool_size(self, endpoint_count: int) -> int:
        """
        Number of threads to run for a batch.

        Args:
            endpoint_count: Number of endpoints in the batch (> 0)

        Returns:
            endpoint_count, capped at max_workers when one is set
        """
        if self.max_workers is None:
            return endpoint_count
        return max(1, min(self.max_workers, endpoint_count))
