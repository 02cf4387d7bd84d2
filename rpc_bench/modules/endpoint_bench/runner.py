"""
Benchmark Runner
================
Fan-out/fan-in over a fixed endpoint list.

One ProbeWorker per endpoint is submitted to a thread pool sized to the
endpoint count (or config.max_workers when set). Results are joined by
walking the futures in submission order, so the returned list always
matches the input order regardless of which worker finished first.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional, Sequence

from solana.rpc.api import Client
from solders.keypair import Keypair

from rpc_bench.modules.endpoint_bench.config import BenchConfig
from rpc_bench.modules.endpoint_bench.errors import WorkerCrashedError
from rpc_bench.modules.endpoint_bench.probe import INTERRUPTS, ClientFactory, ProbeWorker
from rpc_bench.modules.endpoint_bench.result import BenchmarkResult
from rpc_bench.shared.system.logging import Logger


class BenchmarkRunner:
    """Probes every endpoint concurrently and returns results in input order."""

    def __init__(
        self,
        endpoints: Sequence[str],
        keypair: Optional[Keypair] = None,
        config: Optional[BenchConfig] = None,
        client_factory: ClientFactory = Client,
    ):
        self.endpoints = list(endpoints)
        self.keypair = keypair
        self.config = config or BenchConfig()
        self._client_factory = client_factory

    def _worker(self, endpoint: str) -> ProbeWorker:
        return ProbeWorker(
            endpoint,
            keypair=self.keypair,
            config=self.config,
            client_factory=self._client_factory,
        )

    def run(self) -> List[BenchmarkResult]:
        """
        Run every probe and block until all of them finish.

        Raises:
            WorkerCrashedError: A worker raised instead of returning a result.
                The whole run is aborted; no partial report is produced.
        """
        if not self.endpoints:
            Logger.warning("[BENCH] No endpoints to benchmark")
            return []

        pool_size = self.config.pool_size(len(self.endpoints))
        Logger.info(
            f"[BENCH] Starting benchmark for {len(self.endpoints)} endpoints "
            f"({pool_size} threads)..."
        )

        with ThreadPoolExecutor(max_workers=pool_size, thread_name_prefix="probe") as pool:
            futures: List[Future] = [
                pool.submit(self._worker(endpoint).run) for endpoint in self.endpoints
            ]

            results: List[BenchmarkResult] = []
            for endpoint, future in zip(self.endpoints, futures):
                try:
                    results.append(future.result())
                except INTERRUPTS:
                    raise
                except BaseException as e:
                    raise WorkerCrashedError(endpoint) from e

        succeeded = sum(1 for r in results if r.succeeded)
        Logger.info(f"[BENCH] Completed: {succeeded}/{len(results)} endpoints responded")
        return results
