"""
Endpoint Bench Module
=====================
Concurrent latency and liveness benchmark for Solana RPC endpoints.

Components:
- endpoints.py: Comma-separated endpoint list parsing
- result.py: BenchmarkResult record and its report block
- probe.py: ProbeWorker (block height, optional self-transfer)
- runner.py: Fan-out/fan-in over a thread pool
- report.py: Ordered report rendering
- keypair.py: Solana CLI keypair file loading
- config.py: Tunables
- cli.py: Command-line interface
"""

from rpc_bench.modules.endpoint_bench.config import BenchConfig
from rpc_bench.modules.endpoint_bench.endpoints import parse_endpoints
from rpc_bench.modules.endpoint_bench.probe import ProbeWorker
from rpc_bench.modules.endpoint_bench.report import render_report
from rpc_bench.modules.endpoint_bench.result import BenchmarkResult
from rpc_bench.modules.endpoint_bench.runner import BenchmarkRunner

__all__ = [
    'BenchConfig',
    'BenchmarkResult',
    'BenchmarkRunner',
    'ProbeWorker',
    'parse_endpoints',
    'render_report',
]
