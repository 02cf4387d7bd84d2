from typing import Sequence

from rpc_bench.modules.endpoint_bench.result import BenchmarkResult


def render_report(results: Sequence[BenchmarkResult]) -> str:
    """Render all results as numbered blocks, in the order given."""
    lines = ["Benchmark Results:", "================="]
    for i, result in enumerate(results, 1):
        lines.append("")
        lines.append(f"Endpoint #{i}")
        lines.append("-----------")
        lines.append(result.display().rstrip("\n"))
    return "\n".join(lines) + "\n"
