"""
RPC Bench CLI
=============
Typer + Rich command-line interface for the endpoint benchmark.

Commands:
    rpc-bench ping  -e <urls>              Block height only
    rpc-bench bench -e <urls> -k <path>    Block height + self-transfer

Endpoints fall back to $RPC_BENCH_ENDPOINTS and the keypair path to
$RPC_BENCH_KEYPAIR (a .env in the working directory is honoured).
"""

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from solders.keypair import Keypair

from rpc_bench.modules.endpoint_bench.config import BenchConfig
from rpc_bench.modules.endpoint_bench.endpoints import parse_endpoints
from rpc_bench.modules.endpoint_bench.errors import BenchError
from rpc_bench.modules.endpoint_bench.keypair import load_keypair
from rpc_bench.modules.endpoint_bench.report import render_report
from rpc_bench.modules.endpoint_bench.runner import BenchmarkRunner
from rpc_bench.shared.system.logging import Logger

app = typer.Typer(
    name="rpc-bench",
    help="Benchmark latency and liveness of Solana RPC endpoints",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def _run(
    endpoints: str,
    keypair: Optional[Keypair],
    max_workers: Optional[int],
    timeout: Optional[float],
) -> None:
    """Fan out over the endpoints and print the report."""
    targets = parse_endpoints(endpoints)
    config = BenchConfig.from_settings(max_workers=max_workers, timeout=timeout)

    try:
        results = BenchmarkRunner(targets, keypair=keypair, config=config).run()
    except BenchError as e:
        Logger.critical(f"[BENCH] {e}: {e.__cause__!r}")
        raise typer.Exit(1)

    console.print()
    console.print(render_report(results), markup=False, highlight=False, soft_wrap=True, end="")


# ═══════════════════════════════════════════════════════════════════════════════
# COMMAND: PING (Liveness Only)
# ═══════════════════════════════════════════════════════════════════════════════

@app.command()
def ping(
    endpoints: str = typer.Option(
        ...,
        "--endpoints",
        "-e",
        envvar="RPC_BENCH_ENDPOINTS",
        help="Comma-separated list of Solana RPC endpoints",
    ),
    max_workers: Optional[int] = typer.Option(
        None,
        "--max-workers",
        min=1,
        help="Cap concurrent probes (default: one thread per endpoint)",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        min=0.1,
        help="Per-call RPC timeout in seconds",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the final report"),
):
    """
    Query the block height of every endpoint concurrently.

    \b
    Examples:
        rpc-bench ping -e https://api.mainnet-beta.solana.com
        rpc-bench ping -e "https://a.example,https://b.example" --max-workers 8
    """
    Logger.set_silent(quiet)
    _run(endpoints, None, max_workers, timeout)


# ═══════════════════════════════════════════════════════════════════════════════
# COMMAND: BENCH (Liveness + Transaction)
# ═══════════════════════════════════════════════════════════════════════════════

@app.command()
def bench(
    endpoints: str = typer.Option(
        ...,
        "--endpoints",
        "-e",
        envvar="RPC_BENCH_ENDPOINTS",
        help="Comma-separated list of Solana RPC endpoints",
    ),
    keypair_path: str = typer.Option(
        ...,
        "--keypair",
        "-k",
        envvar="RPC_BENCH_KEYPAIR",
        help="Path to the Solana keypair JSON file",
    ),
    max_workers: Optional[int] = typer.Option(
        None,
        "--max-workers",
        min=1,
        help="Cap concurrent probes (default: one thread per endpoint)",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        min=0.1,
        help="Per-call RPC timeout in seconds",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the final report"),
):
    """
    Query block height, then send a self-transfer through every endpoint.

    Each endpoint submits its own [bold]1-lamport[/bold] transfer from the
    keypair to itself and waits for confirmation. Fees are paid per endpoint.
    """
    Logger.set_silent(quiet)

    try:
        keypair = load_keypair(keypair_path)
    except BenchError as e:
        Logger.critical(f"[WALLET] {e}")
        raise typer.Exit(1)

    if not quiet:
        console.print(Panel.fit(
            f"[bold cyan]🔐 Keypair[/bold cyan] {keypair_path}\n"
            f"Public address: [green]{keypair.pubkey()}[/green]",
            border_style="cyan",
        ))

    _run(endpoints, keypair, max_workers, timeout)


def main():
    app()


if __name__ == "__main__":
    main()
