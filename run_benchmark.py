"""
Run RPC Benchmark
=================
Convenience launcher for the rpc-bench CLI.

Usage:
    python run_benchmark.py ping -e https://api.mainnet-beta.solana.com
    python run_benchmark.py bench -e <urls> -k ~/.config/solana/id.json
"""

from rpc_bench.modules.endpoint_bench.cli import main

if __name__ == "__main__":
    main()
