"""rpc_bench - Solana RPC endpoint latency and liveness benchmark."""

__version__ = "0.1.0"
