import os
import sys
from dotenv import load_dotenv

# Load environment variables from a .env in the working directory (if any)
load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_number(name: str, default, cast):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return cast(value)
    except ValueError:
        print(f"⚠️ Invalid {name}={value!r}, using {default}", file=sys.stderr)
        return default


class Settings:
    # ═══════════════════════════════════════════════════════════════════
    # RPC BENCH CONFIGURATION (Environment-Based)
    # ═══════════════════════════════════════════════════════════════════

    # Console
    SILENT_MODE = _env_bool("RPC_BENCH_SILENT")

    # Paths
    LOG_DIR = os.path.abspath(os.getenv("RPC_BENCH_LOG_DIR", "logs"))

    # Per-call HTTP timeout handed to the RPC client (seconds)
    RPC_TIMEOUT = _env_number("RPC_BENCH_TIMEOUT", 10.0, float)

    # Self-transfer amount for the transaction probe
    TRANSFER_LAMPORTS = _env_number("RPC_BENCH_TRANSFER_LAMPORTS", 1, int)
