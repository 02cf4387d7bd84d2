"""
Keypair Loader
==============
Reads a Solana CLI keypair file (JSON array of 64 secret-key bytes).
"""

import json
import os

from solders.keypair import Keypair

from rpc_bench.modules.endpoint_bench.errors import KeypairLoadError

KEYPAIR_LENGTH = 64


def load_keypair(path: str) -> Keypair:
    """
    Load the signing keypair used by the transaction probe.

    Args:
        path: Filesystem path to the keypair JSON file

    Returns:
        The parsed Keypair

    Raises:
        KeypairLoadError: File unreadable, not JSON, or not 64 bytes
    """
    path = os.path.expanduser(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise KeypairLoadError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise KeypairLoadError(path, f"invalid JSON ({e})") from e

    if not isinstance(raw, list) or len(raw) != KEYPAIR_LENGTH:
        raise KeypairLoadError(path, f"expected a JSON array of {KEYPAIR_LENGTH} bytes")
    if not all(isinstance(b, int) and 0 <= b <= 255 for b in raw):
        raise KeypairLoadError(path, "keypair array must contain only byte values (0-255)")

    try:
        return Keypair.from_bytes(bytes(raw))
    except ValueError as e:
        raise KeypairLoadError(path, str(e)) from e
