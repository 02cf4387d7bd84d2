"""
RPC Bench Test Configuration
============================
Shared fixtures for the test suite.
"""

import os
import sys
import tempfile

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Keep log files out of the working tree and the console quiet.
# Must be set before rpc_bench reads its settings.
os.environ.setdefault("RPC_BENCH_LOG_DIR", tempfile.mkdtemp(prefix="rpc_bench_logs_"))
os.environ.setdefault("RPC_BENCH_SILENT", "1")


# ============================================================================
# SHARED FIXTURES
# ============================================================================

@pytest.fixture
def keypair():
    """Fresh random signer."""
    from solders.keypair import Keypair

    return Keypair()


@pytest.fixture
def keypair_file(tmp_path, keypair):
    """Keypair written in the Solana CLI JSON format."""
    import json

    path = tmp_path / "id.json"
    path.write_text(json.dumps(list(bytes(keypair))))
    return path


@pytest.fixture
def client_factory():
    """Factory handing out one MockRpcClient per endpoint."""
    from tests.mocks.mock_rpc import MockClientFactory

    return MockClientFactory()
