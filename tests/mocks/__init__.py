"""
RPC Bench Test Mocks
====================
Reusable mock classes for isolated testing.
"""

from tests.mocks.mock_rpc import MockClientFactory, MockRpcClient

__all__ = [
    "MockClientFactory",
    "MockRpcClient",
]
