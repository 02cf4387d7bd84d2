"""
Mock RPC Client
===============
Fake synchronous Solana RPC client for testing without network calls.
"""

import time
from types import SimpleNamespace
from typing import Dict, List, Optional

from solana.rpc.commitment import Commitment, Confirmed
from solders.hash import Hash
from solders.signature import Signature


class MockRpcClient:
    """
    Mock of solana.rpc.api.Client covering the calls a probe makes.

    Failures are injected per method name; the explicit-commitment
    blockhash call is keyed as "get_latest_blockhash_with_commitment".

    Usage:
        client = MockRpcClient(block_height=100)
        client.fail("get_slot", RuntimeError("slot lookup down"))
        height = client.get_block_height().value
    """

    def __init__(
        self,
        endpoint: str = "http://mock",
        commitment: Optional[Commitment] = None,
        timeout: Optional[float] = None,
        block_height: int = 100,
        slot: int = 100000,
        delay: float = 0.0,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self._commitment = commitment or Confirmed
        self._block_height = block_height
        self._slot = slot
        self._delay = delay
        self._blockhash = Hash.new_unique()
        self._failures: Dict[str, BaseException] = {}
        self.calls: List[str] = []
        self.sent_transactions: List = []
        self.last_signature: Optional[Signature] = None

    @property
    def commitment(self) -> Commitment:
        return self._commitment

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def fail(self, method: str, error: BaseException) -> "MockRpcClient":
        """Make the given method raise error on every call."""
        self._failures[method] = error
        return self

    def _call(self, method: str) -> None:
        self.calls.append(method)
        if self._delay:
            time.sleep(self._delay)
        if method in self._failures:
            raise self._failures[method]

    def get_block_height(self, commitment: Optional[Commitment] = None):
        self._call("get_block_height")
        return SimpleNamespace(value=self._block_height)

    def get_latest_blockhash(self, commitment: Optional[Commitment] = None):
        self._call("get_latest_blockhash" if commitment is None else "get_latest_blockhash_with_commitment")
        return SimpleNamespace(
            value=SimpleNamespace(
                blockhash=self._blockhash,
                last_valid_block_height=self._block_height + 150,
            )
        )

    def send_transaction(self, txn, opts=None):
        self._call("send_transaction")
        self.sent_transactions.append((txn, opts))
        self.last_signature = txn.signatures[0]
        return SimpleNamespace(value=self.last_signature)

    def get_slot(self, commitment: Optional[Commitment] = None):
        self._call("get_slot")
        return SimpleNamespace(value=self._slot)


class MockClientFactory:
    """
    Stands in for the Client constructor; hands out one MockRpcClient per endpoint.

    Usage:
        factory = MockClientFactory()
        factory.register("http://a", MockRpcClient(block_height=7))
        runner = BenchmarkRunner(["http://a"], client_factory=factory)
    """

    def __init__(self, **defaults):
        self._defaults = defaults
        self.clients: Dict[str, MockRpcClient] = {}
        self.created: List[str] = []

    def register(self, endpoint: str, client: MockRpcClient) -> MockRpcClient:
        self.clients[endpoint] = client
        return client

    def __call__(self, endpoint: str, commitment=None, timeout=None):
        self.created.append(endpoint)
        if endpoint not in self.clients:
            self.clients[endpoint] = MockRpcClient(endpoint, **self._defaults)
        client = self.clients[endpoint]
        client.timeout = timeout
        return client
