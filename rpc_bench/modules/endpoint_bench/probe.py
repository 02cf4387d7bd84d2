"""
Probe Worker
============
Runs the full probe sequence against exactly one RPC endpoint.

Sequence:
    1. get_block_height          (liveness; failure ends the probe)
    2. get_latest_blockhash      (extended only; one fallback method)
    3. send_transaction + confirm, then get_slot

Every remote failure is recorded on the result as a string and ends the
remaining steps for this endpoint. There are no retries. Whatever path is
taken, the returned result has been completed exactly once.
"""

from typing import Callable, Optional

from solana.rpc.api import Client
from solana.rpc.types import TxOpts
from solders.keypair import Keypair
from solders.message import MessageV0
from solders.system_program import TransferParams, transfer
from solders.transaction import VersionedTransaction

from rpc_bench.modules.endpoint_bench.config import BenchConfig
from rpc_bench.modules.endpoint_bench.result import BenchmarkResult
from rpc_bench.shared.system.logging import Logger

BLOCKHASH_UNAVAILABLE = "Failed to get blockhash: All available methods failed"

ClientFactory = Callable[..., Client]

# Always propagated. Any other BaseException from a remote call, including the
# pyo3 PanicException solders raises on a malformed response, is recorded.
INTERRUPTS = (KeyboardInterrupt, SystemExit)


class ProbeWorker:
    """
    Probes one endpoint and produces its BenchmarkResult.

    Usage:
        worker = ProbeWorker("https://api.devnet.solana.com", keypair=kp)
        result = worker.run()
    """

    def __init__(
        self,
        endpoint: str,
        keypair: Optional[Keypair] = None,
        config: Optional[BenchConfig] = None,
        client_factory: ClientFactory = Client,
    ):
        """
        Args:
            endpoint: RPC URL to probe
            keypair: Shared read-only signer; None runs the liveness probe only
            config: Probe tunables
            client_factory: Builds the RPC client (swapped for a fake in tests)
        """
        self.endpoint = endpoint
        self.keypair = keypair
        self.config = config or BenchConfig()
        self._client_factory = client_factory

    def run(self) -> BenchmarkResult:
        result = BenchmarkResult(self.endpoint)
        client = self._client_factory(
            self.endpoint,
            commitment=self.config.commitment,
            timeout=self.config.timeout,
        )

        Logger.info(f"[RPC] Connecting to {self.endpoint}")

        try:
            height = client.get_block_height().value
        except INTERRUPTS:
            raise
        except BaseException as e:
            Logger.warning(f"[RPC] {self.endpoint}: block height query failed: {e}")
            result.set_error(str(e))
            result.complete()
            return result
        result.set_block_height(height)

        if self.keypair is not None:
            self._probe_transaction(client, result)

        result.complete()
        return result

    # =========================================================================
    # TRANSACTION PROBE
    # =========================================================================

    def _probe_transaction(self, client: Client, result: BenchmarkResult) -> None:
        """Submit a self-transfer and record its signature and slot."""
        payer = self.keypair.pubkey()
        transfer_ix = transfer(
            TransferParams(
                from_pubkey=payer,
                to_pubkey=payer,
                lamports=self.config.transfer_lamports,
            )
        )

        fetched = self._fetch_blockhash(client)
        if fetched is None:
            result.set_error(BLOCKHASH_UNAVAILABLE)
            return
        blockhash, last_valid_block_height = fetched

        Logger.debug(f"[TX] {self.endpoint}: blockhash {blockhash}")

        msg = MessageV0.try_compile(
            payer=payer,
            instructions=[transfer_ix],
            address_lookup_table_accounts=[],
            recent_blockhash=blockhash,
        )
        tx = VersionedTransaction(msg, [self.keypair])

        opts = TxOpts(
            skip_confirmation=False,
            skip_preflight=self.config.skip_preflight,
            preflight_commitment=self.config.commitment,
            last_valid_block_height=last_valid_block_height,
        )

        try:
            signature = client.send_transaction(tx, opts=opts).value
        except INTERRUPTS:
            raise
        except BaseException as e:
            Logger.warning(f"[TX] {self.endpoint}: transaction failed: {e}")
            result.set_error(f"Transaction failed: {e}")
            return

        Logger.success(f"[TX] {self.endpoint}: confirmed {signature}")
        result.set_transaction_signature(signature)

        try:
            slot = client.get_slot(commitment=client.commitment).value
        except INTERRUPTS:
            raise
        except BaseException as e:
            result.set_error(f"Failed to get transaction block height: {e}")
            return
        result.set_transaction_block_height(slot)

    def _fetch_blockhash(self, client: Client) -> Optional[tuple]:
        """
        Get a recent blockhash, trying the plain call first and the
        explicit-commitment call once as a fallback.

        Returns:
            (blockhash, last_valid_block_height), or None if both failed
        """
        try:
            value = client.get_latest_blockhash().value
            Logger.debug(f"[TX] {self.endpoint}: got blockhash using get_latest_blockhash")
            return value.blockhash, value.last_valid_block_height
        except INTERRUPTS:
            raise
        except BaseException as e:
            Logger.debug(f"[TX] {self.endpoint}: get_latest_blockhash failed: {e}")

        try:
            value = client.get_latest_blockhash(commitment=client.commitment).value
            Logger.debug(f"[TX] {self.endpoint}: got blockhash using explicit commitment")
            return value.blockhash, value.last_valid_block_height
        except INTERRUPTS:
            raise
        except BaseException as e:
            Logger.warning(f"[TX] {self.endpoint}: blockhash unavailable: {e}")
            return None
