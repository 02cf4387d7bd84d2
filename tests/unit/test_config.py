"""
BenchConfig Tests
=================
"""

from solana.rpc.commitment import Confirmed

from rpc_bench.modules.endpoint_bench.config import BenchConfig
from rpc_bench.shared.config.settings import Settings, _env_number


class TestBenchConfig:

    def test_defaults(self):
        config = BenchConfig()

        assert config.transfer_lamports == 1
        assert config.commitment == Confirmed
        assert config.max_workers is None

    def test_unbounded_pool_matches_endpoint_count(self):
        assert BenchConfig().pool_size(17) == 17

    def test_bounded_pool(self):
        config = BenchConfig(max_workers=4)

        assert config.pool_size(17) == 4
        assert config.pool_size(2) == 2

    def test_from_settings(self, monkeypatch):
        monkeypatch.setattr(Settings, "RPC_TIMEOUT", 2.5)
        monkeypatch.setattr(Settings, "TRANSFER_LAMPORTS", 3)

        config = BenchConfig.from_settings()

        assert config.timeout == 2.5
        assert config.transfer_lamports == 3

    def test_from_settings_overrides_skip_none(self, monkeypatch):
        monkeypatch.setattr(Settings, "RPC_TIMEOUT", 2.5)

        config = BenchConfig.from_settings(timeout=None, max_workers=8)

        assert config.timeout == 2.5
        assert config.max_workers == 8


class TestEnvNumber:

    def test_valid_values_parse(self, monkeypatch):
        monkeypatch.setenv("RPC_BENCH_TIMEOUT", "2.5")
        monkeypatch.setenv("RPC_BENCH_TRANSFER_LAMPORTS", "7")

        assert _env_number("RPC_BENCH_TIMEOUT", 10.0, float) == 2.5
        assert _env_number("RPC_BENCH_TRANSFER_LAMPORTS", 1, int) == 7

    def test_unset_or_blank_uses_default(self, monkeypatch):
        monkeypatch.delenv("RPC_BENCH_TIMEOUT", raising=False)
        monkeypatch.setenv("RPC_BENCH_TRANSFER_LAMPORTS", "  ")

        assert _env_number("RPC_BENCH_TIMEOUT", 10.0, float) == 10.0
        assert _env_number("RPC_BENCH_TRANSFER_LAMPORTS", 1, int) == 1

    def test_malformed_value_warns_and_uses_default(self, monkeypatch, capsys):
        monkeypatch.setenv("RPC_BENCH_TIMEOUT", "abc")
        monkeypatch.setenv("RPC_BENCH_TRANSFER_LAMPORTS", "1.5")

        assert _env_number("RPC_BENCH_TIMEOUT", 10.0, float) == 10.0
        assert _env_number("RPC_BENCH_TRANSFER_LAMPORTS", 1, int) == 1
        err = capsys.readouterr().err
        assert "RPC_BENCH_TIMEOUT='abc'" in err
        assert "RPC_BENCH_TRANSFER_LAMPORTS='1.5'" in err
