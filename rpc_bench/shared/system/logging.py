"""
Centralized Logger with Rich Console
====================================
Static logging facade shared by every rpc_bench module.

Usage:
    from rpc_bench.shared.system.logging import Logger

    Logger.info("[BENCH] Connecting to https://api.mainnet-beta.solana.com")
    Logger.success("[TX] Transaction confirmed")
    Logger.warning("[RPC] Block height query failed")
    Logger.critical("[WALLET] Keypair unreadable")
"""

import os
import logging
import threading
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

from rich.console import Console
from rich.text import Text

from rpc_bench.shared.config.settings import Settings


# Each run writes its own log file
_run_id = datetime.now().strftime("%Y%m%d_%H%M%S")

file_logger = logging.getLogger("RpcBench")
file_logger.setLevel(logging.DEBUG)
file_logger.propagate = False

_file_handler: Optional[RotatingFileHandler] = None
_file_handler_lock = threading.Lock()


def _ensure_file_handler() -> None:
    """Attach the per-run rotating file handler on first use."""
    global _file_handler
    if _file_handler is not None:
        return

    with _file_handler_lock:
        if _file_handler is not None:
            return

        log_dir = Settings.LOG_DIR
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, f"rpc_bench_{_run_id}.log")

        handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
        )
        file_logger.addHandler(handler)
        _file_handler = handler


# =============================================================================
# SOURCE ICONS (for visual scanning)
# =============================================================================

SOURCE_ICONS = {
    "SYSTEM": "🛸",
    "BENCH": "🏎️",
    "RPC": "📡",
    "TX": "💸",
    "WALLET": "🔐",
}


# Level colors for Rich
LEVEL_STYLES = {
    "INFO": "cyan",
    "SUCCESS": "green bold",
    "WARNING": "yellow",
    "DEBUG": "dim",
    "CRITICAL": "red bold reverse",
}

_console = Console(stderr=True)


# =============================================================================
# LOGGER CLASS
# =============================================================================

class Logger:
    """
    Centralized logger with Rich console output.

    Features:
    - Color-coded console lines with a [SOURCE] column
    - Per-run file log with rotation
    - Silent mode that mutes the console but keeps the file log
    """

    _silent_mode = False

    @staticmethod
    def _timestamp() -> str:
        """High-precision timestamp (HH:MM:SS.ms)."""
        now = datetime.now()
        return f"{now.strftime('%H:%M:%S')}.{now.microsecond // 1000:03d}"

    @staticmethod
    def _parse_source(message: str) -> tuple:
        """Extract [SOURCE] tag from message if present."""
        stripped = message.strip()
        if stripped.startswith("[") and "]" in stripped:
            tag_end = stripped.index("]")
            source = stripped[1:tag_end].upper()
            clean_msg = stripped[tag_end + 1:].strip()
            if 0 < len(source) < 15:
                return source, clean_msg
        return "SYSTEM", message

    @staticmethod
    def _format_console(level: str, message: str, source: str) -> None:
        """Output to console with Rich formatting."""
        if Logger._silent_mode or Settings.SILENT_MODE:
            return

        ts = Logger._timestamp()
        icon = SOURCE_ICONS.get(source.upper(), "")
        msg_with_icon = f"{icon} {message}" if icon else message

        style = LEVEL_STYLES.get(level, "white")
        lvl_display = level[:8].ljust(8)
        src_display = source[:10].ljust(10)

        line = Text()
        line.append(f"{ts} ", style="dim")
        line.append(f"| {lvl_display} ", style=style)
        line.append(f"| {src_display} | ", style="dim")
        line.append(msg_with_icon)

        _console.print(line)

    @staticmethod
    def _log_to_file(level: str, message: str, source: str = "") -> None:
        """Write to file logger."""
        _ensure_file_handler()
        full_msg = f"[{source}] {message}" if source else message
        file_logger.log(getattr(logging, level, logging.INFO), full_msg)

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    @staticmethod
    def info(message: str) -> None:
        source, msg = Logger._parse_source(message)
        Logger._format_console("INFO", msg, source)
        Logger._log_to_file("INFO", msg, source)

    @staticmethod
    def success(message: str) -> None:
        source, msg = Logger._parse_source(message)
        Logger._format_console("SUCCESS", msg, source)
        Logger._log_to_file("INFO", f"✅ {msg}", source)

    @staticmethod
    def warning(message: str) -> None:
        source, msg = Logger._parse_source(message)
        Logger._format_console("WARNING", msg, source)
        Logger._log_to_file("WARNING", msg, source)

    @staticmethod
    def debug(message: str) -> None:
        source, msg = Logger._parse_source(message)
        Logger._log_to_file("DEBUG", msg, source)

    @staticmethod
    def critical(message: str) -> None:
        source, msg = Logger._parse_source(message)
        Logger._format_console("CRITICAL", f"🛑 {msg}", source)
        Logger._log_to_file("CRITICAL", f"🛑 {msg}", source)

    @staticmethod
    def set_silent(silent: bool) -> None:
        """Enable/disable console output."""
        Logger._silent_mode = silent
