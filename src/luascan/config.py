"""ContextVar-based scan configuration for luascan.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read by every Scanner created in the context unless the Scanner
is given explicit keyword arguments.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed.

Usage:
    from luascan.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(error_recovery=True)):
        tokens = list(Scanner(source))

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Note: source_file is excluded. It is per-call state and stays on the
    Scanner instance.

    Attributes:
        error_recovery: Report lexical errors and keep scanning instead of
            raising the first LexError
        decode_escapes: Decode Lua escape sequences in short strings
        diagnostic_sink: Callback receiving ``At line:col: message`` strings
            in recovery mode; None routes them to the scanner's logger

    """

    error_recovery: bool = False
    decode_escapes: bool = False
    diagnostic_sink: Callable[[str], None] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "error_recovery": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.error_recovery
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the module-level default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(error_recovery=True)):
        ...     tokens = list(Scanner("x = @ 1"))

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
