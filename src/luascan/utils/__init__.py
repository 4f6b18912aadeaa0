"""Utility modules for luascan.

Provides:
- logger: get_logger and configure_logging
"""

from luascan.utils.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
