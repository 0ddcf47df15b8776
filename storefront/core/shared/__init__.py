"""
Shared utilities: clock adapter and logging configuration.
"""

from storefront.core.shared.clock import SystemClock
from storefront.core.shared.logger import configure_logging, get_logger, get_use_case_logger

__all__ = ["SystemClock", "configure_logging", "get_logger", "get_use_case_logger"]
