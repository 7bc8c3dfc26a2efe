"""
Utility helpers for the UserConfig package.
"""

from UserConfig.utils.logging import get_logger, set_log_level, configure_logging

__all__ = ["get_logger", "set_log_level", "configure_logging"]
