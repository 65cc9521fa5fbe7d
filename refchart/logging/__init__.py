"""
Logging configuration and utilities for the refchart package.
"""
from .config import configure_logging, get_logger, get_render_logger, log_render_pass

__all__ = ["configure_logging", "get_logger", "get_render_logger", "log_render_pass"]
