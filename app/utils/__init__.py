"""
Shared utilities package.

This package contains the logging configuration shared by the API server
and its entry point.
"""

from app.utils.logging_config import setup_logging, get_logger, configure_api_logging

__all__ = ['setup_logging', 'get_logger', 'configure_api_logging']
