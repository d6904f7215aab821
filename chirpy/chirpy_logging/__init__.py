"""
Structured logging for Chirpy.

Use get_logger() in every module for JSON, aggregation-friendly output.
"""

from chirpy.chirpy_logging.logger import get_logger

__all__ = ["get_logger"]
