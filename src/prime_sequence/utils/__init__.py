"""Utility modules for prime_sequence."""

from prime_sequence.utils.log import setup_logger

__all__ = ["setup_logger"]
