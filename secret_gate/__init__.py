"""
secret_gate package initializer.
"""

from . import config

__all__ = ["config"]
