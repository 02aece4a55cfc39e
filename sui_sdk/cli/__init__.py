"""
Command-line interface (`sui-sdk`).
"""

from .main import app, main

__all__ = ["app", "main"]
