"""Command-line interface module for the Character Set Validator.

This module provides the ``cvc`` tool, validating files or standard input and
reporting violations with exit codes for scripting.
"""

from .main import main

__all__ = ["main"]
