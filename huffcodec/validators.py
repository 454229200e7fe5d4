"""
validators.py

Shared input checks for huffcodec.
"""


import os
from typing import Any


def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Raise ValueError unless variable is an instance of expected_type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_file_exists(file_path: str) -> None:
    """Raise ValueError if nothing exists at file_path."""
    if not os.path.exists(file_path):
        raise ValueError(f"File does not exist: {file_path}")


def validate_bit_count(num_bits: int) -> None:
    """A bit field width is a non-negative int."""
    validate_type(num_bits, "Bit count", int)
    if num_bits < 0:
        raise ValueError(f"Bit count must be non-negative, got {num_bits}")
