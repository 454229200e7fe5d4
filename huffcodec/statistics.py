"""
statistics.py

Measures of how well a code table fits the counted data.
"""


import numpy as np
from typing import Any, List, Optional

from .models import Code


def entropy(counts: Any) -> float:
    """
    Shannon entropy of a frequency table, in bits per symbol.

    Args:
        counts (Any): Frequency table indexed by symbol.

    Returns:
        float: The entropy. 0.0 for a table with a single non-zero entry.

    Raises:
        ValueError: If the table is empty or its counts sum to zero.
    """
    counts = np.asarray(counts, dtype=np.float64)
    if counts.size == 0:
        raise ValueError("Frequency table must not be empty")
    total = counts.sum()
    if total <= 0:
        raise ValueError("Total frequency cannot be zero")
    probs = counts[counts > 0] / total
    return float(-np.sum(probs * np.log2(probs)))


def average_code_length(counts: Any, codings: List[Optional[Code]]) -> float:
    """
    Mean number of bits spent per counted symbol.

    Raises:
        ValueError: If a counted symbol has no code or the counts sum to zero.
    """
    counts = np.asarray(counts, dtype=np.float64)
    total = counts.sum()
    if total <= 0:
        raise ValueError("Total frequency cannot be zero")
    lengths = np.zeros_like(counts)
    for symbol in np.flatnonzero(counts):
        code = codings[symbol]
        if code is None:
            raise ValueError(f"Symbol {symbol} has no code")
        lengths[symbol] = code.length
    return float(np.dot(counts, lengths) / total)
