"""
Entropy helpers:
bit packing for raw measurement bits, and the theoretical strength
estimate reported for a configuration.
"""

from __future__ import annotations

import math
from typing import List


def bits_to_int(bits: List[int]) -> int:
    """
    Read a list of bits [1,0,1,...] as an unsigned integer, MSB first.
    An empty list is 0.
    """
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def bitstring_to_bits(bitstring: str) -> List[int]:
    """
    Convert a measurement string such as "0110" into [0, 1, 1, 0].
    """
    out_bits: List[int] = []
    for ch in bitstring:
        if ch not in "01":
            raise ValueError(f"Not a bitstring: {bitstring!r}")
        out_bits.append(1 if ch == "1" else 0)
    return out_bits


def estimate_entropy_bits(length: int, alphabet_size: int) -> float:
    """
    Entropy of a password drawn uniformly with replacement:
    length * log2(alphabet_size).
    """
    if length <= 0 or alphabet_size <= 1:
        return 0.0
    return length * math.log2(alphabet_size)
