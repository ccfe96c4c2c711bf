"""
Hashing utilities for encoded UPIs.
"""
from .hashing import (
    algorithm_label,
    digest,
    hash_upi,
)

__all__ = [
    "algorithm_label",
    "digest",
    "hash_upi",
]
