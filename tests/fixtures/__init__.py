"""
Test fixtures package for UPI codec tests.

This package provides factory functions and reference values.

Usage:
    from fixtures import make_record, SAMPLE_UPI

    def test_something():
        record = make_record(parcel_number="123-456")
"""

from .common import (
    SAMPLE_UPI,
    SAMPLE_UPI_SHA256,
    SAMPLE_UPI_SHA3_256,
    SAMPLE_UPI_TWEAKED_SHA3_256,
    make_record,
    make_schema,
    with_context,
    without_context,
)

__all__ = [
    "SAMPLE_UPI",
    "SAMPLE_UPI_SHA256",
    "SAMPLE_UPI_SHA3_256",
    "SAMPLE_UPI_TWEAKED_SHA3_256",
    "make_record",
    "make_schema",
    "with_context",
    "without_context",
]
