"""
UPI Encoder

Builds the URN form of a UPI record:

    urn:reso:upi:<version>:<segment1>:<value1>:<segment2>:<value2>:...

Values are written verbatim. A value may contain the separator or text that
looks like another segment; the format accepts that ambiguity. Strict mode
rejects values that the decoder could not split back unambiguously.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from reso_upi.config import get_default_config
from reso_upi.schemas import (
    RESO_CONTEXT,
    RESO_UPI_URN_STEM,
    URN_SEPARATOR,
    AmbiguousValueError,
    InvalidInputError,
    Schema,
    SchemaRegistry,
    schema_for,
)

logger = logging.getLogger(__name__)

# Ordered (segment name, value) pairs making up the URN body
Segments = list[tuple[str, str]]


def build_segments(schema: Schema, record: Optional[Mapping[str, Any]]) -> Segments:
    """
    Pair each schema segment with the record's value for that field.

    Missing, None and empty values become "" so they render as nothing
    between the surrounding separators.
    """
    record = record or {}
    segments: Segments = []
    for mapping in schema.mappings:
        value = record.get(mapping.record_field)
        segments.append((mapping.segment, str(value) if value else ""))
    return segments


def join_segments(version: str, segments: Segments) -> str:
    """Flatten the stem, version and segment pairs into the URN string."""
    tokens = [RESO_UPI_URN_STEM, version]
    for segment, value in segments:
        tokens.append(segment)
        tokens.append(value)
    return URN_SEPARATOR.join(tokens)


def assert_unambiguous(schema: Schema, record: Mapping[str, Any]) -> None:
    """
    Reject records that cannot round-trip through decode.

    Raises:
        InvalidInputError: If the record has keys the schema does not name
        AmbiguousValueError: If a value contains `:<segment>:` once wrapped
            in separators
    """
    unknown = sorted(set(record) - set(schema.record_fields) - {RESO_CONTEXT})
    if unknown:
        raise InvalidInputError(
            f"Record has fields not in schema {schema.version}: {unknown}",
            details={"version": schema.version, "unknown_fields": unknown},
        )

    tokens = [(segment, f"{URN_SEPARATOR}{segment}{URN_SEPARATOR}") for segment in schema.segments]
    for record_field in schema.record_fields:
        value = record.get(record_field)
        if not value:
            continue
        wrapped = f"{URN_SEPARATOR}{value}{URN_SEPARATOR}"
        for segment, token in tokens:
            if token in wrapped:
                raise AmbiguousValueError(record_field, str(value), segment)


def encode(
    version: Optional[str] = None,
    record: Optional[Mapping[str, Any]] = None,
    *,
    registry: Optional[SchemaRegistry] = None,
    strict: Optional[bool] = None,
) -> str:
    """
    Encode a UPI record as a URN.

    Args:
        version: Format version (defaults to the configured default, "2.0")
        record: Mapping of record field name to value
        registry: Schema registry to use (defaults to the built-in one)
        strict: Reject ambiguous values and unknown fields
            (defaults to the configured strict_mode)

    Returns:
        The URN-encoded UPI

    Raises:
        UnknownVersionError: If no schema is registered for the version

    Example:
        >>> encode("2.0", {"Country": "US", "StateOrProvince": "CA"})
        'urn:reso:upi:2.0:country:US:stateorprovince:CA:county::subcounty::...'
    """
    config = get_default_config()
    if version is None:
        version = config.default_version
    if strict is None:
        strict = config.strict_mode

    schema = schema_for(version, registry)
    if strict:
        assert_unambiguous(schema, record or {})

    upi = join_segments(version, build_segments(schema, record))
    logger.debug("Encoded UPI for version %s (%d segments)", version, len(schema))
    return upi


__all__ = [
    "Segments",
    "build_segments",
    "join_segments",
    "assert_unambiguous",
    "encode",
]
