"""
UPI Decoder

Reverses the encoder: splits a URN body on its segment names and realigns
the values to record fields by schema position.

Version handling is lookup-and-delegate. Each supported version maps to a
decoder strategy in DECODER_STRATEGIES; adding a version means registering
a schema and a strategy, never editing an existing one.

Known limitation: values are not escaped, so a value that itself contains
`:<segment>:` cannot be told apart from a segment boundary. Such input is
reported as malformed (segment count or order mismatch) rather than being
silently misaligned.
"""
from __future__ import annotations

import logging
import re
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional, Type

from reso_upi.config import get_default_config
from reso_upi.schemas import (
    DEFAULT_UPI_VERSION,
    RESO_CONTEXT,
    URN_SEPARATOR,
    MalformedInputError,
    Schema,
    SchemaRegistry,
    UnsupportedVersionError,
    resource_context,
    schema_for,
    urn_prefix,
)

from .encoder import Segments, assert_unambiguous

logger = logging.getLogger(__name__)


class SegmentDecoder:
    """
    Decoder strategy for schemas whose URN body is `:<segment>:<value>` pairs.

    Usage:
        decoder = SegmentDecoder(UPI_V2_SCHEMA)
        record = decoder.decode("urn:reso:upi:2.0:country:US:...")
    """

    def __init__(self, schema: Schema) -> None:
        self.schema = schema
        self.prefix = urn_prefix(schema.version)
        self._wrapped = tuple(
            f"{URN_SEPARATOR}{segment}{URN_SEPARATOR}" for segment in schema.segments
        )
        # Capturing group keeps the matched segment names so order can be checked
        self.pattern = re.compile("(" + "|".join(re.escape(t) for t in self._wrapped) + ")")

    def split(self, upi: str) -> Segments:
        """
        Split a URN into ordered (segment, value) pairs.

        Raises:
            MalformedInputError: If the body does not hold exactly the schema's
                segments, in schema order
        """
        body = upi[len(self.prefix):]
        lead, *rest = self.pattern.split(body)
        names = rest[0::2]
        values = rest[1::2]

        if lead:
            raise MalformedInputError(upi, reason=f"unexpected text before first segment: {lead!r}")
        if len(values) != len(self.schema):
            raise MalformedInputError(
                upi,
                reason="segment count mismatch",
                details={"expected": len(self.schema), "actual": len(values)},
            )
        if tuple(names) != self._wrapped:
            raise MalformedInputError(
                upi,
                reason="segments out of schema order",
                details={"segments": [n.strip(URN_SEPARATOR) for n in names]},
            )
        return list(zip(self.schema.segments, values))

    def decode(self, upi: str) -> dict[str, Optional[str]]:
        """Decode a URN whose prefix has already been checked."""
        record: dict[str, Optional[str]] = {RESO_CONTEXT: resource_context(self.schema.version)}
        for record_field, (_, value) in zip(self.schema.record_fields, self.split(upi)):
            record[record_field] = value if value else None
        return record


# Version -> decoder strategy
DECODER_STRATEGIES: Mapping[str, Type[SegmentDecoder]] = MappingProxyType({
    DEFAULT_UPI_VERSION: SegmentDecoder,
})


@lru_cache(maxsize=32)
def _decoder_for(strategy: Type[SegmentDecoder], schema: Schema) -> SegmentDecoder:
    return strategy(schema)


def decode(
    version: Optional[str] = None,
    upi: str = "",
    *,
    registry: Optional[SchemaRegistry] = None,
    strategies: Optional[Mapping[str, Type[SegmentDecoder]]] = None,
    strict: Optional[bool] = None,
) -> dict[str, Optional[str]]:
    """
    Decode a URN-encoded UPI back into a record.

    Args:
        version: Format version (defaults to the configured default, "2.0")
        upi: URN to decode
        registry: Schema registry to use (defaults to the built-in one)
        strategies: Version -> decoder strategy (defaults to DECODER_STRATEGIES)
        strict: Also reject values holding a segment token
            (defaults to the configured strict_mode)

    Returns:
        Record of field name -> value (None for empty), preceded by the
        RESO_CONTEXT metadata key

    Raises:
        UnknownVersionError: If no schema is registered for the version
        MalformedInputError: If the URN is empty, lacks the version prefix,
            or its segments do not match the schema
        UnsupportedVersionError: If no decoder strategy handles the version
        AmbiguousValueError: In strict mode, if a value holds a segment token
    """
    config = get_default_config()
    if version is None:
        version = config.default_version
    if strict is None:
        strict = config.strict_mode

    schema = schema_for(version, registry)

    if not upi or not upi.startswith(urn_prefix(version) + URN_SEPARATOR):
        logger.debug("Rejecting UPI without %s prefix: %r", urn_prefix(version), upi)
        raise MalformedInputError(upi, reason="missing version prefix")

    strategies = DECODER_STRATEGIES if strategies is None else strategies
    strategy = strategies.get(version)
    if strategy is None:
        logger.debug("No decoder strategy for version %s", version)
        raise UnsupportedVersionError(version, supported=list(strategies))

    record = _decoder_for(strategy, schema).decode(upi)
    if strict:
        assert_unambiguous(schema, record)

    logger.debug("Decoded UPI for version %s", version)
    return record


__all__ = [
    "SegmentDecoder",
    "DECODER_STRATEGIES",
    "decode",
]
