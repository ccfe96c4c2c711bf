"""
UPI Validator

A URN is valid when it decodes under the version embedded in it.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Type

from reso_upi.schemas import RESO_UPI_URN_STEM, URN_SEPARATOR, SchemaRegistry, UpiException

from .decoder import SegmentDecoder, decode

logger = logging.getLogger(__name__)


def parse_version(upi: Any) -> Optional[str]:
    """
    Return the version token of a UPI URN, or None if there is none.

    Example:
        >>> parse_version("urn:reso:upi:2.0:country:US:...")
        '2.0'
    """
    stem = RESO_UPI_URN_STEM + URN_SEPARATOR
    if not isinstance(upi, str) or not upi.startswith(stem):
        return None
    version = upi[len(stem):].split(URN_SEPARATOR, 1)[0]
    return version or None


def validate(
    upi: Any,
    *,
    registry: Optional[SchemaRegistry] = None,
    strategies: Optional[Mapping[str, Type[SegmentDecoder]]] = None,
    strict: Optional[bool] = None,
) -> bool:
    """
    Check that a URN is a well-formed UPI for its embedded version.

    Accepts the same registry and strategy tables as decode(), so a
    version added by the caller validates exactly when it decodes.

    Returns:
        True if decode succeeds, False for any codec error or non-str input
    """
    version = parse_version(upi)
    if version is None:
        return False
    try:
        decode(version, upi, registry=registry, strategies=strategies, strict=strict)
    except UpiException as e:
        logger.debug("UPI failed validation: %s", e)
        return False
    return True


__all__ = [
    "parse_version",
    "validate",
]
