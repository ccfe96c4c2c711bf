"""
UPI Hashing

Derives a versioned digest URN from an encoded UPI:

    urn:reso:upi:<version>:<algorithm>-hash:<hex digest>

Determinism Notes:
- The digest covers the UTF-8 bytes of the full input URN, unmodified
- No salt, no randomness: identical input always yields identical output
- A digest URN is never decoded back into a record
"""
from __future__ import annotations

import hashlib
import logging
from typing import Optional

from reso_upi.config import get_default_config
from reso_upi.schemas import (
    RESO_UPI_URN_STEM,
    URN_SEPARATOR,
    InvalidInputError,
    hash_component_name,
)

logger = logging.getLogger(__name__)


def digest(data: bytes, algorithm: str) -> bytes:
    """
    Compute a fixed-length digest of raw bytes.

    Args:
        data: Raw bytes to hash
        algorithm: hashlib algorithm name; "sha3-256" and "sha3_256" are
            both accepted

    Returns:
        The digest bytes

    Raises:
        InvalidInputError: If the algorithm is unknown or has no fixed length

    Example:
        >>> digest(b"abc", "sha3-256").hex()
        '3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532'
    """
    try:
        h = hashlib.new(algorithm.strip().lower().replace("-", "_"))
    except ValueError as e:
        raise InvalidInputError(
            f"Unsupported hash algorithm: {algorithm}",
            details={"algorithm": algorithm},
        ) from e
    if h.digest_size == 0:
        # shake_* need an explicit output length
        raise InvalidInputError(
            f"Hash algorithm has no fixed digest size: {algorithm}",
            details={"algorithm": algorithm},
        )
    h.update(data)
    return h.digest()


def algorithm_label(algorithm: str) -> str:
    """Spell an algorithm name the way it appears in a digest URN ('sha3-256')."""
    return algorithm.strip().lower().replace("_", "-")


def hash_upi(
    upi: Optional[str],
    version: Optional[str] = None,
    *,
    algorithm: Optional[str] = None,
) -> str:
    """
    Create a versioned digest URN for an encoded UPI.

    Args:
        upi: The encoded UPI to hash
        version: Version tag written into the digest URN
            (defaults to the configured default, "2.0")
        algorithm: Digest algorithm (defaults to the configured one, "sha3-256")

    Returns:
        `urn:reso:upi:<version>:<algorithm>-hash:<hex digest>`

    Raises:
        InvalidInputError: If upi is empty or does not start with the UPI stem
    """
    if not upi or not upi.startswith(RESO_UPI_URN_STEM):
        logger.debug("Refusing to hash invalid UPI: %r", upi)
        raise InvalidInputError(
            f"Cannot create hash! Invalid upi: '{upi}'",
            details={"upi": upi},
        )

    config = get_default_config()
    if version is None:
        version = config.default_version
    if algorithm is None:
        algorithm = config.hash_algorithm

    hex_digest = digest(upi.encode("utf-8"), algorithm).hex()
    label = hash_component_name(algorithm_label(algorithm))
    logger.debug("Hashed UPI with %s for version %s", algorithm, version)
    return URN_SEPARATOR.join([RESO_UPI_URN_STEM, version, label, hex_digest])


__all__ = [
    "algorithm_label",
    "digest",
    "hash_upi",
]
