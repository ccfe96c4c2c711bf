"""
RESO Uniform Parcel Identifier (UPI) codec.

Encodes parcel records as URNs, decodes them back, derives digest URNs and
validates encoded UPIs.

Usage:
    import reso_upi

    upi = reso_upi.encode("2.0", {"Country": "US", "StateOrProvince": "CA", ...})
    record = reso_upi.decode("2.0", upi)
    digest_urn = reso_upi.hash(upi)
    assert reso_upi.validate(upi)
"""

from reso_upi.codec import decode, encode, parse_version, validate
from reso_upi.config import UpiConfig, get_default_config, set_default_config
from reso_upi.crypto import hash_upi
from reso_upi.schemas import (
    DEFAULT_HASH_VERSION,
    DEFAULT_REGISTRY,
    DEFAULT_UPI_VERSION,
    RESO_CONTEXT,
    RESO_UPI_URN_STEM,
    UPI_HASH_COMPONENT_NAME,
    URN_SEPARATOR,
    AmbiguousValueError,
    InvalidInputError,
    MalformedInputError,
    Schema,
    SchemaRegistry,
    UnknownVersionError,
    UnsupportedVersionError,
    UpiException,
)

# Public name of the hashing operation; shadows the builtin only in this namespace
hash = hash_upi

__version__ = "0.1.0"

__all__ = [
    # Operations
    "encode",
    "decode",
    "hash_upi",
    "validate",
    "parse_version",
    # Constants
    "DEFAULT_UPI_VERSION",
    "DEFAULT_HASH_VERSION",
    "RESO_CONTEXT",
    "RESO_UPI_URN_STEM",
    "UPI_HASH_COMPONENT_NAME",
    "URN_SEPARATOR",
    # Registry
    "DEFAULT_REGISTRY",
    "Schema",
    "SchemaRegistry",
    # Errors
    "UpiException",
    "UnknownVersionError",
    "UnsupportedVersionError",
    "MalformedInputError",
    "InvalidInputError",
    "AmbiguousValueError",
    # Config
    "UpiConfig",
    "get_default_config",
    "set_default_config",
]
