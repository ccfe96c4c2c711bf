"""
Schemas & Registry
File: versioning.py

Purpose: Centralize format version and wire constants for the UPI URN.
This file must stay tiny and have no imports from other schema files
to avoid circular dependencies.
"""

from typing import Literal

# Format version used when a caller does not pass one
DEFAULT_UPI_VERSION: str = "2.0"

# Wire constants
URN_SEPARATOR: str = ":"
RESO_UPI_URN_STEM: str = URN_SEPARATOR.join(["urn", "reso", "upi"])

# Reserved key carried by decoded records
RESO_CONTEXT: str = "@reso.context"

# Digest algorithm and the URN component label it produces
DEFAULT_HASH_VERSION: str = "sha3-256"
HASH_COMPONENT_SUFFIX: str = "-hash"
UPI_HASH_COMPONENT_NAME: str = f"{DEFAULT_HASH_VERSION}{HASH_COMPONENT_SUFFIX}"

# Type alias for the versions shipped with the library
UpiVersion = Literal["2.0"]


def urn_prefix(version: str) -> str:
    """Return the `urn:reso:upi:<version>` prefix for a format version."""
    return URN_SEPARATOR.join([RESO_UPI_URN_STEM, version])


def resource_context(version: str) -> str:
    """Return the metadata context value attached to decoded records."""
    return f"urn:reso:metadata:{version}:resource:property"


def hash_component_name(algorithm: str) -> str:
    """Return the hash component label, e.g. `sha3-256-hash`."""
    return f"{algorithm}{HASH_COMPONENT_SUFFIX}"
