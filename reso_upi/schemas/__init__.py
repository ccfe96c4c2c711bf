"""
Schemas & Registry
File: __init__.py

Purpose: Export the public API for the schemas module.
Versioning constants, the error taxonomy and the schema registry.
"""

# Version and wire constants
from .versioning import (
    DEFAULT_HASH_VERSION,
    DEFAULT_UPI_VERSION,
    HASH_COMPONENT_SUFFIX,
    RESO_CONTEXT,
    RESO_UPI_URN_STEM,
    UPI_HASH_COMPONENT_NAME,
    URN_SEPARATOR,
    UpiVersion,
    hash_component_name,
    resource_context,
    urn_prefix,
)

# Error models and exceptions
from .errors import (
    AmbiguousValueError,
    ErrorCodes,
    InvalidInputError,
    MalformedInputError,
    SchemaDefinitionError,
    UnknownVersionError,
    UnsupportedVersionError,
    UpiError,
    UpiException,
)

# Schema registry
from .registry import (
    DEFAULT_REGISTRY,
    UPI_V2_SCHEMA,
    FieldMapping,
    Schema,
    SchemaRegistry,
    schema_for,
)


__all__ = [
    # Versioning
    "DEFAULT_UPI_VERSION",
    "DEFAULT_HASH_VERSION",
    "HASH_COMPONENT_SUFFIX",
    "RESO_CONTEXT",
    "RESO_UPI_URN_STEM",
    "UPI_HASH_COMPONENT_NAME",
    "URN_SEPARATOR",
    "UpiVersion",
    "hash_component_name",
    "resource_context",
    "urn_prefix",
    # Errors
    "ErrorCodes",
    "UpiError",
    "UpiException",
    "UnknownVersionError",
    "UnsupportedVersionError",
    "MalformedInputError",
    "InvalidInputError",
    "AmbiguousValueError",
    "SchemaDefinitionError",
    # Registry
    "FieldMapping",
    "Schema",
    "SchemaRegistry",
    "DEFAULT_REGISTRY",
    "UPI_V2_SCHEMA",
    "schema_for",
]
