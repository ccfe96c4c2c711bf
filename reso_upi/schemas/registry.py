"""
Schemas & Registry
File: registry.py

Purpose: Versioned field schemas for the UPI URN.

A Schema is the ordered list of (record field -> URN segment) pairs for one
format version. Order is part of the wire contract: it fixes segment order on
encode and is the only way decode realigns values to field names.

The registry is built once and never mutated. `extend()` returns a new
registry, so a schema that has been handed out can never change underneath
a caller.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import SchemaDefinitionError, UnknownVersionError
from .versioning import DEFAULT_UPI_VERSION, URN_SEPARATOR

logger = logging.getLogger(__name__)

_RECORD_FIELD_PATTERN = re.compile(r"^[A-Z][A-Za-z0-9]*$")


class FieldMapping(BaseModel):
    """
    One record field and the URN segment name it is written under.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    record_field: str = Field(
        ...,
        description="Canonical capitalized record field name (e.g. 'ParcelNumber')",
    )
    segment: str = Field(
        ...,
        description="Lowercase token written literally into the URN (e.g. 'parcelnumber')",
    )

    @field_validator("record_field")
    @classmethod
    def _check_record_field(cls, v: str) -> str:
        if not _RECORD_FIELD_PATTERN.match(v):
            raise SchemaDefinitionError(
                f"Record field name must be a capitalized identifier: {v!r}",
                details={"record_field": v},
            )
        return v

    @field_validator("segment")
    @classmethod
    def _check_segment(cls, v: str) -> str:
        if not v or v != v.lower() or URN_SEPARATOR in v:
            raise SchemaDefinitionError(
                f"Segment name must be a non-empty lowercase token without "
                f"'{URN_SEPARATOR}': {v!r}",
                details={"segment": v},
            )
        return v


class Schema(BaseModel):
    """
    Ordered field mappings for a single format version.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    version: str = Field(..., min_length=1, description="Format version tag")
    mappings: tuple[FieldMapping, ...] = Field(
        ...,
        description="Field mappings in URN segment order",
    )

    @model_validator(mode="after")
    def _check_unique(self) -> "Schema":
        if URN_SEPARATOR in self.version:
            raise SchemaDefinitionError(
                f"Version tag must not contain '{URN_SEPARATOR}': {self.version!r}",
                details={"version": self.version},
            )
        if not self.mappings:
            raise SchemaDefinitionError(
                f"Schema {self.version} has no field mappings",
                details={"version": self.version},
            )
        for attr in ("segment", "record_field"):
            seen: set[str] = set()
            for mapping in self.mappings:
                name = getattr(mapping, attr)
                if name in seen:
                    raise SchemaDefinitionError(
                        f"Duplicate {attr} {name!r} in schema {self.version}",
                        details={"version": self.version, attr: name},
                    )
                seen.add(name)
        return self

    @classmethod
    def from_pairs(cls, version: str, pairs: Iterable[tuple[str, str]]) -> "Schema":
        """Build a schema from (record_field, segment) pairs."""
        return cls(
            version=version,
            mappings=tuple(
                FieldMapping(record_field=record_field, segment=segment)
                for record_field, segment in pairs
            ),
        )

    @property
    def record_fields(self) -> tuple[str, ...]:
        return tuple(m.record_field for m in self.mappings)

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(m.segment for m in self.mappings)

    def field_map(self) -> dict[str, str]:
        """Record field -> segment name, in schema order."""
        return {m.record_field: m.segment for m in self.mappings}

    def __len__(self) -> int:
        return len(self.mappings)


class SchemaRegistry:
    """
    Read-only lookup of schemas by format version.

    Usage:
        registry = SchemaRegistry([UPI_V2_SCHEMA])
        schema = registry.schema_for("2.0")

        # Adding a version yields a new registry
        extended = registry.extend(Schema.from_pairs("3.0", [...]))
    """

    def __init__(self, schemas: Iterable[Schema] = ()) -> None:
        by_version: dict[str, Schema] = {}
        for schema in schemas:
            if schema.version in by_version:
                raise SchemaDefinitionError(
                    f"Schema already registered for version {schema.version}",
                    details={"version": schema.version},
                )
            by_version[schema.version] = schema
        self._schemas: Mapping[str, Schema] = MappingProxyType(by_version)

    def schema_for(self, version: str) -> Schema:
        """
        Look up the schema for a format version.

        Raises:
            UnknownVersionError: If no schema is registered for the version
        """
        schema = self._schemas.get(version)
        if schema is None:
            logger.debug("No schema registered for version %r", version)
            raise UnknownVersionError(version, known=list(self._schemas))
        return schema

    def extend(self, *schemas: Schema) -> "SchemaRegistry":
        """Return a new registry with additional schemas."""
        return SchemaRegistry([*self._schemas.values(), *schemas])

    def versions(self) -> tuple[str, ...]:
        return tuple(self._schemas)

    def __contains__(self, version: object) -> bool:
        return version in self._schemas

    def __iter__(self) -> Iterator[Schema]:
        return iter(self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)

    def __repr__(self) -> str:
        return f"SchemaRegistry(versions={list(self._schemas)!r})"


# Version 2.0: the RESO Common Format well-known identifiers
UPI_V2_SCHEMA = Schema.from_pairs(
    DEFAULT_UPI_VERSION,
    [
        ("Country", "country"),
        ("StateOrProvince", "stateorprovince"),
        ("County", "county"),
        ("SubCounty", "subcounty"),
        ("PropertyType", "propertytype"),
        ("SubPropertyType", "subpropertytype"),
        ("ParcelNumber", "parcelnumber"),
        ("SubParcelNumber", "subparcelnumber"),
    ],
)

DEFAULT_REGISTRY = SchemaRegistry([UPI_V2_SCHEMA])


def schema_for(version: str, registry: SchemaRegistry | None = None) -> Schema:
    """Look up a schema in `registry`, or in the default registry."""
    return (registry if registry is not None else DEFAULT_REGISTRY).schema_for(version)
