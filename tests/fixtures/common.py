"""
Common test fixtures shared by all modules.

Provides factory functions and reference values for UPI data:
- UPI records (version 2.0)
- The reference encoded URN and its SHA3-256 digest
- Ad-hoc schemas for registry extension tests
"""

from typing import Any, Optional

from reso_upi.schemas import RESO_CONTEXT, Schema, resource_context


# =============================================================================
# Reference Values
# =============================================================================

SAMPLE_UPI = (
    "urn:reso:upi:2.0:country:US:stateorprovince:CA:county:06037:subcounty::"
    "propertytype:Residential:subpropertytype::parcelnumber: [abc] 1-2 ::   3:456 "
    ":subparcelnumber:"
)

# SHA3-256 of SAMPLE_UPI
SAMPLE_UPI_SHA3_256 = "427c883322af677b76d72d43d9a00c3bedd6a1ede20e43c614f710abf85549a9"

# SHA3-256 of SAMPLE_UPI with the final '6' of the parcel number changed to '7'
SAMPLE_UPI_TWEAKED_SHA3_256 = "cd4578e4a4e011bfc6760161c1382efeded68317539a188db12b8b157a470259"

# SHA-256 of SAMPLE_UPI
SAMPLE_UPI_SHA256 = "6d678518d22c2eaaa91094f659c027359ff7a2fad13e73c43be8fd24eede297e"


# =============================================================================
# Record Factories
# =============================================================================

def make_record(
    country: Optional[str] = "US",
    state_or_province: Optional[str] = "CA",
    county: Optional[str] = "06037",
    sub_county: Optional[str] = None,
    property_type: Optional[str] = "Residential",
    sub_property_type: Optional[str] = None,
    parcel_number: Optional[str] = " [abc] 1-2 ::   3:456 ",
    sub_parcel_number: Optional[str] = None,
) -> dict[str, Optional[str]]:
    """
    Create a version 2.0 UPI record for testing.

    The defaults reproduce the record behind SAMPLE_UPI.
    """
    return {
        "Country": country,
        "StateOrProvince": state_or_province,
        "County": county,
        "SubCounty": sub_county,
        "PropertyType": property_type,
        "SubPropertyType": sub_property_type,
        "ParcelNumber": parcel_number,
        "SubParcelNumber": sub_parcel_number,
    }


def with_context(record: dict[str, Any], version: str = "2.0") -> dict[str, Any]:
    """Return the record as decode would produce it, context key first."""
    return {RESO_CONTEXT: resource_context(version), **record}


def without_context(record: dict[str, Any]) -> dict[str, Any]:
    """Drop the context key from a decoded record."""
    return {k: v for k, v in record.items() if k != RESO_CONTEXT}


# =============================================================================
# Schema Factories
# =============================================================================

def make_schema(
    version: str = "3.0",
    pairs: Optional[list[tuple[str, str]]] = None,
) -> Schema:
    """Create a small schema for registry and strategy tests."""
    if pairs is None:
        pairs = [
            ("Country", "country"),
            ("ParcelNumber", "parcelnumber"),
            ("Block", "block"),
        ]
    return Schema.from_pairs(version, pairs)
