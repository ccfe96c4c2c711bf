"""
Validator Unit Tests
Tests for reso_upi/codec/validator.py
"""
import pytest

from fixtures import SAMPLE_UPI, make_record
from reso_upi.codec import (
    DECODER_STRATEGIES,
    SegmentDecoder,
    decode,
    encode,
    parse_version,
    validate,
)
from reso_upi.crypto import hash_upi
from reso_upi.schemas import DEFAULT_REGISTRY


class TestParseVersion:
    """Tests for parse_version()."""

    def test_reference_example(self):
        assert parse_version(SAMPLE_UPI) == "2.0"

    def test_stem_only(self):
        assert parse_version("urn:reso:upi:") is None

    @pytest.mark.parametrize("upi", [None, "", "not-a-upi", "urn:reso:upx:2.0:country:US"])
    def test_not_a_upi(self, upi):
        assert parse_version(upi) is None

    @pytest.mark.parametrize("upi", [123, b"urn:reso:upi:2.0:country:US", ["urn:reso:upi:2.0"]])
    def test_non_str_input(self, upi):
        assert parse_version(upi) is None


class TestValidate:
    """Tests for validate()."""

    def test_reference_example(self):
        assert validate(SAMPLE_UPI) is True

    def test_empty_record(self):
        assert validate(encode("2.0", {})) is True

    @pytest.mark.parametrize(
        "upi",
        [
            None,
            "",
            "not-a-upi",
            "urn:reso:upi:9.9:country:US",
            "urn:reso:upi:2.0",
            "urn:reso:upi:2.0:country:US",
            SAMPLE_UPI.replace(":county:", ":district:"),
        ],
    )
    def test_invalid(self, upi):
        assert validate(upi) is False

    @pytest.mark.parametrize("upi", [123, 2.0, object(), SAMPLE_UPI.encode("utf-8")])
    def test_non_str_input(self, upi):
        assert validate(upi) is False

    def test_hash_urn_is_invalid(self):
        assert validate(hash_upi(SAMPLE_UPI)) is False

    def test_ambiguous_value(self):
        upi = encode("2.0", make_record(sub_parcel_number="x:county"))

        assert validate(upi) is True
        assert validate(upi, strict=True) is False

    def test_custom_registry(self, v3_schema):
        registry = DEFAULT_REGISTRY.extend(v3_schema)
        upi = encode("3.0", {"Country": "US"}, registry=registry)

        # 3.0 has a schema but no decoder strategy
        assert validate(upi, registry=registry) is False

    def test_custom_registry_with_strategy(self, v3_schema):
        registry = DEFAULT_REGISTRY.extend(v3_schema)
        strategies = {**DECODER_STRATEGIES, "3.0": SegmentDecoder}
        upi = encode("3.0", {"Country": "US", "Block": "7"}, registry=registry)

        assert decode("3.0", upi, registry=registry, strategies=strategies)["Block"] == "7"
        assert validate(upi, registry=registry, strategies=strategies) is True

    def test_strategies_without_schema(self):
        strategies = {**DECODER_STRATEGIES, "3.0": SegmentDecoder}

        assert validate("urn:reso:upi:3.0:country:US", strategies=strategies) is False
