"""
UPI codec: encoder, decoder and validator.
"""
from .encoder import (
    Segments,
    assert_unambiguous,
    build_segments,
    encode,
    join_segments,
)
from .decoder import (
    DECODER_STRATEGIES,
    SegmentDecoder,
    decode,
)
from .validator import (
    parse_version,
    validate,
)

__all__ = [
    "Segments",
    "assert_unambiguous",
    "build_segments",
    "encode",
    "join_segments",
    "DECODER_STRATEGIES",
    "SegmentDecoder",
    "decode",
    "parse_version",
    "validate",
]
