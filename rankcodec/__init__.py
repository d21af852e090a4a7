# Reversible frequency-rank text codec.

from .codec import decode_ranks, decode_text, encode_tokens
from .errors import CodecError, RankRangeError, RoundTripError, TokenLookupError
from .frequency import count_frequencies
from .pipeline import CodecResult, run_codec, verify_roundtrip
from .ranking import RankTable, rank_frequencies
from .tokenize import whitespace_tokenize

__version__ = "0.1.0"

__all__ = [
    "CodecError",
    "CodecResult",
    "RankRangeError",
    "RankTable",
    "RoundTripError",
    "TokenLookupError",
    "count_frequencies",
    "decode_ranks",
    "decode_text",
    "encode_tokens",
    "rank_frequencies",
    "run_codec",
    "verify_roundtrip",
    "whitespace_tokenize",
]
