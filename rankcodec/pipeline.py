"""
One self-contained codec run over a fully buffered text:
tokenize -> count -> rank -> encode (-> decode).

Ranks cannot be assigned until every token has been counted, so encoding only
starts after the whole frequency pass has finished.
"""

from dataclasses import dataclass
from typing import List, Mapping, Optional

from .codec import decode_ranks, encode_tokens
from .errors import RoundTripError
from .frequency import count_frequencies
from .ranking import RankTable
from .tokenize import whitespace_tokenize
from .utils import log


@dataclass
class CodecResult:
    tokens: List[str]
    frequencies: Mapping[str, int]
    table: RankTable
    stream: List[int]
    decoded: Optional[str] = None


def run_codec(text: str, whitespace: str = "ascii", on_missing: str = "raise",
              decode: bool = False, progress: bool = False, verbose: bool = False) -> CodecResult:
    tokens = whitespace_tokenize(text, whitespace=whitespace)
    log("tok", f"tokens={len(tokens)} chars={len(text)} whitespace={whitespace}", verbose)

    freqs = count_frequencies(tokens, progress=progress)
    table = RankTable.from_frequencies(freqs)
    log("rank", f"distinct={len(table)} top={table.most_common(5)}", verbose)

    stream = encode_tokens(tokens, table, on_missing=on_missing, progress=progress)
    log("codec", f"encoded {len(stream)} ranks", verbose)

    decoded = None
    if decode:
        decoded = " ".join(decode_ranks(stream, table))
        log("codec", f"decoded {len(stream)} ranks", verbose)
    return CodecResult(tokens=tokens, frequencies=freqs, table=table, stream=stream, decoded=decoded)


def verify_roundtrip(result: CodecResult) -> None:
    if len(result.stream) != len(result.tokens):
        raise RoundTripError(
            f"Encoded stream has {len(result.stream)} ranks for {len(result.tokens)} tokens",
            {"stream_len": len(result.stream), "num_tokens": len(result.tokens)},
        )
    restored = decode_ranks(result.stream, result.table)
    for i, (got, want) in enumerate(zip(restored, result.tokens)):
        if got != want:
            raise RoundTripError(
                f"Token mismatch at offset {i}: decoded {got!r}, expected {want!r}",
                {"position": i, "decoded": got, "expected": want},
            )
