# Positional substitution: tokens -> ranks (encode) and ranks -> text (decode).

import sys
from typing import Iterable, List

from tqdm import tqdm

from .errors import RankRangeError, TokenLookupError
from .ranking import RankTable

MISSING_POLICIES = ("raise", "skip")


def encode_tokens(tokens: Iterable[str], table: RankTable, on_missing: str = "raise",
                  progress: bool = False) -> List[int]:
    """
    Map each token to its rank, keeping order and multiplicity.
    on_missing: "raise" | "skip"
        - "raise": abort with TokenLookupError, no partial stream is returned
        - "skip": report the token on stderr and leave it out of the stream
    """
    if on_missing not in MISSING_POLICIES:
        raise ValueError(f"on_missing must be one of {MISSING_POLICIES}, got {on_missing!r}")
    stream: List[int] = []
    for tok in tqdm(tokens, desc="Encoding", unit="tok", disable=not progress):
        try:
            stream.append(table.rank_of(tok))
        except TokenLookupError as e:
            if on_missing == "raise":
                raise
            print(f"Error: {e.message}; skipped", file=sys.stderr)
    return stream


def decode_ranks(stream: Iterable[int], table: RankTable) -> List[str]:
    # Build the whole token list before returning; a bad rank discards everything.
    return [table.token_at(rank, position=i) for i, rank in enumerate(stream)]


def decode_text(stream: Iterable[int], table: RankTable) -> str:
    return " ".join(decode_ranks(stream, table))


__all__ = [
    "MISSING_POLICIES",
    "encode_tokens",
    "decode_ranks",
    "decode_text",
    "RankRangeError",
    "TokenLookupError",
]
