# Text presentations of a codec run.

from typing import Iterable

from .pipeline import CodecResult

DELIMITER = "**********"


def join_ranks(stream: Iterable[int]) -> str:
    return " ".join(str(r) for r in stream)


def format_listing(result: CodecResult, delimiter: str = DELIMITER) -> str:
    """Ranked tokens, delimiter line, encoded ranks (no trailing newline)."""
    return "\n".join([
        " ".join(result.table.tokens),
        delimiter,
        join_ranks(result.stream),
    ])


def format_roundtrip(result: CodecResult) -> str:
    if result.decoded is None:
        raise ValueError("Codec result was produced without decode=True")
    return result.decoded
