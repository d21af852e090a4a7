"""Exceptions raised by the rank codec."""
from typing import Any, Dict


class CodecError(Exception):
    """Base class for codec failures; ``details`` feeds diagnostics and reports."""

    def __init__(self, message: str, details: Dict[str, Any] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class TokenLookupError(CodecError, LookupError):
    """Raised when a token being encoded has no rank in the table."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Token {token!r} not found in rank table", {"token": token})


class RankRangeError(CodecError, ValueError):
    """Raised when an encoded value is not a valid rank in [1, N]."""

    def __init__(self, rank, size: int, position: int = None):
        self.rank = rank
        self.size = size
        self.position = position
        where = f" at offset {position}" if position is not None else ""
        super().__init__(
            f"Invalid position {rank!r}{where} (valid ranks are 1..{size})",
            {"rank": rank, "size": size, "position": position},
        )


class RoundTripError(CodecError, AssertionError):
    """Raised when decoding an encoded stream does not reproduce its tokens."""
    pass
