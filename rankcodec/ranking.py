# Frequency ranking: orders distinct tokens by count (descending), breaking
# ties by plain code-point order, and assigns each token its 1-based rank.

from typing import Dict, Iterable, List, Mapping, Tuple

from .errors import RankRangeError, TokenLookupError
from .frequency import count_frequencies


def rank_key(item: Tuple[str, int]):
    token, count = item
    return (-count, token)


def rank_frequencies(freqs: Mapping[str, int]) -> List[Tuple[str, int]]:
    """
    Sort (token, count) pairs into rank order.
    sorted() sees the full key so the result never depends on the mapping's
    iteration order.
    """
    return sorted(freqs.items(), key=rank_key)


class RankTable:
    def __init__(self, ranked: Iterable[Tuple[str, int]] = ()):
        self.ranked: List[Tuple[str, int]] = [(tok, int(c)) for tok, c in ranked]
        self.inv_vocab: List[str] = [tok for tok, _ in self.ranked]    # rank-1 -> token
        self.vocab: Dict[str, int] = {}                                  # token -> rank
        for i, tok in enumerate(self.inv_vocab):
            if tok in self.vocab:
                raise ValueError(f"Duplicate token in ranked list: {tok!r}")
            self.vocab[tok] = i + 1

    @classmethod
    def from_frequencies(cls, freqs: Mapping[str, int]) -> "RankTable":
        return cls(rank_frequencies(freqs))

    @classmethod
    def from_tokens(cls, tokens: Iterable[str], progress: bool = False) -> "RankTable":
        return cls.from_frequencies(count_frequencies(tokens, progress=progress))

    @property
    def ranks(self) -> Dict[str, int]:
        return dict(self.vocab)

    @property
    def tokens(self) -> List[str]:
        return list(self.inv_vocab)

    def __len__(self) -> int:
        return len(self.inv_vocab)

    def __contains__(self, token) -> bool:
        return token in self.vocab

    def __eq__(self, other) -> bool:
        if not isinstance(other, RankTable):
            return NotImplemented
        return self.ranked == other.ranked

    def __repr__(self) -> str:
        return f"RankTable(size={len(self)})"

    def rank_of(self, token: str) -> int:
        try:
            return self.vocab[token]
        except KeyError:
            raise TokenLookupError(token) from None

    def token_at(self, rank: int, position: int = None) -> str:
        # bool is an int subclass but never a valid rank
        if isinstance(rank, bool) or not isinstance(rank, int) or not 1 <= rank <= len(self.inv_vocab):
            raise RankRangeError(rank, len(self.inv_vocab), position)
        return self.inv_vocab[rank - 1]

    def count_of(self, token: str) -> int:
        return self.ranked[self.rank_of(token) - 1][1]

    def most_common(self, n: int = 20) -> List[Tuple[str, int]]:
        return list(self.ranked[:n])
