# Token frequency counting (first pass of the codec).

from collections import Counter
from types import MappingProxyType
from typing import Iterable, Mapping

from tqdm import tqdm


def count_frequencies(tokens: Iterable[str], progress: bool = False) -> Mapping[str, int]:
    """
    Count occurrences of each distinct token.
    The result is read-only; its iteration order carries no meaning, ranking
    always re-sorts it.
    """
    counts = Counter()
    for tok in tqdm(tokens, desc="Counting tokens", unit="tok", disable=not progress):
        counts[tok] += 1
    return MappingProxyType(dict(counts))
