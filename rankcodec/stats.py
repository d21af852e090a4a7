# Summary numbers for a codec run (written by `rankcodec --report`).

from typing import Dict

from .formatting import join_ranks
from .pipeline import CodecResult


def codec_stats(result: CodecResult, text: str = None, top_n: int = 10) -> Dict:
    tokens_chars = len(" ".join(result.tokens))
    encoded_chars = len(join_ranks(result.stream))
    n = len(result.stream)
    return {
        "num_tokens": len(result.tokens),
        "num_distinct": len(result.table),
        "input_chars": len(text) if text is not None else tokens_chars,
        "encoded_chars": encoded_chars,
        "compression_ratio": encoded_chars / tokens_chars if tokens_chars > 0 else 0.0,
        "mean_rank": sum(result.stream) / n if n > 0 else 0.0,
        "top": [[tok, c] for tok, c in result.table.most_common(top_n)],
    }
