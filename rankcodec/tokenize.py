# Whitespace tokenizer shared by the encoder and the statistics report.
# Splits on maximal runs of whitespace; never yields empty tokens.

import regex as re
from typing import List

WHITESPACE_CLASSES = ("ascii", "unicode")

# C-locale isspace(): space \t \n \v \f \r
ASCII_TOKEN_RE = re.compile(r"[^ \t\n\r\x0b\x0c]+")
# Every character str.isspace() accepts, so tokens match str.split()
UNICODE_TOKEN_RE = re.compile(
    r"[^ \t\n\r\x0b\x0c\x1c-\x1f\x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def token_pattern(whitespace: str = "ascii"):
    if whitespace == "ascii":
        return ASCII_TOKEN_RE
    elif whitespace == "unicode":
        return UNICODE_TOKEN_RE
    else:
        raise ValueError(f"Unknown whitespace class: {whitespace!r} (expected one of {WHITESPACE_CLASSES})")


def whitespace_tokenize(s: str, whitespace: str = "ascii") -> List[str]:
    """Return the tokens of ``s`` in input order, duplicates included."""
    pattern = token_pattern(whitespace)
    if not s:
        return []
    return pattern.findall(s)
