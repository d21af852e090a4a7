# JSON run configuration. Files only need the keys they change; everything
# else falls back to DEFAULT_CONFIG.

import copy
from typing import Dict

from .codec import MISSING_POLICIES
from .formatting import DELIMITER
from .tokenize import WHITESPACE_CLASSES
from .utils import load_json

MODES = ("encode", "roundtrip")

DEFAULT_CONFIG = {
    "mode": "encode",
    "tokenizer": {"whitespace": "ascii"},
    "encoder": {"on_missing": "raise"},
    "output": {"delimiter": DELIMITER, "top_n": 10},
}


def merge_config(base: Dict, override: Dict) -> Dict:
    out = copy.deepcopy(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = merge_config(out[k], v)
        else:
            out[k] = v
    return out


SECTIONS = ("tokenizer", "encoder", "output")


def validate_config(cfg: Dict) -> Dict:
    for section in SECTIONS:
        if not isinstance(cfg.get(section, {}), dict):
            raise ValueError(f"Config section {section!r} must be a JSON object, got {cfg[section]!r}")
    mode = cfg.get("mode", "encode")
    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode!r} (expected one of {MODES})")
    whitespace = cfg.get("tokenizer", {}).get("whitespace", "ascii")
    if whitespace not in WHITESPACE_CLASSES:
        raise ValueError(f"Unknown whitespace class: {whitespace!r} (expected one of {WHITESPACE_CLASSES})")
    on_missing = cfg.get("encoder", {}).get("on_missing", "raise")
    if on_missing not in MISSING_POLICIES:
        raise ValueError(f"Unknown on_missing policy: {on_missing!r} (expected one of {MISSING_POLICIES})")
    delimiter = cfg.get("output", {}).get("delimiter", DELIMITER)
    # the listing is line-oriented
    if not isinstance(delimiter, str) or "\n" in delimiter or "\r" in delimiter:
        raise ValueError(f"output.delimiter must be a single-line string, got {delimiter!r}")
    top_n = cfg.get("output", {}).get("top_n", 10)
    if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n < 0:
        raise ValueError(f"output.top_n must be a non-negative integer, got {top_n!r}")
    return cfg


def load_config(path: str = None) -> Dict:
    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    data = load_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")
    return validate_config(merge_config(DEFAULT_CONFIG, data))
