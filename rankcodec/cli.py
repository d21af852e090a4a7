"""
Command-line front end.

Usage:
  rankcodec < input.txt                      # ranked tokens, delimiter, ranks
  rankcodec --mode roundtrip --input a.txt   # encode then decode, print text
"""

import os
import sys
import argparse

from .config import MODES, load_config, validate_config
from .codec import MISSING_POLICIES
from .errors import CodecError
from .formatting import format_listing, format_roundtrip
from .pipeline import run_codec, verify_roundtrip
from .stats import codec_stats
from .tokenize import WHITESPACE_CLASSES
from .utils import configure_stdout, log, read_text, save_json


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rankcodec", description="Frequency-rank text codec.")
    parser.add_argument("--input", type=str, default=None, help="Input text file (default: stdin).")
    parser.add_argument("--mode", choices=MODES, default=None, help="encode: print ranked tokens and ranks; roundtrip: print decoded text.")
    parser.add_argument("--whitespace", choices=WHITESPACE_CLASSES, default=None, help="Characters that separate tokens: ascii (C isspace, default) or unicode (str.isspace).")
    parser.add_argument("--on-missing", choices=MISSING_POLICIES, default=None, help="What to do with tokens missing from the rank table.")
    parser.add_argument("--config", type=str, default=None, help="JSON config file.")
    parser.add_argument("--report", type=str, default=None, help="Write a JSON statistics report to this path.")
    parser.add_argument("--verify", action="store_true", help="Check that the encoded stream decodes to the input tokens.")
    parser.add_argument("--progress", action="store_true", help="Show progress bars on stderr.")
    parser.add_argument("--verbose", action="store_true", help="Print diagnostics on stderr.")
    return parser


def resolve_config(args) -> dict:
    if args.config is not None and not os.path.isfile(args.config):
        raise SystemExit(f"Config file not found: {args.config}")
    try:
        cfg = load_config(args.config)
        if args.mode is not None:
            cfg["mode"] = args.mode
        if args.whitespace is not None:
            cfg["tokenizer"]["whitespace"] = args.whitespace
        if args.on_missing is not None:
            cfg["encoder"]["on_missing"] = args.on_missing
        return validate_config(cfg)
    except ValueError as e:
        raise SystemExit(f"Invalid config: {e}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = resolve_config(args)

    if args.input is not None and args.input != "-" and not os.path.isfile(args.input):
        raise SystemExit(f"Input file not found: {args.input}")
    text = read_text(args.input)

    mode = cfg["mode"]
    try:
        result = run_codec(
            text,
            whitespace=cfg["tokenizer"]["whitespace"],
            on_missing=cfg["encoder"]["on_missing"],
            decode=(mode == "roundtrip"),
            progress=args.progress,
            verbose=args.verbose,
        )
        if args.verify:
            verify_roundtrip(result)
            log("codec", "round-trip verified", args.verbose)
    except CodecError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    configure_stdout()
    if mode == "roundtrip":
        print(format_roundtrip(result))
    else:
        print(format_listing(result, delimiter=cfg["output"]["delimiter"]))

    if args.report:
        save_json(codec_stats(result, text=text, top_n=cfg["output"]["top_n"]), args.report)
        log("report", f"Saved statistics to {args.report}", args.verbose)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
