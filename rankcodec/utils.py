import os
import sys
import json

# Undecodable input bytes become lone surrogates and are written back unchanged
ENCODING = "utf-8"
ERRORS = "surrogateescape"


def save_json(obj, path: str):
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, "w", encoding=ENCODING, errors=ERRORS) as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)

def load_json(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

def read_text(path: str = None) -> str:
    # Whole input is buffered before any processing starts
    if path is None or path == "-":
        raw = getattr(sys.stdin, "buffer", None)
        if raw is None:
            return sys.stdin.read()
        return raw.read().decode(ENCODING, errors=ERRORS)
    with open(path, "r", encoding=ENCODING, errors=ERRORS) as f:
        return f.read()

def configure_stdout():
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding=ENCODING, errors=ERRORS)

def log(tag: str, msg: str, verbose: bool = True):
    # stdout is reserved for codec output
    if verbose:
        print(f"[{tag}] {msg}", file=sys.stderr)
