import argparse
import os
import sys

from .bitstream import from_bytes
from .codec import decode_chain
from .errors import CodecError

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Decompress a chain-code container.")
    ap.add_argument("--input", required=True, help="path to the container")
    ap.add_argument("--output", required=True, help="path to the decoded file")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        blob = f.read()

    try:
        c = from_bytes(blob)
        data = decode_chain(c.padding, c.tree, c.data)
    except CodecError as exc:
        print(f"[decode] error: {exc}", file=sys.stderr)
        return 1

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(data)

    print(f"[decode] wrote {args.output}")
    print(f"[decode] encoded={len(blob)}B, tree={len(c.tree)}B, padding={c.padding}, decoded={len(data)}B")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
