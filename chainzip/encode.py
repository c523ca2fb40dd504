import argparse
import os
import sys

from .bitstream import serialize_tree, to_bytes
from .chain_tree import build_chain_tree, build_codebook
from .codec import decode_chain, encode_symbols
from .errors import CodecError
from .ranking import rank_symbols
from .stats import compression_ratio, entropy_bits, mean_code_length

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Compress a file with the frequency-ranked chain code.")
    ap.add_argument("--input", required=True, help="path to the file to compress")
    ap.add_argument("--output", required=True, help="path to the output container")
    ap.add_argument("--show-ranks", action="store_true", help="print symbols in rank order")
    ap.add_argument("--verify", action="store_true", help="decode the result and compare with the input")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        data = f.read()

    try:
        tree = build_chain_tree(rank_symbols(data))
        codes = build_codebook(tree)
        payload_bytes, padding = encode_symbols(data, codes)
        tree_bytes = serialize_tree(tree)
        blob = to_bytes(padding, tree_bytes, payload_bytes)
        if args.verify and decode_chain(padding, tree_bytes, payload_bytes) != data:
            print("[encode] error: round-trip failed (data corrupted)", file=sys.stderr)
            return 1
    except CodecError as exc:
        print(f"[encode] error: {exc}", file=sys.stderr)
        return 1

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(blob)

    print(f"[encode] wrote {args.output}")
    print(f"[encode] original={len(data)}B, encoded={len(blob)}B, "
          f"tree={len(tree_bytes)}B, payload={len(payload_bytes)}B, padding={padding}")
    print(f"[encode] ratio={compression_ratio(len(data), len(blob)):.3f}, "
          f"entropy={entropy_bits(data):.3f} bits/B, "
          f"mean_code_len={mean_code_length(data, codes):.3f} bits/B")
    if args.show_ranks:
        print(f"[encode] ranks={tree.ranked}")
    if args.verify:
        print("[encode] verify ok")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
