import argparse
import sys

from huff_codec import decode_file

def main(argv=None):
    ap = argparse.ArgumentParser(description="Decode a packed payload using its codebook sidecar")
    ap.add_argument("--input", required=True, help="path to packed payload")
    ap.add_argument("--codebook", required=True, help="path to codebook sidecar written by huff_encode")
    ap.add_argument("--output", required=True, help="path to decoded output")
    args = ap.parse_args(argv)

    try:
        n = decode_file(args.input, args.codebook, args.output)
    except (OSError, ValueError, EOFError) as e:
        print(f"[huff_decode] error: {e}", file=sys.stderr)
        return 1

    print(f"[huff_decode] wrote {args.output} ({n} bytes)")
    return 0

if __name__ == "__main__":
    sys.exit(main())
