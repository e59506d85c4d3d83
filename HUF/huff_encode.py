import argparse
import sys

from huff_codec import encode_file
from huff_tree import EmptyInputError
from huff_metrics import entropy_bits, mean_code_length, compression_ratio

def main(argv=None):
    ap = argparse.ArgumentParser(description="Huffman-encode a file into bare packed code bits")
    ap.add_argument("--input", required=True, help="path to input file (any bytes)")
    ap.add_argument("--output", default="output.huff", help="path to packed output (default output.huff)")
    ap.add_argument("--codebook", default=None, help="also write the codebook sidecar here")
    ap.add_argument("-d", "--debug", action="store_true", help="list byte frequencies and codes")
    args = ap.parse_args(argv)

    try:
        res = encode_file(args.input, args.output, debug=args.debug, codebook_path=args.codebook)
    except EmptyInputError as e:
        print(f"[huff_encode] {args.input}: {e}", file=sys.stderr)
        return 2
    except (OSError, ValueError) as e:
        print(f"[huff_encode] error: {e}", file=sys.stderr)
        return 1

    n_in = int(res.freqs.sum())
    print(f"[huff_encode] wrote {args.output}")
    print(f"[huff_encode] symbols={len(res.codes)}, input={n_in} bytes, payload={res.payload_len} bytes ({res.total_bits} bits)")
    print(f"[huff_encode] entropy={entropy_bits(res.freqs):.4f} bits/sym, "
          f"mean code={mean_code_length(res.freqs, res.codes):.4f} bits/sym, "
          f"ratio={compression_ratio(n_in, res.payload_len):.3f}")
    if args.codebook is not None:
        print(f"[huff_encode] codebook -> {args.codebook}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
