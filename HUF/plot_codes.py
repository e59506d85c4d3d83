import argparse
import os
import sys
import numpy as np
import matplotlib.pyplot as plt

from byte_freq import count_frequencies
from huff_codec import build_codes
from huff_tree import EmptyInputError

def plot_code_stats(freqs, codes, out_path, show=False):
    """
    Two panels: byte frequency histogram, and code length per occurring byte.
    """
    freqs = np.asarray(freqs)
    syms = np.array(sorted(codes), dtype=np.int64)
    lens = np.array([len(codes[s]) for s in syms], dtype=np.int64)

    fig = plt.figure(figsize=(10, 3))
    plt.subplot(1, 2, 1)
    plt.bar(np.arange(freqs.size), freqs, width=1.0)
    plt.xlim(-0.5, freqs.size - 0.5)
    plt.title("Byte frequency", fontsize=9)
    plt.xlabel("byte value")

    plt.subplot(1, 2, 2)
    plt.stem(syms, lens)
    plt.xlim(-0.5, freqs.size - 0.5)
    plt.title("Huffman code length", fontsize=9)
    plt.xlabel("byte value")
    plt.ylabel("bits")

    plt.tight_layout()
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    plt.savefig(out_path, dpi=150)
    if show:
        plt.show()
    plt.close(fig)

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to input file")
    ap.add_argument("--output", default="results/fig_codes.png", help="figure path")
    ap.add_argument("--show", action="store_true")
    args = ap.parse_args(argv)

    try:
        with open(args.input, "rb") as f:
            freqs = count_frequencies(f)
        codes = build_codes(freqs)
        plot_code_stats(freqs, codes, args.output, show=args.show)
    except EmptyInputError as e:
        print(f"[plot_codes] {args.input}: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"[plot_codes] error: {e}", file=sys.stderr)
        return 1

    print(f"[plot_codes] wrote {args.output}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
