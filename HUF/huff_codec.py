import io
import os
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from byte_freq import CHUNK_SIZE, count_bytes, count_frequencies, nonzero_items, format_byte
from huff_tree import tree_from_frequencies
from huff_codes import generate_codes, build_decode_trie, decode_one_symbol
from huff_book import write_codebook, read_codebook
from bitpack import BitWriter, BitReader
from huff_metrics import payload_bits

@dataclass
class EncodeResult:
    """
    payload is None when the packed bits went to a file (encode_file);
    only encode_bytes returns them in memory.
    """
    payload: Optional[bytes]
    codes: Dict[int, str]
    freqs: np.ndarray
    total_bits: int

    @property
    def payload_len(self) -> int:
        return (self.total_bits + 7) // 8

def _print_freqs(freqs):
    print("[huff_codec] byte frequencies:")
    for b, n in nonzero_items(freqs):
        print(f"[huff_codec]   {format_byte(b)}: {n}")

def _print_codes(codes):
    print("[huff_codec] codes:")
    for b in sorted(codes):
        print(f"[huff_codec]   {format_byte(b)}: {codes[b]}")

def build_codes(freqs, *, debug: bool = False) -> Dict[int, str]:
    """
    Frequencies -> Huffman tree -> codebook.
    Raises EmptyInputError when no byte occurs.
    """
    if debug:
        _print_freqs(freqs)
    root = tree_from_frequencies(freqs)
    codes = generate_codes(root)
    if debug:
        _print_codes(codes)
    return codes

def encode_stream(src, dst, codes, chunk_size: int = CHUNK_SIZE) -> int:
    """
    Second pass: rewind src, pack every byte's code MSB-first into dst.
    Returns the number of code bits emitted (padding excluded).
    """
    table = [None] * 256
    for sym, bits in codes.items():
        table[sym] = (int(bits, 2), len(bits))

    src.seek(0)
    bw = BitWriter()
    while True:
        chunk = src.read(chunk_size)
        if not chunk:
            break
        for b in chunk:
            entry = table[b]
            if entry is None:
                raise ValueError(f"byte 0x{b:02x} has no code (stream changed between passes?)")
            bw.write_code(*entry)
        dst.write(bw.take())
    dst.write(bw.finish())
    return bw.total_bits

def encode_bytes(data: bytes, *, debug: bool = False) -> EncodeResult:
    freqs = count_bytes(data)
    codes = build_codes(freqs, debug=debug)
    out = io.BytesIO()
    nbits = encode_stream(io.BytesIO(bytes(data)), out, codes)
    return EncodeResult(payload=out.getvalue(), codes=codes, freqs=freqs, total_bits=nbits)

def encode_file(in_path, out_path, *, debug: bool = False, codebook_path=None) -> EncodeResult:
    """
    Encode in_path into out_path (bare packed bits, no header).
    The codebook is only written when codebook_path is given.
    """
    if os.path.exists(out_path) and os.path.samefile(in_path, out_path):
        raise ValueError(f"output {out_path} is the input file")
    with open(in_path, "rb") as src:
        freqs = count_frequencies(src)
        codes = build_codes(freqs, debug=debug)
        with open(out_path, "wb") as dst:
            nbits = encode_stream(src, dst, codes)
    if nbits != payload_bits(freqs, codes):
        raise ValueError(f"{in_path} changed between passes: packed {nbits} bits, "
                         f"expected {payload_bits(freqs, codes)}")

    if codebook_path is not None:
        with open(codebook_path, "wb") as f:
            write_codebook(f, codes, nbits)

    return EncodeResult(payload=None, codes=codes, freqs=freqs, total_bits=nbits)

def decode_bytes(payload: bytes, codes, nbits: Optional[int] = None) -> bytes:
    """
    Greedy prefix decode of a packed payload.
    With nbits=None the whole payload is read and a trailing partial code
    (pad bits) is dropped.
    """
    trie = build_decode_trie(codes)
    if nbits is not None and nbits > len(payload) * 8:
        raise EOFError(f"payload holds {len(payload) * 8} bits, expected {nbits}")
    br = BitReader(payload, nbits)
    out = bytearray()
    while br.remaining() > 0:
        start = br.pos
        try:
            out.append(decode_one_symbol(trie, br))
        except EOFError:
            if nbits is not None:
                raise
            if br.pos - start >= 8:
                raise ValueError("Invalid Huffman code (corrupt stream)")
            break
    return bytes(out)

def decode_file(in_path, codebook_path, out_path) -> int:
    with open(codebook_path, "rb") as f:
        codes, nbits = read_codebook(f)
    with open(in_path, "rb") as f:
        payload = f.read()
    data = decode_bytes(payload, codes, nbits)
    with open(out_path, "wb") as f:
        f.write(data)
    return len(data)
