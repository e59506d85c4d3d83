import numpy as np

ALPHABET_SIZE = 256
CHUNK_SIZE = 1 << 16

def count_bytes(data) -> np.ndarray:
    """
    Frequency table for an in-memory byte string.
    Output: int64 array of length 256, index = byte value.
    """
    buf = np.frombuffer(bytes(data), dtype=np.uint8)
    return np.bincount(buf, minlength=ALPHABET_SIZE).astype(np.int64)

def count_frequencies(f, chunk_size: int = CHUNK_SIZE) -> np.ndarray:
    """
    First pass over a binary file object: read until EOF, accumulating counts.
    The stream is left at EOF; the caller rewinds before encoding.
    """
    freqs = np.zeros(ALPHABET_SIZE, dtype=np.int64)
    while True:
        chunk = f.read(chunk_size)
        if not chunk:
            break
        freqs += np.bincount(np.frombuffer(chunk, dtype=np.uint8), minlength=ALPHABET_SIZE)
    return freqs

def nonzero_items(freqs):
    """(byte, count) pairs for every byte that occurs, ascending byte order."""
    freqs = np.asarray(freqs)
    idx = np.flatnonzero(freqs)
    return [(int(b), int(freqs[b])) for b in idx]

def format_byte(b: int) -> str:
    ch = chr(b)
    if 0x20 <= b < 0x7f:
        return f"0x{b:02x} {ch!r}"
    return f"0x{b:02x}"
