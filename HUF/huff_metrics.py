import numpy as np

def entropy_bits(freqs) -> float:
    """Shannon entropy of the byte distribution, bits per symbol."""
    f = np.asarray(freqs, dtype=np.float64)
    f = f[f > 0]
    if f.size < 2:
        return 0.0
    p = f / f.sum()
    return float(-(p * np.log2(p)).sum())

def payload_bits(freqs, codes) -> int:
    return int(sum(int(freqs[sym]) * len(bits) for sym, bits in codes.items()))

def mean_code_length(freqs, codes) -> float:
    total = int(np.asarray(freqs).sum())
    if total == 0:
        return 0.0
    return payload_bits(freqs, codes) / total

def kraft_sum(codes) -> float:
    return float(sum(2.0 ** -len(bits) for bits in codes.values()))

def compression_ratio(n_in: int, n_out: int) -> float:
    if n_out == 0:
        return float("inf")
    return n_in / n_out
