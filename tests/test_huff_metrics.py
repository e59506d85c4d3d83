import math

import pytest

from byte_freq import count_bytes
from huff_codec import build_codes
from huff_metrics import entropy_bits, payload_bits, mean_code_length, kraft_sum, compression_ratio


def test_entropy_uniform_and_degenerate():
    assert entropy_bits(count_bytes(b"abab")) == pytest.approx(1.0)
    assert entropy_bits(count_bytes(bytes(range(256)))) == pytest.approx(8.0)
    assert entropy_bits(count_bytes(b"zzzz")) == 0.0
    assert entropy_bits(count_bytes(b"")) == 0.0


def test_mean_length_within_one_bit_of_entropy():
    data = b"abracadabra" * 9 + b"xyz"
    freqs = count_bytes(data)
    codes = build_codes(freqs)
    h = entropy_bits(freqs)
    mean = mean_code_length(freqs, codes)
    assert h <= mean < h + 1
    assert payload_bits(freqs, codes) == sum(len(codes[b]) for b in data)


def test_kraft_sum():
    assert kraft_sum(build_codes(count_bytes(b"abracadabra"))) == pytest.approx(1.0)
    assert kraft_sum(build_codes(count_bytes(b"q"))) == pytest.approx(0.5)


def test_compression_ratio():
    assert compression_ratio(100, 25) == 4.0
    assert math.isinf(compression_ratio(10, 0))
