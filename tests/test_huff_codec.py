import io
import math
import random

import pytest

from huff_codec import encode_bytes, encode_stream, encode_file, decode_bytes, decode_file, build_codes
from huff_tree import EmptyInputError
from huff_book import read_codebook
from byte_freq import count_bytes


def test_aab_payload():
    res = encode_bytes(b"aab")
    assert res.total_bits == 3
    assert res.payload == b"\xc0"
    assert res.payload_len == 1


def test_abracadabra_payload():
    res = encode_bytes(b"abracadabra")
    assert res.total_bits == 23
    assert res.payload == bytes([0x6E, 0x8A, 0xDC])


def test_single_symbol_one_bit_per_byte():
    res = encode_bytes(b"A" * 10)
    assert res.codes == {ord("A"): "0"}
    assert res.total_bits == 10
    assert res.payload == b"\x00\x00"


def test_full_alphabet_encodes_to_itself():
    data = bytes(range(256))
    assert encode_bytes(data).payload == data


def test_empty_input_is_reported():
    with pytest.raises(EmptyInputError):
        encode_bytes(b"")


@pytest.mark.parametrize("seed", [11, 12, 13])
def test_output_length_and_roundtrip(seed):
    rng = random.Random(seed)
    data = bytes(rng.getrandbits(8) % rng.choice([3, 17, 256]) for _ in range(rng.randint(2, 5000)))
    if len(set(data)) < 2:
        data += b"\x01\x02"
    res = encode_bytes(data)
    expected_bits = sum(len(res.codes[b]) for b in data)
    assert res.total_bits == expected_bits
    assert len(res.payload) == math.ceil(expected_bits / 8)
    assert decode_bytes(res.payload, res.codes, res.total_bits) == data


def test_deterministic():
    data = b"the quick brown fox jumps over the lazy dog" * 7
    a = encode_bytes(data)
    b = encode_bytes(data)
    assert a.payload == b.payload
    assert a.codes == b.codes


def test_debug_listing_does_not_change_output(capsys):
    quiet = encode_bytes(b"aab")
    assert capsys.readouterr().out == ""
    loud = encode_bytes(b"aab", debug=True)
    out = capsys.readouterr().out
    assert "byte frequencies" in out
    assert "0x61 'a': 2" in out
    assert "0x62 'b': 0" in out
    assert loud.payload == quiet.payload


def test_encode_stream_rewinds_source():
    data = b"mississippi"
    codes = build_codes(count_bytes(data))
    src = io.BytesIO(data)
    src.read()
    dst = io.BytesIO()
    nbits = encode_stream(src, dst, codes, chunk_size=3)
    assert dst.getvalue() == encode_bytes(data).payload
    assert nbits == encode_bytes(data).total_bits


def test_encode_stream_rejects_unknown_byte():
    with pytest.raises(ValueError):
        encode_stream(io.BytesIO(b"abz"), io.BytesIO(), {ord("a"): "0", ord("b"): "1"})


def test_decode_truncated_payload():
    res = encode_bytes(b"abracadabra")
    with pytest.raises(EOFError):
        decode_bytes(res.payload[:-1], res.codes, res.total_bits)


def test_decode_invalid_code():
    with pytest.raises(ValueError):
        decode_bytes(b"\xc0", {1: "0", 2: "10"}, 2)


def test_decode_without_bit_count_drops_partial_code():
    codes = {ord("x"): "10", ord("y"): "11", ord("z"): "0"}
    # x y + pad "1000" -> x, then trailing "00" decodes as z z
    assert decode_bytes(bytes([0b10111000]), codes) == b"xyxzz"
    # a trailing lone "1" cannot complete a code
    assert decode_bytes(bytes([0b10110111]), codes) == b"xyzy"


def test_encode_file_and_decode_file(tmp_path):
    data = b"Hello World " * 50
    src = tmp_path / "in.bin"
    src.write_bytes(data)
    out = tmp_path / "out.huff"
    book = tmp_path / "out.book"

    res = encode_file(src, out, codebook_path=book)
    payload = out.read_bytes()
    assert payload == encode_bytes(data).payload
    assert len(payload) == res.payload_len

    with open(book, "rb") as f:
        codes, nbits = read_codebook(f)
    assert codes == res.codes
    assert nbits == res.total_bits

    back = tmp_path / "back.bin"
    assert decode_file(out, book, back) == len(data)
    assert back.read_bytes() == data


def test_encode_file_empty_writes_nothing(tmp_path):
    src = tmp_path / "empty.bin"
    src.write_bytes(b"")
    out = tmp_path / "out.huff"
    with pytest.raises(EmptyInputError):
        encode_file(src, out)
    assert not out.exists()


def test_encode_file_without_codebook(tmp_path):
    src = tmp_path / "in.bin"
    src.write_bytes(b"aab")
    out = tmp_path / "out.huff"
    encode_file(src, out)
    assert out.read_bytes() == b"\xc0"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["in.bin", "out.huff"]


def test_encode_file_result_has_no_in_memory_payload(tmp_path):
    src = tmp_path / "in.bin"
    src.write_bytes(b"aab")
    res = encode_file(src, tmp_path / "out.huff")
    assert res.payload is None
    assert res.payload_len == 1


def test_encode_file_refuses_to_overwrite_input(tmp_path):
    src = tmp_path / "in.bin"
    src.write_bytes(b"mississippi")
    with pytest.raises(ValueError):
        encode_file(src, src)
    assert src.read_bytes() == b"mississippi"


def test_encode_file_detects_stream_change_between_passes(tmp_path, monkeypatch):
    import huff_codec

    real_count = huff_codec.count_frequencies

    def stale_count(f):
        freqs = real_count(f)
        freqs[ord("a")] += 1
        return freqs

    monkeypatch.setattr(huff_codec, "count_frequencies", stale_count)
    src = tmp_path / "in.bin"
    src.write_bytes(b"aab")
    with pytest.raises(ValueError, match="changed between passes"):
        encode_file(src, tmp_path / "out.huff")
