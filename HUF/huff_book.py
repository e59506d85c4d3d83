import struct
from typing import Dict, Tuple

MAGIC = b"HUFB"
VERSION = 1

# Codebook sidecar (little-endian), kept apart from the bare payload:
# magic(4) version(1) nsyms(u16) total_bits(u64)
HDR_FMT = "<4sBHQ"
HDR_SIZE = struct.calcsize(HDR_FMT)

# entry: symbol(u8) codelen(u8), then ceil(codelen/8) code bytes MSB-first, zero padded
ENT_FMT = "<BB"
ENT_SIZE = struct.calcsize(ENT_FMT)

def _pack_code(bits: str) -> bytes:
    nbytes = (len(bits) + 7) // 8
    return int(bits.ljust(nbytes * 8, "0"), 2).to_bytes(nbytes, "big")

def _unpack_code(data: bytes, length: int) -> str:
    return format(int.from_bytes(data, "big"), f"0{len(data) * 8}b")[:length]

def write_codebook(f, codes: Dict[int, str], total_bits: int):
    if not (1 <= len(codes) <= 256):
        raise ValueError("codebook must hold 1..256 symbols")
    f.write(struct.pack(HDR_FMT, MAGIC, VERSION, len(codes), total_bits))
    for sym, bits in codes.items():
        if not (0 <= sym <= 255):
            raise ValueError("symbol out of byte range")
        if not (1 <= len(bits) <= 255):
            raise ValueError("code length out of range (1..255)")
        f.write(struct.pack(ENT_FMT, sym, len(bits)))
        f.write(_pack_code(bits))

def read_codebook(f) -> Tuple[Dict[int, str], int]:
    data = f.read(HDR_SIZE)
    if len(data) != HDR_SIZE:
        raise ValueError("Malformed codebook: header too short")
    magic, ver, nsyms, total_bits = struct.unpack(HDR_FMT, data)
    if magic != MAGIC:
        raise ValueError("Bad magic number (not HUFB)")
    if ver != VERSION:
        raise ValueError(f"Unsupported version: {ver}")
    if not (1 <= nsyms <= 256):
        raise ValueError(f"Malformed codebook: bad symbol count {nsyms}")
    codes = {}
    for _ in range(nsyms):
        ent = f.read(ENT_SIZE)
        if len(ent) != ENT_SIZE:
            raise ValueError("Malformed codebook: table truncated")
        sym, L = struct.unpack(ENT_FMT, ent)
        if L == 0:
            raise ValueError(f"Malformed codebook: zero-length code for symbol {sym}")
        if sym in codes:
            raise ValueError(f"Malformed codebook: duplicate symbol {sym}")
        nbytes = (L + 7) // 8
        raw = f.read(nbytes)
        if len(raw) != nbytes:
            raise ValueError("Malformed codebook: table truncated")
        codes[sym] = _unpack_code(raw, L)
    return codes, total_bits
