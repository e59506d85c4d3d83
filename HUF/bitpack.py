from typing import Optional

class BitWriter:
    def __init__(self):
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7)
        self.total_bits = 0

    def write_code(self, code: int, length: int):
        """Write 'length' bits of code (MSB-first)."""
        self._cur = (self._cur << length) | (code & ((1 << length) - 1))
        self._nbits += length
        self.total_bits += length
        while self._nbits >= 8:
            self._nbits -= 8
            self._buf.append(self._cur >> self._nbits)
            self._cur &= (1 << self._nbits) - 1

    def write_bits(self, bits: str):
        """Write a '0'/'1' string, first character first."""
        if bits:
            self.write_code(int(bits, 2), len(bits))

    def take(self) -> bytes:
        """Whole bytes completed so far; the partial byte stays buffered."""
        out = bytes(self._buf)
        self._buf.clear()
        return out

    def finish(self) -> bytes:
        """Pad remaining bits with zeros."""
        if self._nbits > 0:
            self._buf.append(self._cur << (8 - self._nbits))
            self._cur = 0
            self._nbits = 0
        return self.take()

class BitReader:
    def __init__(self, data: bytes, nbits: Optional[int] = None):
        self.data = data
        self.nbits = len(data) * 8 if nbits is None else nbits
        self.pos = 0  # absolute bit position, MSB-first

    def remaining(self) -> int:
        return self.nbits - self.pos

    def read_bit(self) -> int:
        if self.pos >= self.nbits or (self.pos >> 3) >= len(self.data):
            raise EOFError("Unexpected end of bitstream")
        b = (self.data[self.pos >> 3] >> (7 - (self.pos & 7))) & 1
        self.pos += 1
        return b
