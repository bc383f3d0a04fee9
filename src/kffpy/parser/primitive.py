"""KFF primitives
=================

This module provides the big-endian building blocks that every KFF section is
read from and written with: unsigned integers, booleans, raw byte runs,
null-terminated strings and 2-bit packed nucleotide runs.

:class:`KffReader` and :class:`KffWriter` wrap any binary stream that has a
``read(n)`` or ``write(b)`` method respectively.
"""

import struct

import attr

from kffpy.error import TruncatedError
from .constants import (
    BITS_IN_BYTE, BITS_PER_LETTER, UINT8_T, UINT16_T, UINT32_T,
    UINT64_T,
)

UINT_FORMATS = {
    UINT8_T: '>B',
    UINT16_T: '>H',
    UINT32_T: '>I',
    UINT64_T: '>Q',
}


def ceil_to_byte(n):
    """Round a number of bits up to the next multiple of eight

    >>> ceil_to_byte(9)
    16
    """
    return (n + 7) & ~7


def bits_for_k(k):
    """Return the number of bits needed to store k nucleotides"""
    return k * BITS_PER_LETTER


def bytes_for_k(k):
    """Return the number of whole bytes needed to store k nucleotides

    >>> bytes_for_k(5)
    2
    """
    return ceil_to_byte(bits_for_k(k)) // BITS_IN_BYTE


@attr.s(slots=True)
class KffReader(object):
    stream = attr.ib()

    def read_fixed_bytes(self, n):
        raw = self.stream.read(n)
        if len(raw) != n:
            raise TruncatedError(n, len(raw))
        return bytes(raw)

    def read_bytes(self, n):
        if n == 0:
            return b''
        return self.read_fixed_bytes(n)

    def read_cstring(self):
        """Read bytes up to a null terminator or the end of the stream

        The terminator is consumed but not returned.
        """
        values = bytearray()
        while True:
            byte = self.stream.read(1)
            if byte in (b'', b'\0'):
                return bytes(values)
            values += byte

    def _read_uint(self, width):
        return struct.unpack(UINT_FORMATS[width], self.read_fixed_bytes(width))[0]

    def read_u8(self):
        return self._read_uint(UINT8_T)

    def read_u16(self):
        return self._read_uint(UINT16_T)

    def read_u32(self):
        return self._read_uint(UINT32_T)

    def read_u64(self):
        return self._read_uint(UINT64_T)

    def read_bool(self):
        return self.read_u8() != 0

    def read_packed_symbols(self, k):
        """Read the raw bytes of k 2-bit packed nucleotides"""
        return self.read_bytes(bytes_for_k(k))


@attr.s(slots=True)
class KffWriter(object):
    stream = attr.ib()

    def write_bytes(self, raw):
        self.stream.write(bytes(raw))

    def write_cstring(self, raw):
        if isinstance(raw, str):
            raw = raw.encode()
        self.write_bytes(raw)
        self.write_bytes(b'\0')

    def _write_uint(self, value, width):
        max_value = 2 ** (width * BITS_IN_BYTE) - 1
        if not 0 <= value <= max_value:
            raise ValueError(
                'value {} does not fit in an unsigned {}-byte integer'.format(value, width)
            )
        self.write_bytes(struct.pack(UINT_FORMATS[width], value))

    def write_u8(self, value):
        self._write_uint(value, UINT8_T)

    def write_u16(self, value):
        self._write_uint(value, UINT16_T)

    def write_u32(self, value):
        self._write_uint(value, UINT32_T)

    def write_u64(self, value):
        self._write_uint(value, UINT64_T)

    def write_bool(self, value):
        self.write_u8(1 if value else 0)

    def write_packed_symbols(self, raw, k):
        if len(raw) != bytes_for_k(k):
            raise ValueError(
                'packed kmer of size {} needs {} bytes, got {}'.format(k, bytes_for_k(k), len(raw))
            )
        self.write_bytes(raw)
