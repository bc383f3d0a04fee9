"""Nucleotide encoding
======================

A KFF file fixes the 2-bit code of each nucleotide with a single encoding byte.
The codes of A, C, T and G sit at bit positions 6-7, 4-5, 2-3 and 0-1.

Packed kmers are stored most-significant code first and right-aligned: a kmer
of size k fills :func:`~kffpy.parser.primitive.bytes_for_k` bytes and any
padding occupies the high bits of the first byte.
"""

import numbers

import attr
import numpy as np
from Bio.Seq import reverse_complement

from kffpy.error import BadEncodingError
from kffpy.parser.constants import (
    ENCODING_LETTERS, ENCODING_SHIFTS, LETTER_MASK, BITS_PER_LETTER,
)
from kffpy.parser.primitive import bytes_for_k

UNASSIGNED_LETTER = 'N'


def revcomp(kmer_string):
    """Return the reverse complement of a kmer string"""
    return reverse_complement(kmer_string)


def split_encoding(value):
    """Return the (A, C, T, G) codes of an encoding byte

    >>> split_encoding(0b00011011)
    (0, 1, 2, 3)
    """
    return tuple(int((value >> shift) & LETTER_MASK) for shift in ENCODING_SHIFTS)


def is_valid_encoding(value):
    """Return True if an encoding byte passes the KFF distinctness check

    C and G are not compared against each other, so an encoding that gives
    them the same code is accepted.
    """
    if not isinstance(value, numbers.Integral) or not 0 <= value <= 0xff:
        return False
    a, c, t, g = split_encoding(value)
    return a != c and a != t and a != g and c != t and t != g


def check_encoding(value):
    if not is_valid_encoding(value):
        raise BadEncodingError(value)


def valid_encoding(_, attribute, value):
    check_encoding(value)


@attr.s(slots=True, frozen=True)
class Encoding(object):
    value = attr.ib(validator=[valid_encoding])
    _code_to_letter = attr.ib(init=False, repr=False, eq=False)

    def __attrs_post_init__(self):
        letters = [UNASSIGNED_LETTER] * 4
        for letter, code in reversed(list(zip(ENCODING_LETTERS, self.codes))):
            letters[code] = letter
        object.__setattr__(self, '_code_to_letter', np.array(letters))

    @property
    def codes(self):
        return split_encoding(self.value)

    @property
    def a(self):
        return self.codes[0]

    @property
    def c(self):
        return self.codes[1]

    @property
    def t(self):
        return self.codes[2]

    @property
    def g(self):
        return self.codes[3]

    @property
    def is_bijective(self):
        return len(set(self.codes)) == len(ENCODING_LETTERS)

    @property
    def letter_to_code(self):
        return dict(zip(ENCODING_LETTERS, self.codes))

    @property
    def code_to_letter(self):
        return {code: str(letter) for code, letter in enumerate(self._code_to_letter)}

    def pack(self, kmer_string):
        """Pack a nucleotide string into its 2-bit KFF representation"""
        letter_to_code = self.letter_to_code
        packed = 0
        for letter in kmer_string.upper():
            try:
                code = letter_to_code[letter]
            except KeyError:
                raise ValueError('Cannot encode letter {!r}'.format(letter)) from None
            packed = (packed << BITS_PER_LETTER) | code
        return packed.to_bytes(bytes_for_k(len(kmer_string)), 'big')

    def unpack(self, raw, k):
        """Unpack k nucleotides from their 2-bit KFF representation"""
        if len(raw) != bytes_for_k(k):
            raise ValueError(
                'kmer of size {} needs {} bytes, got {}'.format(k, bytes_for_k(k), len(raw))
            )
        if k == 0:
            return ''
        as_bytes = np.frombuffer(bytes(raw), dtype=np.uint8)
        codes = (as_bytes[:, np.newaxis] >> np.array(ENCODING_SHIFTS, dtype=np.uint8)) & LETTER_MASK
        codes = codes.ravel()[-k:]
        return ''.join(self._code_to_letter[codes])

    def canonical(self, kmer_string):
        """Return the kmer or its reverse complement, whichever packs to the lower value

        KFF orders kmers by their encoded value, so the canonical form depends
        on the encoding and not on alphabetical order.
        """
        alt_kmer_string = revcomp(kmer_string)
        if self.pack(alt_kmer_string) < self.pack(kmer_string):
            return alt_kmer_string
        return kmer_string
