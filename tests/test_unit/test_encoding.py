import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as s

from kffpy.encoding import Encoding, split_encoding, is_valid_encoding, revcomp
from kffpy.error import BadEncodingError
from kffpy.parser.primitive import bytes_for_k

ACTG = 0b00011011


@s.composite
def bijective_encodings(draw):
    codes = draw(s.permutations([0, 1, 2, 3]))
    return Encoding((codes[0] << 6) | (codes[1] << 4) | (codes[2] << 2) | codes[3])


class TestSplitEncoding(object):
    def test_splits_most_significant_field_first(self):
        assert split_encoding(0b00101110) == (0, 2, 3, 2)
        assert split_encoding(0b11100100) == (3, 2, 1, 0)

    def test_checks_five_pairs(self):
        assert is_valid_encoding(0b00101110)
        assert is_valid_encoding(ACTG)
        assert not is_valid_encoding(0b00000000)
        assert not is_valid_encoding(0b00100100)

    def test_accepts_numpy_integers(self):
        assert is_valid_encoding(np.uint8(ACTG))
        assert split_encoding(np.uint8(ACTG)) == (0, 1, 2, 3)
        assert not is_valid_encoding(np.uint8(0))

    def test_rejects_non_integers(self):
        assert not is_valid_encoding(27.0)
        assert not is_valid_encoding('\x1b')


class TestRevcomp(object):
    def test_reverse_complements(self):
        assert revcomp('AACG') == 'CGTT'


class TestEncoding(object):
    def test_raises_on_invalid_byte(self):
        with pytest.raises(BadEncodingError):
            Encoding(0)

    def test_maps_letters_to_codes(self):
        encoding = Encoding(ACTG)

        assert encoding.letter_to_code == {'A': 0, 'C': 1, 'T': 2, 'G': 3}
        assert encoding.code_to_letter == {0: 'A', 1: 'C', 2: 'T', 3: 'G'}
        assert encoding.is_bijective

    def test_prefers_c_when_c_and_g_share_a_code(self):
        encoding = Encoding(0b00101110)

        assert not encoding.is_bijective
        assert encoding.code_to_letter == {0: 'A', 1: 'N', 2: 'C', 3: 'T'}

    def test_packs_right_aligned(self):
        encoding = Encoding(ACTG)

        assert encoding.pack('') == b''
        assert encoding.pack('G') == b'\x03'
        assert encoding.pack('ACTG') == bytes([0b00011011])
        assert encoding.pack('ACTGC') == bytes([0b00000000, 0b01101101])

    def test_packs_lower_case(self):
        assert Encoding(ACTG).pack('actg') == Encoding(ACTG).pack('ACTG')

    def test_raises_on_unknown_letter(self):
        with pytest.raises(ValueError):
            Encoding(ACTG).pack('ACNG')

    def test_unpacks(self):
        assert Encoding(ACTG).unpack(bytes([0b00000000, 0b01101101]), 5) == 'ACTGC'
        assert Encoding(ACTG).unpack(b'', 0) == ''

    def test_raises_on_unpack_of_wrong_size(self):
        with pytest.raises(ValueError):
            Encoding(ACTG).unpack(b'\x00', 5)

    @given(bijective_encodings(), s.text(alphabet='ACGT', max_size=40))
    def test_unpack_inverts_pack(self, encoding, kmer_string):
        packed = encoding.pack(kmer_string)

        assert len(packed) == bytes_for_k(len(kmer_string))
        assert encoding.unpack(packed, len(kmer_string)) == kmer_string

    @given(bijective_encodings(), s.text(alphabet='ACGT', min_size=1, max_size=40))
    def test_padding_bits_are_zero(self, encoding, kmer_string):
        packed = encoding.pack(kmer_string)
        n_padding_bits = len(packed) * 8 - 2 * len(kmer_string)

        assert packed[0] >> (8 - n_padding_bits) == 0

    def test_canonical_follows_encoding_order(self):
        assert Encoding(ACTG).canonical('TTG') == 'CAA'
        assert Encoding(ACTG).canonical('CAA') == 'CAA'
        # G sorts before A here, so the reverse complement wins
        assert Encoding(0b11000110).canonical('AAC') == 'GTT'

    @given(bijective_encodings(), s.text(alphabet='ACGT', min_size=1, max_size=31))
    def test_canonical_is_same_for_kmer_and_revcomp(self, encoding, kmer_string):
        canonical = encoding.canonical(kmer_string)

        assert canonical in (kmer_string, revcomp(kmer_string))
        assert canonical == encoding.canonical(revcomp(kmer_string))
        assert encoding.pack(canonical) <= encoding.pack(revcomp(canonical))
