import logging
import numbers

import attr

from kffpy.encoding import Encoding, valid_encoding
from kffpy.error import (
    KffError, MissingMagicError, MajorVersionTooHighError, MinorVersionTooHighError,
    FreeBlockTooLargeError,
)
from kffpy.parser.constants import (
    KFF_MAGIC_WORD, KFF_MAX_MAJOR_VERSION, KFF_MAX_MINOR_VERSION,
    DEFAULT_ENCODING, MAX_FREE_BLOCK_SIZE,
)
from kffpy.parser.primitive import KffReader, KffWriter

logger = logging.getLogger(__name__)
is_integer = attr.validators.instance_of(numbers.Integral)


def major_version_supported(_, attribute, value):
    if value > KFF_MAX_MAJOR_VERSION:
        raise MajorVersionTooHighError(value)


def minor_version_supported(_, attribute, value):
    if value > KFF_MAX_MINOR_VERSION:
        raise MinorVersionTooHighError(value)


def non_negative(_, attribute, value):
    if value < 0:
        raise KffError("'{}' has to be 0 or greater!".format(attribute.name))


def bytes_like(value):
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError("'free_block' has to be bytes, not {}".format(type(value).__name__))
    return bytes(value)


def fits_length_prefix(_, attribute, value):
    if len(value) > MAX_FREE_BLOCK_SIZE:
        raise FreeBlockTooLargeError(len(value))


@attr.s(slots=True, frozen=True)
class Header(object):
    major_version = attr.ib(
        KFF_MAX_MAJOR_VERSION,
        validator=[is_integer, major_version_supported, non_negative]
    )
    minor_version = attr.ib(
        KFF_MAX_MINOR_VERSION,
        validator=[is_integer, minor_version_supported, non_negative]
    )
    encoding = attr.ib(DEFAULT_ENCODING, validator=[valid_encoding])
    uniq_kmer = attr.ib(False, converter=bool)
    canonical_kmer = attr.ib(False, converter=bool)
    free_block = attr.ib(b'', converter=bytes_like, validator=[fits_length_prefix])

    def __attrs_post_init__(self):
        if not self.nucleotide_encoding.is_bijective:
            logger.info('Encoding {:#010b} gives C and G the same code'.format(self.encoding))

    @property
    def nucleotide_encoding(self):
        return Encoding(self.encoding)

    def canonicalize(self, kmer_string):
        """Return the form in which this file stores a kmer"""
        if self.canonical_kmer:
            return self.nucleotide_encoding.canonical(kmer_string)
        return kmer_string

    @classmethod
    def from_stream(cls, stream):
        return (HeaderFromStreamBuilder(KffReader(stream))
                .extract_magic_word()
                .extract_versions()
                .extract_encoding()
                .extract_flags()
                .extract_free_block()
                .build())

    def dump(self, buffer):
        writer = KffWriter(buffer)
        writer.write_bytes(KFF_MAGIC_WORD)
        writer.write_u8(self.major_version)
        writer.write_u8(self.minor_version)
        writer.write_u8(self.encoding)
        writer.write_bool(self.uniq_kmer)
        writer.write_bool(self.canonical_kmer)
        writer.write_u32(len(self.free_block))
        writer.write_bytes(self.free_block)


@attr.s(slots=True)
class HeaderFromStreamBuilder(object):
    """Collects raw header fields from a stream before the Header is validated"""
    reader = attr.ib()
    fields = attr.ib(attr.Factory(dict))

    def extract_magic_word(self):
        magic_word = self.reader.read_fixed_bytes(len(KFF_MAGIC_WORD))
        if magic_word != KFF_MAGIC_WORD:
            raise MissingMagicError('start', magic_word)
        return self

    def extract_versions(self):
        self.fields['major_version'] = self.reader.read_u8()
        self.fields['minor_version'] = self.reader.read_u8()
        return self

    def extract_encoding(self):
        self.fields['encoding'] = self.reader.read_u8()
        return self

    def extract_flags(self):
        self.fields['uniq_kmer'] = self.reader.read_bool()
        self.fields['canonical_kmer'] = self.reader.read_bool()
        return self

    def extract_free_block(self):
        free_block_size = self.reader.read_u32()
        logger.debug('Free block size is {}'.format(free_block_size))
        self.fields['free_block'] = self.reader.read_bytes(free_block_size)
        return self

    def build(self):
        return Header(**self.fields)
