import numpy as np

KFF_MAGIC_WORD = b'KFF'
KFF_MAX_MAJOR_VERSION = 1
KFF_MAX_MINOR_VERSION = 0
DEFAULT_ENCODING = 0b00011011
UINT8_T = np.uint8().itemsize
UINT16_T = np.uint16().itemsize
UINT32_T = np.uint32().itemsize
UINT64_T = np.uint64().itemsize
BITS_IN_BYTE = 8
BITS_PER_LETTER = 2
LETTERS_PER_BYTE = BITS_IN_BYTE // BITS_PER_LETTER
LETTER_MASK = 0b11
ENCODING_LETTERS = 'ACTG'
ENCODING_SHIFTS = (6, 4, 2, 0)
FIXED_HEADER_SIZE = len(KFF_MAGIC_WORD) + 5 * UINT8_T + UINT32_T
MAX_FREE_BLOCK_SIZE = 2 ** (UINT32_T * BITS_IN_BYTE) - 1
