"""KFF errors
=============

Every error raised while decoding or validating KFF data derives from
:class:`KffError`, itself a :class:`ValueError`.
"""


class KffError(ValueError):
    """Is raised if a stream does not hold valid KFF data"""
    pass


class MissingMagicError(KffError):
    def __init__(self, location, seen=None):
        self.location = location
        self.seen = seen
        super().__init__(
            "Missing magic word at {}: saw {!r} but was expecting b'KFF'".format(location, seen)
        )


class MajorVersionTooHighError(KffError):
    def __init__(self, value):
        self.value = value
        super().__init__("'major_version' is {} but has to be 1 or less".format(value))


class MinorVersionTooHighError(KffError):
    def __init__(self, value):
        self.value = value
        super().__init__("'minor_version' is {} but has to be 0".format(value))


class BadEncodingError(KffError):
    def __init__(self, value):
        self.value = value
        super().__init__(
            "'encoding' {!r} does not assign distinct 2-bit codes to A, C, T and G".format(value)
        )


class TruncatedError(KffError, EOFError):
    def __init__(self, expected, received):
        self.expected = expected
        self.received = received
        super().__init__(
            'Stream ended after {} of {} expected bytes'.format(received, expected)
        )


class FreeBlockTooLargeError(KffError):
    def __init__(self, size):
        self.size = size
        super().__init__(
            "'free_block' holds {} bytes but its size has to fit in a u32".format(size)
        )
