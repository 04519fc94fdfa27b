class PngmeException(Exception):
    '''Base class to extend in order to throw exception in pngme.

    It takes an optional argument that represents the chain of the layers that
    caused the exception: a container appends the index of the chunk that was
    being decoded so that the failure can be located into the file.
    '''

    def __init__(self, message='', chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(message)

    def __str__(self):
        message = super().__str__()
        if not self.chain:
            return message

        return '%s (at %s)' % (message, '.'.join(str(_) for _ in reversed(self.chain)))


class InvalidTypeCode(PngmeException):
    pass


class UnpackException(PngmeException):
    '''Base class for all the failures happening while decoding binary data.'''
    pass


class Truncated(UnpackException):
    pass


class CrcMismatch(UnpackException):
    '''The stored checksum doesn't match the one calculated over the type code
    and the data of the chunk.'''

    def __init__(self, expected, actual, chain=None):
        self.expected = expected
        self.actual = actual
        super().__init__('CRC mismatch: stored %08x, calculated %08x' % (expected, actual), chain=chain)


class BadSignature(UnpackException):
    pass


class NotFound(PngmeException):
    pass


class Utf8DecodeError(PngmeException):
    pass


class UnsupportedFile(PngmeException):
    '''The commands only accept paths with the PNG extension.'''
    pass
