'''
# Chunk type codes

Each chunk is identified by a 4-byte code, restricted to the ASCII letters
A-Z and a-z. The case of each letter, i.e. bit 5 of the byte, carries a property
of the chunk:

 1. ancillary bit (first byte): uppercase means critical, the decoder must understand it
 2. private bit (second byte): uppercase means public, defined by the PNG specification
 3. reserved bit (third byte): must be uppercase in files conforming to this version of PNG
 4. safe-to-copy bit (fourth byte): lowercase means an editor that doesn't recognize
    the chunk can copy it anyway

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
from bitstring import BitArray

from .enum import ChunkProperty
from .exceptions import InvalidTypeCode


TYPE_CODE_LENGTH = 4
# the position of bit 5 inside a byte when reading MSB first
CASE_BIT = 2


def is_letter(byte):
    return 65 <= byte <= 90 or 97 <= byte <= 122


class ChunkTypeCode(object):
    '''Immutable value for the type code of a chunk.

    The constructor only checks the size: the framing layer builds type codes
    from whatever it finds into a file, the validated constructors are
    from_bytes() and from_string().'''
    __slots__ = ('_raw', '_bits')

    def __init__(self, raw):
        raw = bytes(raw)
        if len(raw) != TYPE_CODE_LENGTH:
            raise InvalidTypeCode(f'type code must be {TYPE_CODE_LENGTH} bytes long, got {len(raw)}')

        object.__setattr__(self, '_raw', raw)
        object.__setattr__(self, '_bits', BitArray(raw))

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    @classmethod
    def from_bytes(cls, raw):
        raw = bytes(raw)
        if len(raw) != TYPE_CODE_LENGTH:
            raise InvalidTypeCode(f'type code must be {TYPE_CODE_LENGTH} bytes long, got {len(raw)}')

        for byte in raw:
            if not is_letter(byte):
                raise InvalidTypeCode(f'type code {raw!r} contains 0x{byte:02x}, only A-Z and a-z are accepted')

        return cls(raw)

    @classmethod
    def from_string(cls, value):
        if len(value) != TYPE_CODE_LENGTH:
            raise InvalidTypeCode(f'type code must be {TYPE_CODE_LENGTH} characters long, got {value!r}')

        try:
            raw = value.encode('ascii')
        except UnicodeEncodeError as e:
            raise InvalidTypeCode(f'type code {value!r} contains non ASCII characters') from e

        return cls.from_bytes(raw)

    def bytes(self):
        return self._raw

    def to_string(self):
        # latin1 maps every byte to a character so that malformed codes coming
        # from a file still have a lossless representation
        return self._raw.decode('latin1')

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.to_string())

    def __eq__(self, other):
        if not isinstance(other, ChunkTypeCode):
            return NotImplemented

        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def _is_uppercase(self, index):
        return not self._bits[index * 8 + CASE_BIT]

    def is_critical(self):
        return self._is_uppercase(0)

    def is_public(self):
        return self._is_uppercase(1)

    def is_reserved_bit_valid(self):
        return self._is_uppercase(2)

    def is_safe_to_copy(self):
        return not self._is_uppercase(3)

    def is_valid(self):
        return self.is_reserved_bit_valid() and all(is_letter(_) for _ in self._raw)

    @property
    def properties(self):
        result = ChunkProperty.NONE

        if self.is_critical():
            result |= ChunkProperty.CRITICAL
        if self.is_public():
            result |= ChunkProperty.PUBLIC
        if self.is_reserved_bit_valid():
            result |= ChunkProperty.RESERVED
        if self.is_safe_to_copy():
            result |= ChunkProperty.SAFE_TO_COPY

        return result
