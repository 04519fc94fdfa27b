"""
Core module: the chunk, i.e. the framed unit a PNG file is made of.

On disk a chunk is

    length (4 bytes, big endian) | type code (4 bytes) | data (length bytes) | crc (4 bytes, big endian)

where the length counts only the data and the crc is computed over the type
code and the data.
"""
import logging

from . import fields
from .common import crc
from .chunk_type import ChunkTypeCode
from .exceptions import CrcMismatch, Truncated, Utf8DecodeError
from .streams import Stream


logger = logging.getLogger(__name__)

MAX_LENGTH = 0xffffffff
# length + type code + crc
CHUNK_OVERHEAD = 12


class Chunk(object):
    '''
    This is the main data structure of the format: the 4 fields represent
    a chunk into the file. Each integer field is intended big-endian.

    A chunk is defined as critical or ancillary depending on the case of the
    starting letter of the type code.

    Instances are immutable: the length and the crc are derived from the type
    code and the data at construction time.
    '''
    length_field = fields.StructField('I')
    type_field   = fields.StringField(4)
    data_field   = fields.StringField()
    crc_field    = crc.CRCField()  # network byte order

    def __init__(self, type_code, data):
        if not isinstance(type_code, ChunkTypeCode):
            type_code = ChunkTypeCode.from_string(type_code) if isinstance(type_code, str) \
                else ChunkTypeCode.from_bytes(type_code)

        data = bytes(data)
        if len(data) > MAX_LENGTH:
            raise ValueError(f'chunk data of {len(data)} bytes doesn\'t fit into the length field')

        self._type_code = type_code
        self._data = data
        self._crc = self.crc_field.calculate(type_code.bytes(), data)

    @classmethod
    def from_bytes(cls, buf):
        '''Decode the chunk starting at the beginning of buf; anything after it is ignored.'''
        with Stream(buf) as stream:
            return cls.unpack(stream)

    @classmethod
    def unpack(cls, stream):
        '''Decode a chunk from the current position of the stream.

        The declared length is checked against the bytes left into the stream
        before reading the data.'''
        offset = stream.tell()
        remaining = stream.remaining()

        if remaining < CHUNK_OVERHEAD:
            raise Truncated(f'chunk at offset {offset} needs at least {CHUNK_OVERHEAD} bytes, {remaining} left')

        length = cls.length_field.unpack(stream)

        if CHUNK_OVERHEAD + length > remaining:
            raise Truncated(f'chunk at offset {offset} declares {length} bytes of data, {remaining - CHUNK_OVERHEAD} left')

        type_code = ChunkTypeCode(cls.type_field.unpack(stream))
        data = cls.data_field.unpack(stream, length=length)
        stored_crc = cls.crc_field.unpack(stream)

        chunk = cls(type_code, data)

        logger.debug('unpacked chunk \'%s\' of length %d at offset %d' % (type_code, length, offset))

        if chunk.crc != stored_crc:
            raise CrcMismatch(stored_crc, chunk.crc)

        if not type_code.is_valid():
            logger.warning('chunk at offset %d has an invalid type code %r' % (offset, type_code.bytes()))

        return chunk

    @property
    def length(self):
        return len(self._data)

    @property
    def type_code(self):
        return self._type_code

    @property
    def data(self):
        return self._data

    @property
    def crc(self):
        return self._crc

    @property
    def size(self):
        '''Number of bytes occupied by the chunk into the file.'''
        return CHUNK_OVERHEAD + self.length

    def as_bytes(self):
        return (
            self.length_field.pack(self.length) +
            self.type_field.pack(self._type_code.bytes()) +
            self._data +
            self.crc_field.pack(self._crc)
        )

    raw = property(as_bytes)

    def data_as_text(self):
        try:
            return self._data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise Utf8DecodeError(f'data of chunk \'{self._type_code}\' is not valid UTF-8') from e

    def is_critical(self):
        return self._type_code.is_critical()

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented

        return (self._type_code, self._data, self._crc) == (other._type_code, other._data, other._crc)

    def __hash__(self):
        return hash((self._type_code, self._data))

    def __repr__(self):
        return '<%s(type=%s,length=%d,crc=%08x)>' % (
            self.__class__.__name__,
            self._type_code,
            self.length,
            self._crc,
        )

    def __str__(self):
        msg = ''
        msg += 'length: %d\n' % self.length
        msg += 'type: %s\n' % self._type_code
        msg += 'data: %r\n' % self._data
        msg += 'crc: %08x\n' % self._crc
        return msg
