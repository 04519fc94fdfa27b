"""
A Field is a "fundamental" datatype from the format point of view, something directly
packable/unpackable from a stream without knowing anything about the rest of the format.
"""
import logging
import struct

from .meta import Endianess


logger = logging.getLogger(__name__)


class Field(object):
    """Base class to subclass from"""

    def __init__(self, name=None, endianess=Endianess.BIG_ENDIAN):
        self.name = name
        self.endianess = endianess

    def __set_name__(self, owner, name):
        if self.name is None:
            self.name = name

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def pack(self, value) -> bytes:
        raise NotImplementedError('you need to implement this in the subclass')

    def unpack(self, stream):
        raise NotImplementedError('you need to implement this in the subclass')


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    def __init__(self, format, **kw):
        self.format = format
        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.get_format())

    def get_format(self):
        return '%s%s' % (self.endianess.prefix, self.format)

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def pack(self, value) -> bytes:
        return struct.pack(self.get_format(), value)

    def unpack(self, stream):
        raw = stream.read_exactly(self.size)
        value, = struct.unpack(self.get_format(), raw)

        logger.debug('field \'%s\' unpacked %r' % (self.name, value))

        return value


class StringField(Field):
    '''Raw bytes of a fixed length. The length can be overridden at unpack time
    for fields whose size is declared by another field.'''

    def __init__(self, length=0, **kw):
        self.length = length
        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%d)>' % (self.__class__.__name__, self.length)

    def _get_size(self):
        return self.length

    def pack(self, value) -> bytes:
        if self.length and len(value) != self.length:
            raise ValueError(f'field \'{self.name}\' needs {self.length} bytes, got {len(value)}')

        return bytes(value)

    def unpack(self, stream, length=None):
        length = self.length if length is None else length
        return stream.read_exactly(length)
