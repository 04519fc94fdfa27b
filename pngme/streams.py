import io
import os
import logging

from .exceptions import Truncated


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file object to
    uniform its properties: mainly we need to know how many bytes are left
    so that a declared length is never trusted before checking it.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        if isinstance(obj, os.PathLike):
            obj = os.fspath(obj)

        self._type = type(obj)
        self.obj = obj
        self.size = 0

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to stream from' % self.obj.__class__.__name__)

        init_method()

    def __getattr__(self, name):
        if name == 'obj':
            raise AttributeError(name)
        return getattr(self.obj, name)

    def __del__(self):
        self.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def __repr__(self):
        return '<%s(%s, size=%d)>' % (self.__class__.__name__, self._type.__name__, self.size)

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        self.obj = open(self.obj, 'rb')
        self.size = os.fstat(self.obj.fileno()).st_size

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)
        self.size = len(self.obj.getbuffer())

    init_bytearray = init_bytes

    def init_memoryview(self):
        self.obj = bytes(self.obj)
        self.init_bytes()

    def close(self):
        obj = self.__dict__.get('obj')
        if obj is not None and hasattr(obj, 'close'):
            obj.close()

    def tell(self):
        return self.obj.tell()

    def remaining(self):
        return self.size - self.obj.tell()

    def at_end(self):
        return self.remaining() <= 0

    def read_exactly(self, n):
        '''Read n bytes or fail without reading anything.'''
        remaining = self.remaining()
        if n > remaining:
            raise Truncated('needed %d bytes at offset %d but only %d are available' % (n, self.tell(), remaining))

        return self.obj.read(n)