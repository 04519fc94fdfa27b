'''
# Portable Network Graphics

Format created to replace patent-emcumbered GIF files.

The specification is at <http://www.libpng.org/pub/png/spec/1.2/PNG-Contents.html>.

A file is an 8-byte signature followed by chunks laid out back to back: here the
chunks are opaque, the container only keeps them in file order so that
re-serializing an unmodified file gives back the very same bytes.
'''
import logging

from .core import Chunk
from .exceptions import BadSignature, NotFound, PngmeException
from .streams import Stream


logger = logging.getLogger(__name__)

SIGNATURE = b'\x89\x50\x4e\x47\x0d\x0a\x1a\x0a'


class PngContainer(object):
    '''Signature plus an ordered list of chunks.

    No structural rule of PNG is enforced: there is no check about the presence
    or position of IHDR and IEND.'''

    header = SIGNATURE

    def __init__(self, chunks=None):
        self._chunks = list(chunks) if chunks is not None else []

    @classmethod
    def from_chunks(cls, chunks):
        return cls(chunks)

    @classmethod
    def parse(cls, buf):
        with Stream(buf) as stream:
            return cls.unpack(stream)

    @classmethod
    def from_file(cls, path):
        logger.debug('unpacking \'%s\' from %s' % (cls.__name__, path))
        with Stream(path) as stream:
            return cls.unpack(stream)

    @classmethod
    def unpack(cls, stream):
        magic = stream.read(len(SIGNATURE))
        if magic != SIGNATURE:
            raise BadSignature(f'wrong signature {magic!r}')

        chunks = []
        while not stream.at_end():
            logger.debug('unpacking chunk #%d at offset %d' % (len(chunks), stream.tell()))
            try:
                chunks.append(Chunk.unpack(stream))
            except PngmeException as e:
                e.chain.append(len(chunks))
                e.chain.append('chunks')
                raise

        return cls(chunks)

    @property
    def chunks(self):
        return tuple(self._chunks)

    def serialize(self):
        return self.header + b''.join(_.as_bytes() for _ in self._chunks)

    as_bytes = serialize
    raw = property(serialize)

    def append(self, chunk):
        self._chunks.append(chunk)

    def _index_by_type(self, code):
        for idx, chunk in enumerate(self._chunks):
            if chunk.type_code.to_string() == str(code):
                return idx

        return None

    def find_by_type(self, code):
        idx = self._index_by_type(code)

        return self._chunks[idx] if idx is not None else None

    def remove_by_type(self, code):
        idx = self._index_by_type(code)

        if idx is None:
            raise NotFound(f'no chunk with type \'{code}\'')

        logger.debug('removing chunk #%d with type \'%s\'' % (idx, code))

        return self._chunks.pop(idx)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self):
        return iter(self._chunks)

    def __repr__(self):
        return '<%s(chunks=[%s])>' % (self.__class__.__name__, ','.join(str(_.type_code) for _ in self._chunks))

    def __str__(self):
        return '\n'.join(f'[{idx:02d}] {chunk!r}' for idx, chunk in enumerate(self._chunks))
