"""
# pngme: hide messages into PNG files

A PNG file is a signature followed by a sequence of chunks, each one with its own
type code, data and checksum. Decoders are free to skip the ancillary chunks they
don't know, so a message stored into a private ancillary chunk (e.g. "ruSt")
travels with the image without changing what it looks like.

Three layers are defined:

 1. ChunkTypeCode: the 4 letters naming a chunk, with the properties encoded
    by their case.
 2. Chunk: the framing, i.e. length, type code, data and CRC-32; unpacking
    verifies the checksum, packing is the exact inverse.
 3. PngContainer: the signature and the ordered chunks, with lookup, append
    and removal by type code. Parsing followed by serializing gives back the
    original bytes.

Any failure is reported by a subclass of pngme.exceptions.PngmeException.
"""
from .chunk_type import ChunkTypeCode
from .core import Chunk
from .png import PngContainer, SIGNATURE


__all__ = [
    'ChunkTypeCode',
    'Chunk',
    'PngContainer',
    'SIGNATURE',
]
