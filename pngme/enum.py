from enum import Flag


class ChunkProperty(Flag):
    '''The four properties encoded by the case of the letters of a chunk type code.

    Each one is bit 5 of the corresponding byte: uppercase (bit clear) means the
    first three properties are set, lowercase (bit set) means the chunk is safe
    to copy.'''
    NONE         = 0
    CRITICAL     = 1 << 0
    PUBLIC       = 1 << 1
    RESERVED     = 1 << 2
    SAFE_TO_COPY = 1 << 3
