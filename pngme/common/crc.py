'''
The single CRC implementation shared by chunk construction and chunk decoding.
'''
from zlib import crc32 as _zlib_crc32

from .. import fields


def crc32(type_bytes, payload):
    """standard CRC methods with pre and post conditioning, as defined by ISO 3309 [ISO-3309]
    or ITU-T V.42 [ITU-V42]. The CRC polynomial employed is

      x^32+x^26+x^23+x^22+x^16+x^12+x^11+x^10+x^8+x^7+x^5+x^4+x^2+x+1

    The 32-bit CRC register is initialized to all 1's, and then the data from each byte is processed
    from the least significant bit (1) to the most significant bit (128). After all the data bytes are processed,
    the CRC register is inverted (its ones complement is taken). This value is transmitted (stored in the file)
    MSB first.

    It's calculated over the chunk type code and the chunk data, but not the length.

    See <https://www.w3.org/TR/PNG-Structure.html#CRC-algorithm>.
    """
    return _zlib_crc32(payload, _zlib_crc32(type_bytes)) & 0xffffffff


class CRCField(fields.StructField):
    '''The trailing checksum of a chunk, stored in network byte order.'''

    def __init__(self, **kwargs):
        super().__init__('I', **kwargs)

    def calculate(self, type_bytes, payload):
        return crc32(type_bytes, payload)
