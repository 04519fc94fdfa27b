import io
import struct
import zlib

import pytest
from PIL import Image, PngImagePlugin

from pngme.png import SIGNATURE


def build_chunk(chunk_type, data, crc=None):
    '''Build the raw bytes of a chunk independently from the library.'''
    if crc is None:
        crc = zlib.crc32(chunk_type + data) & 0xFFFFFFFF
    return struct.pack('>I', len(data)) + chunk_type + data + struct.pack('>I', crc)


@pytest.fixture
def iend_png():
    '''The smallest file the container accepts with a chunk inside.'''
    return SIGNATURE + b'\x00\x00\x00\x00IEND\xaeB`\x82'


@pytest.fixture
def cover_png():
    ihdr_data = struct.pack('>IIBBBBB', 1, 1, 8, 2, 0, 0, 0)
    pixel_data = b'\x00\xff\x00\x00'  # filter byte + RGB pixel

    return (
        SIGNATURE +
        build_chunk(b'IHDR', ihdr_data) +
        build_chunk(b'IDAT', zlib.compress(pixel_data)) +
        build_chunk(b'IEND', b'')
    )


@pytest.fixture
def pillow_png():
    '''A real image written by Pillow, with a text chunk.'''
    image = Image.new('RGB', (8, 4), color=(255, 0, 0))

    info = PngImagePlugin.PngInfo()
    info.add_text('Comment', 'generated for the tests')

    output = io.BytesIO()
    image.save(output, format='PNG', pnginfo=info)

    return output.getvalue()


@pytest.fixture
def cover_path(tmp_path, pillow_png):
    path = tmp_path / 'cover.png'
    path.write_bytes(pillow_png)
    return path
