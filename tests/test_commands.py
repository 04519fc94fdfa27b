import logging

import pytest
from PIL import Image

from pngme import commands
from pngme.exceptions import InvalidTypeCode, NotFound, UnsupportedFile
from pngme.png import PngContainer


def test_encode_decode(cover_path):
    output = commands.encode(cover_path, 'ruSt', 'meet me at the docks')

    assert output == cover_path
    assert commands.decode(cover_path, 'ruSt') == 'meet me at the docks'

    png = PngContainer.from_file(cover_path)

    assert png.chunks[-1].type_code.to_string() == 'ruSt'

    image = Image.open(cover_path)
    image.load()
    assert image.size == (8, 4)


def test_encode_output_file(tmp_path, cover_path, pillow_png):
    output = commands.encode(cover_path, 'ruSt', 'ciao', tmp_path / 'stego.png')

    assert output == tmp_path / 'stego.png'
    assert cover_path.read_bytes() == pillow_png
    assert commands.decode(output, 'ruSt') == 'ciao'
    assert commands.decode(cover_path, 'ruSt') is None


def test_encode_unicode(cover_path):
    commands.encode(cover_path, 'ruSt', 'città ☃')

    assert commands.decode(cover_path, 'ruSt') == 'città ☃'


def test_encode_invalid_type(cover_path, pillow_png):
    with pytest.raises(InvalidTypeCode):
        commands.encode(cover_path, 'Ru1t', 'message')

    assert cover_path.read_bytes() == pillow_png


def test_decode_missing(cover_path):
    assert commands.decode(cover_path, 'ruSt') is None


def test_remove(cover_path, pillow_png):
    commands.encode(cover_path, 'ruSt', 'temporary')

    chunk = commands.remove(cover_path, 'ruSt')

    assert chunk.data_as_text() == 'temporary'
    assert cover_path.read_bytes() == pillow_png


def test_remove_missing(cover_path, pillow_png):
    with pytest.raises(NotFound):
        commands.remove(cover_path, 'zzZz')

    assert cover_path.read_bytes() == pillow_png


def test_print_chunks(cover_path):
    lines = commands.print_chunks(cover_path)

    assert lines[0].startswith('[00] <Chunk(type=IHDR,')
    assert lines[-1].startswith(f'[{len(lines) - 1:02d}] <Chunk(type=IEND,')


@pytest.mark.parametrize('name', ['cover.jpg', 'cover', 'cover.png.bak'])
def test_unsupported_file(tmp_path, pillow_png, name):
    path = tmp_path / name
    path.write_bytes(pillow_png)

    with pytest.raises(UnsupportedFile):
        commands.decode(path, 'ruSt')
    with pytest.raises(UnsupportedFile):
        commands.encode(path, 'ruSt', 'message')
    with pytest.raises(UnsupportedFile):
        commands.remove(path, 'ruSt')
    with pytest.raises(UnsupportedFile):
        commands.print_chunks(path)


def test_uppercase_extension(tmp_path, pillow_png):
    path = tmp_path / 'COVER.PNG'
    path.write_bytes(pillow_png)

    commands.encode(path, 'ruSt', 'shout')

    assert commands.decode(path, 'ruSt') == 'shout'


def test_commands_log(cover_path, caplog):
    with caplog.at_level(logging.INFO, logger='pngme.commands'):
        commands.encode(cover_path, 'ruSt', 'logged')
        commands.remove(cover_path, 'ruSt')

    messages = [_.getMessage() for _ in caplog.records]

    assert f'encoded message of 6 characters into chunk \'ruSt\' of \'{cover_path}\'' in messages
    assert f'removed chunk \'ruSt\' from \'{cover_path}\'' in messages
