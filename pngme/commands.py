'''
The operations of the command line tool: they take care of reading and
writing the files, everything else is delegated to the container.
'''
import logging
from pathlib import Path

from .core import Chunk
from .chunk_type import ChunkTypeCode
from .exceptions import UnsupportedFile
from .png import PngContainer


logger = logging.getLogger(__name__)

PNG_EXTENSION = '.png'


def _check_path(file_path):
    file_path = Path(file_path)

    if file_path.suffix.lower() != PNG_EXTENSION:
        raise UnsupportedFile(f'\'{file_path}\' is not a PNG file')

    return file_path


def _write(png, file_path):
    raw = png.serialize()
    Path(file_path).write_bytes(raw)
    logger.debug('written %d bytes to \'%s\'' % (len(raw), file_path))


def encode(file_path, chunk_type, message, output_file=None):
    '''Append a chunk containing the message; the type code is validated before
    touching any file. Returns the path written.'''
    file_path = _check_path(file_path)
    type_code = ChunkTypeCode.from_string(chunk_type)

    png = PngContainer.from_file(file_path)
    png.append(Chunk(type_code, message.encode('utf-8')))

    output_file = Path(output_file) if output_file is not None else file_path
    _write(png, output_file)

    logger.info('encoded message of %d characters into chunk \'%s\' of \'%s\'' % (len(message), type_code, output_file))

    return output_file


def decode(file_path, chunk_type):
    '''Return the message hidden into the first chunk with the given type, None if
    there is no such chunk.'''
    png = PngContainer.from_file(_check_path(file_path))

    chunk = png.find_by_type(chunk_type)
    if chunk is None:
        return None

    return chunk.data_as_text()


def remove(file_path, chunk_type):
    file_path = _check_path(file_path)

    png = PngContainer.from_file(file_path)
    chunk = png.remove_by_type(chunk_type)

    _write(png, file_path)

    logger.info('removed chunk \'%s\' from \'%s\'' % (chunk.type_code, file_path))

    return chunk


def print_chunks(file_path):
    png = PngContainer.from_file(_check_path(file_path))

    return [f'[{idx:02d}] {chunk!r}' for idx, chunk in enumerate(png)]
