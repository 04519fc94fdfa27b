#!/usr/bin/env python3
'''
Hide messages into PNG files.

 $ pngstego.py encode image.png ruSt "meet me at the docks"
 $ pngstego.py decode image.png ruSt
'''
import logging
import sys
import os

from pngme import commands
from pngme.exceptions import PngmeException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} <command> <png file path> [arguments...]

commands:
  encode <png file path> <chunk type> <message> [output file]
  decode <png file path> <chunk type>
  remove <png file path> <chunk type>
  print  <png file path>''')
    sys.exit(1)


def run(argv):
    command, args = argv[1], argv[2:]

    if command == 'encode' and len(args) in (3, 4):
        output = commands.encode(*args)
        if len(args) == 4:
            print(f'New file \'{output}\' has been created and message encoded successfully!')
        else:
            print('Message encoded successfully!')
    elif command == 'decode' and len(args) == 2:
        message = commands.decode(*args)
        if message is None:
            print('No message hidden in this image with this chunk type')
        else:
            print(f'Message: {message!r}')
    elif command == 'remove' and len(args) == 2:
        commands.remove(*args)
        print('Message has been removed successfully!')
    elif command == 'print' and len(args) == 1:
        for line in commands.print_chunks(*args):
            print(line)
    else:
        usage(argv[0])


if __name__ == '__main__':
    if len(sys.argv) < 3:
        usage(sys.argv[0])

    try:
        run(sys.argv)
    except (PngmeException, OSError) as e:
        logger.debug('command failed', exc_info=True)
        print(f'An error occurred: {e}', file=sys.stderr)
        sys.exit(1)
