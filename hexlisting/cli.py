"""

Copyright (c) 2020 Alex Forencich

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.

"""

import argparse
import logging
import os
import sys

from .version import __version__
from .constants import AddressScale, DisplayWidth
from .dump import HexDump


def main(argv=None):
    parser = argparse.ArgumentParser(prog="hexlisting",
        description="Hex and ASCII dump of standard input or regular files")
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-w', dest='width', action='store_const', const=DisplayWidth.WIDE,
        help="32 byte wide display (cannot use with '-x')")
    group.add_argument('-x', dest='width', action='store_const', const=DisplayWidth.EXTRA_WIDE,
        help="64 byte wide display (cannot use with '-w')")
    parser.add_argument('--split-rows', action='store_true',
        help="start a new row at every read instead of carrying partial rows")
    parser.add_argument('-v', '--verbose', action='store_true', help="log progress to stderr")
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('files', nargs='*', help="files to dump (default: standard input)")
    args = parser.parse_args(argv)

    logging.basicConfig(stream=sys.stderr, format="%(levelname)s: %(message)s",
        level=logging.INFO if args.verbose else logging.WARNING)

    dump = HexDump(args.width or DisplayWidth.NORMAL, sys.stdout, args.split_rows)

    try:
        if not args.files:
            dump.dump_stream(sys.stdin.buffer, AddressScale.BITS_64, "<stdin>")
        else:
            dump.dump_files(args.files)
        sys.stdout.flush()
    except BrokenPipeError:
        # reader went away, send the remaining output to devnull so the
        # flush at interpreter exit does not fail again
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1

    return 0
