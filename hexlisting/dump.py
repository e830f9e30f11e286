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

import logging

from .version import __version__
from .constants import BUFFER_SIZE, AddressScale, DisplayWidth
from .formatter import RowFormatter
from .source import open_regular_file


class HexDump:
    def __init__(self, width=DisplayWidth.NORMAL, output=None, split_rows=False, buffer_size=BUFFER_SIZE):
        self.log = logging.getLogger("hexlisting")

        self.log.info("hexlisting version %s", __version__)

        try:
            self.width = DisplayWidth(width)
        except ValueError:
            raise ValueError(f"Unsupported display width: {width}") from None
        if buffer_size < 1:
            raise ValueError("buffer_size must be positive")

        self.output = output
        self.split_rows = split_rows
        self.buffer_size = buffer_size

        self.log.info("hexlisting configuration:")
        self.log.info("  Row width: %d bytes", self.width)
        self.log.info("  Chunk size: %d bytes", self.buffer_size)
        self.log.info("  Split rows at chunk boundaries: %s", self.split_rows)

    def dump_stream(self, fh, scale=AddressScale.BITS_64, name=None):
        if name is None:
            name = getattr(fh, 'name', '<stream>')

        formatter = RowFormatter(scale, self.width, self.output, self.split_rows)
        buffer = bytearray(self.buffer_size)
        offset = 0

        # one raw read per chunk where the stream allows it
        readinto = getattr(fh, 'readinto1', fh.readinto)

        while True:
            try:
                count = readinto(buffer)
            except OSError as ex:
                self.log.error("Error reading %s: %s", name, ex)
                break
            if not count:
                break
            offset = formatter.format_buffer(buffer, count, offset)

        formatter.finish()

        self.log.info("Dumped %d bytes from %s", offset, name)
        return offset

    def dump_file(self, filename):
        try:
            fh, scale = open_regular_file(filename)
        except OSError as ex:
            self.log.warning("Skipping file: %s", ex)
            return False

        with fh:
            self.log.info("Dumping %s (%d-bit addresses)", filename, scale)
            self.dump_stream(fh, scale, filename)
        return True

    def dump_files(self, filenames):
        dumped = 0
        for filename in filenames:
            if self.dump_file(filename):
                dumped += 1
        return dumped
