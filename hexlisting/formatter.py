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

import sys

from .constants import AddressScale, DisplayWidth
from .utils import hexdump_line


class RowFormatter:
    """Format chunks of a byte stream into hex dump rows

    One instance per stream.  Row boundaries come from the absolute
    offset, so chunks of any size line up on the same columns.

    With split_rows set, every call starts a fresh row and flushes
    whatever it has accumulated before returning, so a row that spans two
    reads comes out as two partial rows.  Otherwise the partial row is
    held until the next boundary or until finish() is called.
    """

    def __init__(self, scale=AddressScale.BITS_64, width=DisplayWidth.NORMAL, output=None, split_rows=False):
        self.scale = AddressScale(scale)
        try:
            self.width = DisplayWidth(width)
        except ValueError:
            raise ValueError(f"Unsupported display width: {width}") from None
        self.output = output
        self.split_rows = split_rows

        self.line_position = 0
        self.row = bytearray()

    def _write(self, line):
        out = self.output if self.output is not None else sys.stdout
        out.write(line+"\n")

    def _flush_row(self):
        self._write(hexdump_line(self.row, self.line_position, self.width, self.scale))
        self.row.clear()

    def format_buffer(self, buffer, count, position):
        if count < 0 or count > len(buffer):
            raise ValueError("count out of range")

        if self.split_rows:
            self.row.clear()
            self.line_position = position

        for ch in memoryview(buffer)[:count]:
            if position % self.width == 0 and self.row:
                self._flush_row()
            if not self.row:
                self.line_position = position

            self.row.append(ch)
            position += 1

        if self.split_rows:
            self._flush_row()

        return position

    def finish(self):
        if self.row:
            self._flush_row()
