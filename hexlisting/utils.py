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

from .constants import AddressScale, DisplayWidth
from .source import select_address_scale


def is_printable(ch):
    return 0x20 <= ch < 0x7f


def hex_column_width(width):
    return 3*width


def hexdump_line(data, offset, width=DisplayWidth.NORMAL, scale=AddressScale.BITS_64):
    h = ""
    c = ""
    for ch in data[0:width]:
        h += f" {ch:02x}"
        c += chr(ch) if is_printable(ch) else "."
    return f"{scale.format(offset)} : {h:{hex_column_width(width)}}  : {c}"


def hexdump_lines(data, start=0, length=None, width=DisplayWidth.NORMAL, scale=None, offset=0):
    lines = []
    stop = min(start+length, len(data)) if length is not None else len(data)
    if scale is None:
        scale = select_address_scale(stop+offset)
    for k in range(start, stop, width):
        lines.append(hexdump_line(data[k:min(k+width, stop)], k+offset, width, scale))
    return lines


def hexdump_str(data, start=0, length=None, width=DisplayWidth.NORMAL, scale=None, offset=0):
    return "\n".join(hexdump_lines(data, start, length, width, scale, offset))


def hexdump(data, start=0, length=None, width=DisplayWidth.NORMAL, scale=None, offset=0):
    for line in hexdump_lines(data, start, length, width, scale, offset):
        print(line)
