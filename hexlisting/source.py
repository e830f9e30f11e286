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

import os
import stat

from .constants import AddressScale


class NotRegularFileError(OSError):
    pass


def select_address_scale(size=None):
    """Pick the address column format for a source of the given size

    None means the size is not known (pipe, terminal), which always gets
    the widest format.  The narrower maximum itself selects the next
    wider format, so 0xffff bytes use 32-bit addresses.
    """
    if size is None:
        return AddressScale.BITS_64
    if size < 0:
        raise ValueError("size must not be negative")

    if size < AddressScale.BITS_16.max_value:
        return AddressScale.BITS_16
    elif size < AddressScale.BITS_32.max_value:
        return AddressScale.BITS_32
    else:
        return AddressScale.BITS_64


def open_regular_file(filename):
    """Open a regular file for reading

    Symlinks are followed; anything that does not resolve to a regular
    file is rejected before it is opened.  Returns the open binary file
    and the address scale for its size.  The caller owns the file.
    """
    st = os.stat(filename)

    if not stat.S_ISREG(st.st_mode):
        raise NotRegularFileError(f"open {filename}: It's not a regular file")

    scale = select_address_scale(st.st_size)

    return open(filename, 'rb'), scale
