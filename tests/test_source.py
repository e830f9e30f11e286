"""

Copyright (c) 2021 Alex Forencich

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

import pytest

from hexlisting.constants import AddressScale
from hexlisting import source
from hexlisting.source import NotRegularFileError, select_address_scale, open_regular_file


def test_select_address_scale():
    assert select_address_scale(None) == AddressScale.BITS_64
    assert select_address_scale() == AddressScale.BITS_64

    assert select_address_scale(0) == AddressScale.BITS_16
    assert select_address_scale(65534) == AddressScale.BITS_16
    assert select_address_scale(65535) == AddressScale.BITS_32
    assert select_address_scale(2**32-2) == AddressScale.BITS_32
    assert select_address_scale(2**32-1) == AddressScale.BITS_64
    assert select_address_scale(2**40) == AddressScale.BITS_64

    with pytest.raises(ValueError):
        select_address_scale(-1)


def test_open_regular_file(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x00\x01\x02")

    fh, scale = open_regular_file(str(path))
    with fh:
        assert scale == AddressScale.BITS_16
        assert fh.read() == b"\x00\x01\x02"


def test_open_regular_file_scale_from_size(tmp_path):
    for size, scale in [(65534, AddressScale.BITS_16), (65535, AddressScale.BITS_32)]:
        path = tmp_path / f"sparse_{size}.bin"
        with open(path, 'wb') as f:
            f.truncate(size)

        fh, file_scale = open_regular_file(path)
        fh.close()
        assert file_scale == scale


def test_open_regular_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_regular_file(str(tmp_path / "missing.bin"))


def test_open_regular_file_directory(tmp_path):
    with pytest.raises(NotRegularFileError) as excinfo:
        open_regular_file(str(tmp_path))
    assert str(excinfo.value) == f"open {tmp_path}: It's not a regular file"
    assert isinstance(excinfo.value, OSError)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_open_regular_file_symlink(tmp_path):
    target = tmp_path / "target.bin"
    target.write_bytes(b"abc")
    link = tmp_path / "link.bin"
    link.symlink_to(target)

    fh, scale = open_regular_file(str(link))
    with fh:
        assert fh.read() == b"abc"

    dir_link = tmp_path / "dir_link"
    dir_link.symlink_to(tmp_path, target_is_directory=True)
    with pytest.raises(NotRegularFileError):
        open_regular_file(str(dir_link))


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="fifos not supported")
def test_open_regular_file_fifo(tmp_path):
    fifo = tmp_path / "fifo"
    os.mkfifo(fifo)

    with pytest.raises(NotRegularFileError):
        open_regular_file(str(fifo))


def test_open_regular_file_permission_denied(tmp_path, monkeypatch):
    path = tmp_path / "secret.bin"
    path.write_bytes(b"secret")

    def deny(filename, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(filename))

    monkeypatch.setattr(source, "open", deny, raising=False)

    with pytest.raises(PermissionError):
        open_regular_file(str(path))
