# -*- coding: utf-8 -*-

from io import BytesIO, RawIOBase, StringIO

import pytest
from fs.memoryfs import MemoryFS

import hashbin


class CountingMedium(hashbin.BlobMedium):
    """Medium that records how many objects it was asked to create."""

    def __init__(self, root):
        super().__init__(root)
        self.creates = 0

    def create(self, key):
        self.creates += 1
        return super().create(key)


class Unseekable(BytesIO):
    """In-memory stream that refuses to seek, like a socket or pipe."""

    def seekable(self):
        return False

    def seek(self, *args):
        raise OSError("stream is not seekable")

    def tell(self):
        raise OSError("stream is not seekable")


class TricklingIO(RawIOBase):
    """Non-blocking source that yields `chunks` in turn. A ``None`` chunk
    means no data is ready yet.
    """

    def __init__(self, *chunks):
        self._chunks = list(chunks)

    def readable(self):
        return True

    def read(self, size=-1):
        return self._chunks.pop(0) if self._chunks else b""


@pytest.fixture
def testpath(tmpdir):
    return tmpdir.mkdir("hashbin")


@pytest.fixture
def store(testpath):
    with hashbin.open_store(str(testpath)) as store:
        yield store


@pytest.fixture
def memfs():
    with MemoryFS() as memfs:
        yield memfs


@pytest.fixture
def medium(memfs):
    return CountingMedium(memfs)


@pytest.fixture
def memstore(medium):
    return hashbin.ContentStore(medium)


@pytest.fixture
def stringio():
    return StringIO(u"foo")


@pytest.fixture
def bytesio():
    return BytesIO(b"foo")


@pytest.fixture
def unseekable():
    return Unseekable


@pytest.fixture
def trickling():
    return TricklingIO


@pytest.fixture
def fileio(tmpdir):
    testfile = tmpdir.join("upload.txt")
    testfile.write_binary(b"foo")

    with open(str(testfile), "rb") as io:
        yield io
