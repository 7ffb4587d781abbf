# -*- coding: utf-8 -*-
"""
common utils for hashbin
"""

import io
from tempfile import SpooledTemporaryFile
from typing import Iterator

from .exceptions import ReadError, SeekError


#: Number of bytes read from a stream per chunk.
CHUNK_SIZE = 64 * 1024

#: Non-seekable input is kept in memory up to this many bytes before it is
#: spooled to a temporary file on disk.
SPOOL_SIZE = 8 * 1024 * 1024


def to_bytes(data) -> bytes:
    """Return `data` as bytes, encoding text as UTF-8."""
    if isinstance(data, str):
        return data.encode("utf8")
    return bytes(data)


def is_seekable(obj) -> bool:
    """Return whether `obj` can be rewound with ``seek``."""
    seekable = getattr(obj, "seekable", None)
    if seekable is not None:
        try:
            return seekable()
        except ValueError:
            # Closed file objects raise instead of answering.
            return False
    return hasattr(obj, "seek") and hasattr(obj, "tell")


class Stream(object):
    """Re-windable view over a readable object.

    The input `obj` can be a file-like object or a ``bytes`` value. Each
    iteration yields the content as bytes from the position `obj` was at when
    the stream was created, so the content can be read once for hashing and
    again for writing without the caller having to rewind it.

    If `obj` is not seekable (a pipe or socket), it is read fully into a
    :class:`tempfile.SpooledTemporaryFile` first. When :meth:`close` is called
    the spool is discarded, otherwise `obj` is returned to its original
    position. The caller's object is never closed.
    """

    def __init__(self, obj, chunk_size: int = CHUNK_SIZE,
                 spool_size: int = SPOOL_SIZE):
        if isinstance(obj, (bytes, bytearray, memoryview)):
            obj = io.BytesIO(obj)
        elif not hasattr(obj, "read"):
            raise ValueError("Object must be a readable object or bytes.")

        self.chunk_size = chunk_size
        self._spool = None

        if is_seekable(obj):
            try:
                self._start = obj.tell()
            except (OSError, ValueError) as exc:
                raise SeekError("Could not determine stream position") from exc
            self._obj = obj
        else:
            self._spool = SpooledTemporaryFile(max_size=spool_size)
            try:
                for data in self._read(obj):
                    self._spool.write(data)
            except ReadError:
                self._spool.close()
                raise
            self._start = 0
            self._obj = self._spool

        self.rewind()

    def __iter__(self) -> Iterator[bytes]:
        """Rewind the underlying object and yield its content in chunks."""
        self.rewind()
        return self._read(self._obj)

    def _read(self, obj) -> Iterator[bytes]:
        while True:
            try:
                data = obj.read(self.chunk_size)
            except (OSError, ValueError) as exc:
                raise ReadError("Stream failed while reading") from exc

            if data is None:
                # Non-blocking source with nothing ready yet.
                raise ReadError("Stream returned no data before end of input")

            if not data:
                break

            yield to_bytes(data)

    def rewind(self) -> None:
        """Return the underlying object to the start of the content."""
        try:
            self._obj.seek(self._start)
        except (OSError, ValueError) as exc:
            raise SeekError("Could not rewind stream") from exc

    @property
    def spooled(self) -> bool:
        """Whether the content was copied into a local spool."""
        return self._spool is not None

    def close(self) -> None:
        """Discard the spool if one was made, else return the caller's object
        to its original position.
        """
        if self._spool is not None:
            self._spool.close()
            self._spool = None
        else:
            self.rewind()
