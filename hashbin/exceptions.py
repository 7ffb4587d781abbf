# -*- coding: utf-8 -*-
"""Exceptions raised by hashbin.

::

    HashBinError
     +-- StreamError (IOError)
     |    +-- ReadError
     |    +-- SeekError
     +-- MediumError (IOError)
     |    +-- MediumPermissionError (PermissionError)
     |    +-- AlreadyExistsError
     +-- NotFoundError (LookupError)
     +-- StorageError (IOError)
          +-- StorageWriteError
          +-- StorageReadError
"""


class HashBinError(Exception):
    """Base class for all hashbin errors."""


class StreamError(HashBinError, IOError):
    """The input stream could not be consumed."""


class ReadError(StreamError):
    """The input stream failed while being read."""


class SeekError(StreamError):
    """The input stream could not be rewound."""


class MediumError(HashBinError, IOError):
    """The backing medium failed."""


class MediumPermissionError(MediumError, PermissionError):
    """The backing medium refused access."""


class AlreadyExistsError(MediumError):
    """An object with the given key is already on the medium."""


class NotFoundError(HashBinError, LookupError):
    """No object with the given key is on the medium."""

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return "No blob stored under key: {0!r}".format(self.key)


class StorageError(HashBinError, IOError):
    """A store operation failed against the medium."""


class StorageWriteError(StorageError):
    """Checking for, creating or writing a blob failed."""


class StorageReadError(StorageError):
    """Looking up or opening a stored blob failed."""
