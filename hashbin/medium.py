# -*- coding: utf-8 -*-
"""Module for the BlobMedium class, the byte storage a ContentStore writes to.

The medium is a thin adapter over a `pyfilesystem2
<https://github.com/PyFilesystem/pyfilesystem2>`_ filesystem, so anything
``fs`` can open (a local directory, ``mem://``, a cloud bucket opener) can
back a store.
"""

import io
import logging
import os
from contextlib import contextmanager
from typing import Iterator, Union

import fs as pyfs
from fs.base import FS
from fs.osfs import OSFS

from .exceptions import (
    AlreadyExistsError,
    MediumError,
    MediumPermissionError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

Root = Union[FS, str]


@contextmanager
def translate_errors(key=None):
    """Re-raise ``fs`` errors raised inside the block as hashbin errors."""
    try:
        yield
    except pyfs.errors.ResourceNotFound as exc:
        raise NotFoundError(key) from exc
    except pyfs.errors.FileExists as exc:
        raise AlreadyExistsError(
            "Blob already exists: {0!r}".format(key)) from exc
    except pyfs.errors.PermissionDenied as exc:
        raise MediumPermissionError(str(exc)) from exc
    except pyfs.errors.FSError as exc:
        raise MediumError(str(exc)) from exc


def ensure_namespace(root: Root, dmode: int = 0o755) -> FS:
    """Return an open filesystem for `root`, creating it if it is absent.

    Args:
        root: An already open ``fs`` filesystem, which is returned as is, a
            local directory path, or an ``fs`` URL such as ``mem://``.
        dmode: Mode used when creating a local directory.

    Raises:
        MediumPermissionError: If the root can't be created or accessed
            because of permissions.
        MediumError: On any other failure to create or open the root.
    """
    if isinstance(root, FS):
        return root

    if not isinstance(root, str):
        raise TypeError(
            "Root must be a filesystem or a path, not {0!r}".format(root))

    try:
        if "://" in root:
            return pyfs.open_fs(root, create=True)
        return OSFS(os.path.expanduser(root), create=True, create_mode=dmode)

    except pyfs.errors.CreateFailed as exc:
        cause = getattr(exc, "exc", None) or exc.__context__
        if isinstance(cause, PermissionError):
            raise MediumPermissionError(
                "Permission denied creating root: {0}".format(root)) from exc
        raise MediumError(
            "Could not open root {0}: {1}".format(root, exc)) from exc

    except pyfs.errors.FSError as exc:
        raise MediumError(
            "Could not open root {0}: {1}".format(root, exc)) from exc


class BlobMedium(object):
    """Flat, key-addressed byte storage on top of an ``fs`` filesystem.

    Every object is a file named by its key directly under the root of
    :attr:`fs`. Each method is a single filesystem call, so the medium is as
    atomic as the filesystem it wraps.

    Attributes:
        fs: The backing ``fs.base.FS``.
    """

    def __init__(self, root: Root, dmode: int = 0o755):
        self.fs = ensure_namespace(root, dmode=dmode)

    def __repr__(self):
        return "BlobMedium({0!r})".format(self.fs)

    def exists(self, key: str) -> bool:
        """Return whether an object named `key` is present."""
        with translate_errors(key):
            return self.fs.isfile(key)

    def create(self, key: str) -> io.IOBase:
        """Create object `key` and return a binary handle open for writing.

        Raises:
            AlreadyExistsError: If the object is already present.
        """
        with translate_errors(key):
            return self.fs.openbin(key, "x")

    def open(self, key: str) -> io.IOBase:
        """Return a seekable binary handle open for reading object `key`.

        Raises:
            NotFoundError: If the object is absent.
        """
        with translate_errors(key):
            return self.fs.openbin(key, "r")

    def remove(self, key: str) -> None:
        """Remove object `key`.

        Raises:
            NotFoundError: If the object is absent.
        """
        with translate_errors(key):
            self.fs.remove(key)
        logger.debug("Removed blob %s", key)

    def keys(self) -> Iterator[str]:
        """Return generator that yields the name of every stored object."""
        with translate_errors():
            for info in self.fs.scandir("/"):
                if info.is_file:
                    yield info.name

    def count(self) -> int:
        """Return the number of stored objects."""
        return sum(1 for _ in self.keys())

    def size(self) -> int:
        """Return the total size in bytes of all stored objects."""
        with translate_errors():
            return sum(info.size
                       for info in self.fs.scandir("/", namespaces=["details"])
                       if info.is_file)

    def close(self) -> None:
        """Close the backing filesystem."""
        self.fs.close()
