# -*- coding: utf-8 -*-
"""Module for the ContentStore class."""

import io
import logging
from contextlib import closing
from typing import Iterator, Optional, Protocol, runtime_checkable

from .exceptions import (
    AlreadyExistsError,
    MediumError,
    NotFoundError,
    StorageReadError,
    StorageWriteError,
)
from .hashing import DEFAULT_ALGORITHM, DEFAULT_DIGEST_SIZE, HashFunction
from .medium import BlobMedium, Root
from .utils import SPOOL_SIZE, Stream

logger = logging.getLogger(__name__)


@runtime_checkable
class BlobStore(Protocol):
    """Capability interface for content-addressed stores.

    Transport code should depend on this rather than on a concrete store.
    """

    def put(self, content) -> str:
        """Store `content` and return its key."""
        ...

    def get(self, key: str) -> Optional[io.IOBase]:
        """Return a readable handle for `key`, or ``None`` if it is absent."""
        ...

    def delete(self, key: str) -> None:
        """Remove `key`, raising :class:`NotFoundError` if it is absent."""
        ...


class ContentStore(object):
    """Content addressable blob store. Blobs are saved on a :class:`BlobMedium`
    under the hex digest of their content, so identical content is only ever
    stored once.

    The store keeps no mutable state of its own and is safe to share between
    threads.

    Attributes:
        medium (BlobMedium): Backing byte storage.
        hasher (HashFunction): Digest used to derive keys. Defaults to
            32-byte blake2b.
        spool_size (int): Bytes of non-seekable input held in memory before
            spilling to a temporary file.
    """

    def __init__(self,
                 medium: BlobMedium,
                 hasher: Optional[HashFunction] = None,
                 spool_size: int = SPOOL_SIZE):
        self.medium = medium
        self.hasher = hasher if hasher is not None else HashFunction()
        self.spool_size = spool_size

    def __repr__(self):
        return "ContentStore({0!r}, {1!r})".format(self.medium, self.hasher)

    def put(self, content) -> str:
        """Store `content` on the medium using its content hash for the key.
        Content already present is not written again.

        Args:
            content: Readable object or ``bytes``. Seekable objects are
                returned to their original position, never closed.

        Returns:
            The content's key.

        Raises:
            ReadError: If `content` fails while being read.
            SeekError: If `content` can't be rewound.
            StorageWriteError: If the medium fails while checking for or
                writing the blob.
        """
        with closing(Stream(content, spool_size=self.spool_size)) as stream:
            key = self.hasher.hexdigest(stream)

            try:
                exists = self.medium.exists(key)
            except (MediumError, OSError) as exc:
                raise StorageWriteError(
                    "Could not check for blob {0}: {1}".format(key, exc)
                ) from exc

            if exists:
                logger.debug("Blob %s already stored", key)
            else:
                self._copy(stream, key)

        return key

    def get(self, key: str) -> Optional[io.IOBase]:
        """Return a readable, seekable handle for the blob stored under `key`.
        If `key` isn't stored, or isn't a well-formed key at all, then ``None``
        is returned. The caller must close the handle.

        Raises:
            StorageReadError: If the medium fails while looking up or opening
                the blob.
        """
        if not self.hasher.is_key(key):
            return None

        try:
            if not self.medium.exists(key):
                return None
            return self.medium.open(key)
        except (MediumError, NotFoundError, OSError) as exc:
            raise StorageReadError(
                "Could not open blob {0}: {1}".format(key, exc)) from exc

    def delete(self, key: str) -> None:
        """Delete the blob stored under `key`.

        Raises:
            NotFoundError: If nothing is stored under `key`.
        """
        if not self.hasher.is_key(key):
            raise NotFoundError(key)

        self.medium.remove(key)

    def exists(self, key: str) -> bool:
        """Check whether a blob is stored under `key`."""
        return self.hasher.is_key(key) and self.medium.exists(key)

    def keys(self) -> Iterator[str]:
        """Return generator that yields the key of every stored blob."""
        return (key for key in self.medium.keys() if self.hasher.is_key(key))

    def count(self) -> int:
        """Return the number of stored blobs."""
        return sum(1 for _ in self.keys())

    def size(self) -> int:
        """Return the total size in bytes of everything on the medium."""
        return self.medium.size()

    def close(self) -> None:
        self.medium.close()

    def __contains__(self, key: str) -> bool:
        return self.exists(key)

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    def __len__(self) -> int:
        return self.count()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _copy(self, stream: Stream, key: str) -> None:
        """Copy the contents of `stream` into a new object named `key`. Losing
        a create race to an identical upload counts as success.
        """
        try:
            handle = self.medium.create(key)
        except AlreadyExistsError:
            logger.debug("Blob %s created concurrently", key)
            return
        except (MediumError, OSError) as exc:
            raise StorageWriteError(
                "Could not create blob {0}: {1}".format(key, exc)) from exc

        try:
            with closing(handle) as dst:
                for data in stream:
                    dst.write(data)
        except (MediumError, OSError) as exc:
            # No rollback: the object may be left truncated on the medium.
            logger.error("Write of blob %s failed, it may be truncated: %s",
                         key, exc)
            raise StorageWriteError(
                "Could not write blob {0}: {1}".format(key, exc)) from exc

        logger.debug("Stored blob %s", key)


def open_store(root: Root,
               algorithm: str = DEFAULT_ALGORITHM,
               digest_size: int = DEFAULT_DIGEST_SIZE,
               dmode: int = 0o755,
               spool_size: int = SPOOL_SIZE) -> ContentStore:
    """Open a :class:`ContentStore` rooted at `root`, creating the root if it
    doesn't exist.

    Args:
        root: Local directory path, ``fs`` URL, or open ``fs`` filesystem.
        algorithm: ``hashlib`` algorithm used for keys.
        digest_size: Digest width in bytes.
        dmode: Mode used when creating a local root directory.
        spool_size: See :attr:`ContentStore.spool_size`.

    Raises:
        MediumPermissionError: If the root can't be created or accessed
            because of permissions.
        MediumError: On any other failure to open the root.
    """
    hasher = HashFunction(algorithm, digest_size)
    return ContentStore(BlobMedium(root, dmode=dmode), hasher,
                        spool_size=spool_size)
