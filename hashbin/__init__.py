# -*- coding: utf-8 -*-
"""hashbin is a minimal content-addressed blob store. What does that mean?
Simply, that hashbin saves blobs under the hash of their own bytes and hands
that hash back as the key used to get or delete them later.

Typical use cases for this kind of system are ones where:

- Blobs are written once and never change (e.g. uploaded media).
- It's desirable to have no duplicate blobs (e.g. repeated user uploads).
- Blob metadata is stored elsewhere (e.g. in a database).
"""

from .__meta__ import (
    __title__,
    __summary__,
    __url__,
    __version__,
    __author__,
    __email__,
    __license__,
)

from .exceptions import (
    AlreadyExistsError,
    HashBinError,
    MediumError,
    MediumPermissionError,
    NotFoundError,
    ReadError,
    SeekError,
    StorageError,
    StorageReadError,
    StorageWriteError,
    StreamError,
)
from .hashing import HashFunction
from .medium import BlobMedium, ensure_namespace
from .store import BlobStore, ContentStore, open_store


__all__ = (
    "AlreadyExistsError",
    "BlobMedium",
    "BlobStore",
    "ContentStore",
    "HashBinError",
    "HashFunction",
    "MediumError",
    "MediumPermissionError",
    "NotFoundError",
    "ReadError",
    "SeekError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "StreamError",
    "ensure_namespace",
    "open_store",
)
