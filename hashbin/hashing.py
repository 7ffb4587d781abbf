# -*- coding: utf-8 -*-
"""Module for the HashFunction class."""

import hashlib
import re

from .utils import Stream

#: Algorithms whose digest width is configurable.
VARIABLE_DIGEST_ALGORITHMS = ("blake2b", "blake2s")

DEFAULT_ALGORITHM = "blake2b"
DEFAULT_DIGEST_SIZE = 32


class HashFunction(object):
    """Map a byte stream to a fixed-width digest rendered as lowercase hex.

    The digest is the store key, so `algorithm` and `digest_size` are part of
    the persisted format: changing either invalidates every stored key.

    Attributes:
        algorithm (str): Name of a ``hashlib`` algorithm, ie, a member of
            ``hashlib.algorithms_available``. Defaults to ``'blake2b'``.
        digest_size (int): Digest width in bytes. Only the blake2 family
            supports widths other than its native one. Defaults to ``32``.
    """

    def __init__(self,
                 algorithm: str = DEFAULT_ALGORITHM,
                 digest_size: int = DEFAULT_DIGEST_SIZE):
        if algorithm not in hashlib.algorithms_available:
            raise ValueError(
                "Unsupported hash algorithm: {0!r}".format(algorithm))

        self.algorithm = algorithm
        self.digest_size = digest_size

        # Fail early on a width the algorithm can't produce. Extendable
        # output functions (shake_*) report a native width of 0.
        native = self.new().digest_size
        if native <= 0:
            raise ValueError(
                "Algorithm {0!r} has no fixed digest width".format(algorithm))
        if native != digest_size:
            raise ValueError(
                "Algorithm {0!r} produces {1}-byte digests, not {2}".format(
                    algorithm, native, digest_size))

        self._key_pattern = re.compile(
            r"^[0-9a-f]{%d}\Z" % self.key_length)

    def __repr__(self):
        return "HashFunction(algorithm={0!r}, digest_size={1!r})".format(
            self.algorithm, self.digest_size)

    @property
    def key_length(self) -> int:
        """Length of a key in hex characters."""
        return 2 * self.digest_size

    def new(self):
        """Return a fresh ``hashlib`` hash object."""
        if self.algorithm in VARIABLE_DIGEST_ALGORITHMS:
            return getattr(hashlib, self.algorithm)(digest_size=self.digest_size)
        return hashlib.new(self.algorithm)

    def hexdigest(self, stream: Stream) -> str:
        """Consume `stream` once and return its digest as lowercase hex. The
        stream is rewound to the start of its content afterwards.

        Raises:
            ReadError: If the stream fails while being read.
            SeekError: If the stream can't be rewound.
        """
        hash = self.new()
        for data in stream:
            hash.update(data)
        stream.rewind()
        return hash.hexdigest()

    def is_key(self, value) -> bool:
        """Return whether `value` is a well-formed key for this function."""
        return isinstance(value, str) and bool(self._key_pattern.match(value))
