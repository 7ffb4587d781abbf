# -*- coding: utf-8 -*-

from io import BytesIO
import hashlib

import pytest

from hashbin import HashFunction, ReadError
from hashbin.utils import Stream


HELLO_KEY = "1fe569ab5a74d6bf7c7a783fcc61dfc30cba304628e31547c19135dd24f040d5"


class FlakyIO(BytesIO):
    def read(self, *args):
        raise OSError("Connection reset by peer")


@pytest.fixture
def hasher():
    return HashFunction()


def test_hash_defaults(hasher):
    assert hasher.algorithm == "blake2b"
    assert hasher.digest_size == 32
    assert hasher.key_length == 64


def test_hash_hexdigest(hasher):
    stream = Stream(BytesIO(b"  ?HelloWorldTest!  "))
    assert hasher.hexdigest(stream) == HELLO_KEY


def test_hash_hexdigest_rewinds(hasher):
    stream = Stream(BytesIO(b"  ?HelloWorldTest!  "))

    assert hasher.hexdigest(stream) == hasher.hexdigest(stream)
    assert b"".join(stream) == b"  ?HelloWorldTest!  "


def test_hash_hexdigest_chunked(hasher):
    content = b"0123456789" * 1000
    stream = Stream(BytesIO(content), chunk_size=7)

    assert hasher.hexdigest(stream) == hashlib.blake2b(
        content, digest_size=32).hexdigest()


def test_hash_hexdigest_read_error(hasher):
    stream = Stream(FlakyIO(b"foo"))

    with pytest.raises(ReadError) as excinfo:
        hasher.hexdigest(stream)

    assert isinstance(excinfo.value, IOError)


@pytest.mark.parametrize(
    "algorithm,digest_size",
    [
        ("sha256", 32),
        ("sha512", 64),
        ("blake2s", 32),
        ("blake2b", 64),
        ("blake2b", 20),
    ],
)
def test_hash_algorithms(algorithm, digest_size):
    hasher = HashFunction(algorithm, digest_size)
    key = hasher.hexdigest(Stream(b"foo"))

    assert len(key) == hasher.key_length == digest_size * 2
    assert hasher.is_key(key)


@pytest.mark.parametrize(
    "algorithm,digest_size",
    [
        ("sha256", 16),
        ("blake2s", 64),
        ("nope", 32),
        ("shake_128", 0),
        ("shake_256", 0),
    ],
)
def test_hash_invalid(algorithm, digest_size):
    with pytest.raises(ValueError):
        HashFunction(algorithm, digest_size)


@pytest.mark.parametrize(
    "value,expected",
    [
        (HELLO_KEY, True),
        ("0" * 64, True),
        (HELLO_KEY.upper(), False),
        (HELLO_KEY[:-1], False),
        (HELLO_KEY + "a", False),
        (HELLO_KEY + "\n", False),
        ("g" * 64, False),
        ("", False),
        (None, False),
        (HELLO_KEY.encode(), False),
    ],
)
def test_hash_is_key(hasher, value, expected):
    assert hasher.is_key(value) is expected
