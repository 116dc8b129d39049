"""
Capabilities the codec consumes from its host environment.

    KeyProvider    get_default_key() -> bytes, or raise KeyUnavailable
    Clock          () -> int Unix timestamp
    RandomSource   (n) -> n cryptographically secure bytes

Only the key provider has an interface of its own; clocks and random
sources are plain callables (``time.time``, ``os.urandom``).
"""

import time
from typing import Callable, Optional, Protocol, Union

from .exceptions import KeyUnavailable

Secret = Union[bytes, str]
Clock = Callable[[], int]
RandomSource = Callable[[int], bytes]


def to_bytes(value: Secret) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Expected str or bytes, got {type(value).__name__}")


def system_clock() -> int:
    return int(time.time())


class KeyProvider(Protocol):
    def get_default_key(self) -> bytes:
        ...


class StaticKeyProvider:
    """Always hands out the same secret, e.g. a client secret known at startup."""

    def __init__(self, secret: Secret):
        self._secret = to_bytes(secret)

    def get_default_key(self) -> bytes:
        if not self._secret:
            raise KeyUnavailable()
        return self._secret


class CallableKeyProvider:
    """
    Wraps a context lookup, such as session -> token -> client -> secret.

    The lookup returns the secret, or None / "" when the current request
    is not authorized. It is called once per encrypt/decrypt and may be
    slow; errors it raises propagate unchanged.
    """

    def __init__(self, lookup: Callable[[], Optional[Secret]]):
        self._lookup = lookup

    def get_default_key(self) -> bytes:
        secret = self._lookup()
        if not secret:
            raise KeyUnavailable()
        return to_bytes(secret)
