"""
The two supported algorithms, each bound to its own backend.

The enum values are the historical string identifiers, so
``Algorithm("aes256")`` and ``Algorithm.AES_256`` are interchangeable.
"""

import os
from enum import Enum
from typing import Callable, Union

from .backends.aes128_ecb import Aes128EcbBackend
from .backends.aes256_cbc import Aes256CbcBackend
from .exceptions import UnsupportedAlgorithm


class Algorithm(str, Enum):
    AES_128 = "aes128"
    AES_256 = "aes256"

    @classmethod
    def default(cls) -> "Algorithm":
        # still AES-128 so tokens stay readable by older consumers
        return cls.AES_128

    @classmethod
    def parse(cls, value: Union["Algorithm", str]) -> "Algorithm":
        """Coerce an identifier to an Algorithm or raise UnsupportedAlgorithm."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedAlgorithm(value) from None

    def create_backend(self, random_source: Callable[[int], bytes] = os.urandom):
        if self is Algorithm.AES_256:
            return Aes256CbcBackend(random_source)
        return Aes128EcbBackend()
