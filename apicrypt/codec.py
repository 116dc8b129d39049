"""
Codec — one encrypt/decrypt contract over two AES backends
==========================================================
Callers pick an Algorithm and a key; the codec picks the backend and
takes care of base64 on the way out and strict base64 on the way in.

    codec = Codec(StaticKeyProvider(client_secret))
    token = codec.encrypt(b"payload", Algorithm.AES_256, key32)
    codec.decrypt(token, Algorithm.AES_256, key32)   # b"payload"

When no key is given, the injected KeyProvider supplies one. Decrypt
returns None when the ciphertext is not recoverable under the key; an
empty plaintext is a valid result and comes back as b"".

The codec holds no mutable state and is safe to share between threads.
"""

import base64
import binascii
import logging
import os
from typing import Optional, Union

from .algorithms import Algorithm
from .exceptions import InvalidEncoding, KeyUnavailable
from .providers import KeyProvider, RandomSource, Secret, to_bytes

logger = logging.getLogger(__name__)

Data = Union[bytes, str]

_WHITESPACE = b" \t\r\n\x0b\x0c"


def strict_b64decode(data: Data) -> bytes:
    """
    Decode base64 the way legacy clients send it: embedded whitespace is
    skipped and trailing "=" padding is optional. Anything outside the
    alphabet, misplaced padding or a lone trailing character raises
    InvalidEncoding.
    """
    if isinstance(data, str):
        try:
            data = data.encode("ascii")
        except UnicodeEncodeError as exc:
            raise InvalidEncoding("Cannot decode data") from exc
    body = bytes(data).translate(None, _WHITESPACE).rstrip(b"=")
    if len(body) % 4 == 1:
        raise InvalidEncoding("Cannot decode data")
    body += b"=" * (-len(body) % 4)
    try:
        return base64.b64decode(body, validate=True)
    except binascii.Error as exc:
        raise InvalidEncoding("Cannot decode data") from exc


class Codec:
    """Base64-safe symmetric encryption over AES-128-ECB and AES-256-CBC."""

    def __init__(self, key_provider: KeyProvider = None,
                 random_source: RandomSource = os.urandom):
        self._key_provider = key_provider
        self._backends = {
            algo: algo.create_backend(random_source) for algo in Algorithm
        }

    def _resolve_key(self, key: Optional[Secret]) -> bytes:
        if key is not None:
            return to_bytes(key)
        if self._key_provider is None:
            raise KeyUnavailable()
        return to_bytes(self._key_provider.get_default_key())

    def encrypt(self, data: Data, algorithm: Union[Algorithm, str],
                key: Optional[Secret] = None) -> str:
        """
        Encrypt and base64-encode.
        Raises UnsupportedAlgorithm, KeyUnavailable or EncryptionFailure.
        """
        algo    = Algorithm.parse(algorithm)
        key     = self._resolve_key(key)
        raw     = self._backends[algo].encrypt(to_bytes(data), key)
        encoded = base64.b64encode(raw).decode("ascii")
        logger.debug(f"encrypt {algo.value}: {len(raw)}B -> {len(encoded)} chars")
        return encoded

    def decrypt(self, data: Data, algorithm: Union[Algorithm, str],
                key: Optional[Secret] = None) -> Optional[bytes]:
        """
        Base64-decode and decrypt.
        Returns the plaintext, or None if it cannot be recovered.
        Raises UnsupportedAlgorithm, KeyUnavailable or InvalidEncoding.
        """
        algo = Algorithm.parse(algorithm)
        key  = self._resolve_key(key)
        decoded = strict_b64decode(data)
        logger.debug(f"decrypt {algo.value}: {len(decoded)}B")
        return self._backends[algo].decrypt(decoded, key)
