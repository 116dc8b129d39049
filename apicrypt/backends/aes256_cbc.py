"""
Modern backend: AES-256-CBC
===========================
AES-256 in Cipher Block Chaining mode with a fresh random IV per message.

The key is used exactly as supplied; it must already be 32 bytes. Derive
it from a password or secret before calling if it is not.

Bundle format: b"aes256"(6) || iv(16) || ciphertext

The leading tag lets the decrypt path recognise its own output: anything
that does not start with it is reported as "not mine" rather than raised.

Note: CBC without a MAC does not detect tampering. A flipped byte yields
garbage or a padding failure, never the original plaintext.

Dependencies: cryptography >= 41.0
"""

import logging
import os
from typing import Callable, Optional

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..exceptions import EncryptionFailure

logger = logging.getLogger(__name__)

TAG = b"aes256"


class Aes256CbcBackend:
    """AES-256-CBC with the IV embedded after an algorithm tag."""

    BLOCK_SIZE = 128   # bits, for PKCS#7
    KEY_SIZE   = 32
    IV_SIZE    = 16
    TAG        = TAG

    def __init__(self, random_source: Callable[[int], bytes] = os.urandom):
        self._random = random_source

    def _new_iv(self) -> bytes:
        try:
            iv = self._random(self.IV_SIZE)
        except (OSError, NotImplementedError) as exc:
            raise EncryptionFailure("Cannot encrypt data") from exc
        if not isinstance(iv, bytes) or len(iv) != self.IV_SIZE:
            raise EncryptionFailure("Cannot encrypt data")
        return iv

    def encrypt(self, plaintext: bytes, key: bytes) -> bytes:
        iv = self._new_iv()
        try:
            cipher    = Cipher(algorithms.AES256(key), modes.CBC(iv))
            padder    = padding.PKCS7(self.BLOCK_SIZE).padder()
            padded    = padder.update(plaintext) + padder.finalize()
            encryptor = cipher.encryptor()
            ct        = encryptor.update(padded) + encryptor.finalize()
        except ValueError as exc:
            raise EncryptionFailure("Cannot encrypt data") from exc
        logger.debug(f"aes256 encrypt: pt={len(plaintext)}B ct={len(ct)}B")
        return self.TAG + iv + ct

    def decrypt(self, envelope: bytes, key: bytes) -> Optional[bytes]:
        """
        Return the plaintext, or None if the envelope is not ours, is
        truncated, or does not decrypt under this key.
        """
        header = len(self.TAG) + self.IV_SIZE
        if envelope[:len(self.TAG)] != self.TAG or len(envelope) < header:
            return None
        iv = envelope[len(self.TAG):header]
        ct = envelope[header:]
        if not ct or len(ct) % (self.BLOCK_SIZE // 8):
            return None
        try:
            cipher = Cipher(algorithms.AES256(key), modes.CBC(iv))
        except ValueError:
            return None
        decryptor = cipher.decryptor()
        padded    = decryptor.update(ct) + decryptor.finalize()
        unpadder  = padding.PKCS7(self.BLOCK_SIZE).unpadder()
        try:
            pt = unpadder.update(padded) + unpadder.finalize()
        except ValueError:
            return None
        logger.debug(f"aes256 decrypt: ct={len(ct)}B pt={len(pt)}B")
        return pt
