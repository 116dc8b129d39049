"""
Legacy backend: AES-128-ECB
===========================
Fixed-key AES-128 in Electronic Codebook mode with PKCS#7 padding.

The caller's key is hashed with MD5 to exactly 16 bytes. There is no IV
and no envelope: the output is the raw padded ciphertext.

WARNING: ECB is deterministic. The same plaintext under the same key
always produces the same ciphertext, so repeated tokens are visible to an
observer. This mode exists only so previously issued ciphertexts keep
decrypting; prefer the AES-256-CBC backend for anything new.

Bundle format: ciphertext (multiple of 16 bytes)

Dependencies: cryptography >= 41.0
"""

import hashlib
import logging
from typing import Optional

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..exceptions import EncryptionFailure

logger = logging.getLogger(__name__)


class Aes128EcbBackend:
    """AES-128-ECB with an MD5-derived key."""

    BLOCK_SIZE = 128   # bits, for PKCS#7
    KEY_SIZE   = 16

    @staticmethod
    def derive_key(key: bytes) -> bytes:
        """Deterministic, unsalted 128-bit digest of the key."""
        return hashlib.md5(key).digest()

    def _cipher(self, key: bytes) -> Cipher:
        return Cipher(algorithms.AES128(self.derive_key(key)), modes.ECB())

    def encrypt(self, plaintext: bytes, key: bytes) -> bytes:
        try:
            padder    = padding.PKCS7(self.BLOCK_SIZE).padder()
            padded    = padder.update(plaintext) + padder.finalize()
            encryptor = self._cipher(key).encryptor()
            ct        = encryptor.update(padded) + encryptor.finalize()
        except ValueError as exc:
            raise EncryptionFailure("Cannot encrypt data") from exc
        logger.debug(f"aes128 encrypt: pt={len(plaintext)}B ct={len(ct)}B")
        return ct

    def decrypt(self, ciphertext: bytes, key: bytes) -> Optional[bytes]:
        """Return the plaintext, or None if the ciphertext or key is wrong."""
        if not ciphertext or len(ciphertext) % (self.BLOCK_SIZE // 8):
            return None
        decryptor = self._cipher(key).decryptor()
        padded    = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder  = padding.PKCS7(self.BLOCK_SIZE).unpadder()
        try:
            pt = unpadder.update(padded) + unpadder.finalize()
        except ValueError:
            return None
        logger.debug(f"aes128 decrypt: ct={len(ciphertext)}B pt={len(pt)}B")
        return pt
