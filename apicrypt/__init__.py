"""
apicrypt — symmetric encryption for short API payloads
=======================================================
Protects tokens and time-boxed handshake data with a caller-supplied or
context-derived secret.

Algorithms:
    aes128  LEGACY   — AES-128-ECB, MD5-derived key, deterministic
    aes256  MODERN   — AES-256-CBC, random IV embedded in the envelope

Wrappers:
    TimeBoxedCipher  — key bound to an expiry timestamp + shared salt

License: Apache 2.0
"""

__version__ = "1.0.0"

from .algorithms  import Algorithm
from .codec       import Codec
from .timeboxed   import TimeBoxedCipher
from .providers   import CallableKeyProvider, KeyProvider, StaticKeyProvider
from .exceptions  import (
    CryptError,
    DecryptionFailure,
    EncryptionFailure,
    Expired,
    InvalidEncoding,
    KeyUnavailable,
    UnsupportedAlgorithm,
)

__all__ = [
    "Algorithm",
    "Codec",
    "TimeBoxedCipher",
    "KeyProvider",
    "StaticKeyProvider",
    "CallableKeyProvider",
    "CryptError",
    "UnsupportedAlgorithm",
    "InvalidEncoding",
    "EncryptionFailure",
    "DecryptionFailure",
    "KeyUnavailable",
    "Expired",
]
