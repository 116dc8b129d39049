"""
Time-boxed encryption
=====================
Binds a ciphertext to an expiry timestamp without putting the timestamp
inside it. The key is ``str(timestamp) + shared_salt``, so the same
timestamp must travel alongside the ciphertext for it to decrypt, and a
forged timestamp simply yields the wrong key.

The timestamp is untrusted input: decrypt refuses anything already past
it before touching the cipher. Unlike Codec.decrypt, an empty plaintext
counts as a failure here.
"""

import logging
from .algorithms import Algorithm
from .codec import Codec, Data
from .exceptions import DecryptionFailure, Expired
from .providers import Clock, Secret, system_clock, to_bytes

logger = logging.getLogger(__name__)


class TimeBoxedCipher:
    """Expiry-bound encryption keyed by timestamp + process-wide salt."""

    def __init__(self, shared_salt: Secret, codec: Codec = None,
                 clock: Clock = system_clock):
        self._salt      = to_bytes(shared_salt)
        self._codec     = codec if codec is not None else Codec()
        self._clock     = clock
        self._algorithm = Algorithm.default()

    @classmethod
    def from_settings(cls, settings, codec: Codec = None,
                      clock: Clock = system_clock) -> "TimeBoxedCipher":
        return cls(settings.GLOBAL_SALT, codec=codec, clock=clock)

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @staticmethod
    def _whole_seconds(timestamp) -> int:
        # a fractional timestamp would silently shift both key and expiry
        if isinstance(timestamp, float) and not timestamp.is_integer():
            raise ValueError(f"Timestamp must be whole seconds, got {timestamp!r}")
        return int(timestamp)

    def derive_key(self, timestamp: int) -> bytes:
        return str(self._whole_seconds(timestamp)).encode("ascii") + self._salt

    def encrypt_type_one(self, data: Data, timestamp: int) -> str:
        return self._codec.encrypt(data, self._algorithm, self.derive_key(timestamp))

    def decrypt_type_one(self, data: Data, timestamp: int) -> bytes:
        """
        Raises Expired if ``timestamp`` is earlier than now, InvalidEncoding
        for bad base64, DecryptionFailure if nothing usable comes out.
        """
        timestamp = self._whole_seconds(timestamp)
        now = self._clock()
        if timestamp < now:
            raise Expired(timestamp, now)

        pt = self._codec.decrypt(data, self._algorithm, self.derive_key(timestamp))
        if not pt:
            raise DecryptionFailure("Data could not be decrypted")
        logger.debug(f"time-boxed decrypt ok: {len(pt)}B, {timestamp - now}s left")
        return pt
