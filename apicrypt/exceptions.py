"""
Error taxonomy
==============
Every failure surfaces to the immediate caller as its own type so calling
code can branch on cause: retry the encryption, reject the request, or ask
the client to authorize.

    CryptError
     ├── UnsupportedAlgorithm   unknown algorithm identifier
     ├── InvalidEncoding        input is not strict base64
     ├── EncryptionFailure      cipher or random source failed (retryable)
     ├── DecryptionFailure      time-boxed payload could not be recovered
     ├── KeyUnavailable         no key given and none in the current context
     └── Expired                time-boxed payload is past its timestamp

Caller errors also subclass the matching builtin so existing
``except ValueError`` handlers keep working.
"""


class CryptError(Exception):
    """Base class for everything raised by apicrypt."""


class UnsupportedAlgorithm(CryptError, ValueError):
    def __init__(self, algorithm):
        super().__init__(f"Unknown algorithm: {algorithm!r}")
        self.algorithm = algorithm


class InvalidEncoding(CryptError, ValueError):
    pass


class EncryptionFailure(CryptError):
    pass


class DecryptionFailure(CryptError):
    pass


class KeyUnavailable(CryptError, PermissionError):
    """No secret is available to encrypt with; the request must authorize."""

    MESSAGE = "Request must authorize to encrypt"

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class Expired(CryptError, ValueError):
    def __init__(self, timestamp: int, now: int):
        super().__init__(f"Timestamp {timestamp} has expired (now={now}).")
        self.timestamp = timestamp
        self.now       = now
