"""
Secure logging service.

Two small, independent interfaces (Protocols): `Logger` and `Encryptor`.
`SecureLogger` satisfies both at once (structural subtyping, no explicit
inheritance needed) and composes them in `secure_log()`.

The "encryption" only wraps the text in a marker, ENCRYPTED[...]. It is a
placeholder and provides no confidentiality.
"""

from typing import Protocol, runtime_checkable

ENCRYPTED_PREFIX = "ENCRYPTED["
ENCRYPTED_SUFFIX = "]"


@runtime_checkable
class Logger(Protocol):
    """Anything with a `log(message)` method."""

    def log(self, message: str) -> None: ...


@runtime_checkable
class Encryptor(Protocol):
    """Anything that can encrypt and decrypt strings."""

    def encrypt(self, data: str) -> str: ...

    def decrypt(self, encrypted_data: str) -> str: ...


class SecureLogger:
    """Logs messages after encrypting them.

    Satisfies both `Logger` and `Encryptor`.
    """

    def log(self, message: str) -> None:
        print(f"Logging: {message}")

    def encrypt(self, data: str) -> str:
        return f"{ENCRYPTED_PREFIX}{data}{ENCRYPTED_SUFFIX}"

    def decrypt(self, encrypted_data: str) -> str:
        # Input without the marker on both ends is passed through untouched.
        if encrypted_data.startswith(ENCRYPTED_PREFIX) and encrypted_data.endswith(ENCRYPTED_SUFFIX):
            return encrypted_data[len(ENCRYPTED_PREFIX) : -len(ENCRYPTED_SUFFIX)]
        return encrypted_data

    def secure_log(self, message: str) -> None:
        self.log(self.encrypt(message))
