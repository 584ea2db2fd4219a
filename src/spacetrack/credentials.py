"""Encryption of credentials stored in the config file.

Identity and password are encrypted with AES in CFB mode using a 32
character passphrase and stored base64 encoded. The passphrase itself can
live in a separate secret file, also base64 encoded.
"""

from __future__ import annotations

import base64
import binascii
import os
import secrets
import string
from pathlib import Path

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

try:
    from cryptography.hazmat.decrepit.ciphers.modes import CFB
except ImportError:  # older cryptography releases
    from cryptography.hazmat.primitives.ciphers.modes import CFB

from .errors import CredentialsError

PASSPHRASE_LENGTH = 32
MIN_PASSWORD_LENGTH = 4

# Fixed so that values written by earlier versions keep decrypting.
IV = bytes([35, 46, 57, 24, 85, 35, 24, 74, 87, 35, 88, 98, 66, 32, 14, 5])

_SYMBOLS = "~!@#$%^&*()_+`-={}|[]:<>?,./"


def _cipher(key: bytes) -> Cipher:
    try:
        return Cipher(algorithms.AES(key), CFB(IV))
    except ValueError as e:
        raise CredentialsError(f"invalid passphrase: {e}") from e


def encode(data: bytes) -> bytes:
    return base64.b64encode(data)


def decode(data: bytes) -> bytes:
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise CredentialsError(f"invalid base64 value: {e}") from e


def encrypt(plaintext: bytes, key: bytes) -> bytes:
    """Encrypt ``plaintext`` with ``key`` and return it base64 encoded."""
    encryptor = _cipher(key).encryptor()
    return encode(encryptor.update(plaintext) + encryptor.finalize())


def decrypt(ciphertext: bytes, key: bytes) -> bytes:
    """Reverse :func:`encrypt`."""
    raw = decode(ciphertext)
    decryptor = _cipher(key).decryptor()
    return decryptor.update(raw) + decryptor.finalize()


def generate_passphrase(length: int = PASSPHRASE_LENGTH) -> str:
    """Random passphrase with at least ten digits and ten symbols."""
    digits = [secrets.choice(string.digits) for _ in range(10)]
    symbols = [secrets.choice(_SYMBOLS) for _ in range(10)]
    letters = [
        secrets.choice(string.ascii_letters)
        for _ in range(length - len(digits) - len(symbols))
    ]
    chars = digits + symbols + letters
    secrets.SystemRandom().shuffle(chars)
    return "".join(chars)


def check_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise CredentialsError(
            f"trying to parse password. Its length is lower than {MIN_PASSWORD_LENGTH}"
        )


def check_passphrase(passphrase: str) -> None:
    if len(passphrase) != PASSPHRASE_LENGTH:
        raise CredentialsError(
            f"passphrase must be of {PASSPHRASE_LENGTH} characters"
        )


def read_passphrase_file(path: Path | str) -> str:
    """Read a base64 encoded passphrase.

    Raises:
        FileNotFoundError: If the file does not exist.
        CredentialsError: If the content is not a 32 byte passphrase.
    """
    data = decode(Path(path).read_bytes().strip())
    if len(data) != PASSPHRASE_LENGTH:
        raise CredentialsError(
            f"passphrase file must hold {PASSPHRASE_LENGTH} characters"
        )
    return data.decode("utf-8")


def write_passphrase_file(path: Path | str, passphrase: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "wb") as f:
        f.write(encode(passphrase.encode("utf-8")))


__all__ = [
    "MIN_PASSWORD_LENGTH",
    "PASSPHRASE_LENGTH",
    "check_passphrase",
    "check_password",
    "decode",
    "decrypt",
    "encode",
    "encrypt",
    "generate_passphrase",
    "read_passphrase_file",
    "write_passphrase_file",
]
