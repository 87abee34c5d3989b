"""Password scrambling: shifted characters hidden among random padding."""

from __future__ import annotations

import random
from dataclasses import dataclass

CHARACTERS = "qwertyuiopasdfghjklzxcvbnmQWERTYUIOPASDFGHJKLZXCVBNM1234567890!@#$%^&*_+"
CIPHER_LENGTH = 100


@dataclass(frozen=True)
class EncryptedPassword:
    """Scrambled text and the number of padding characters before each real one."""

    ciphertext: str
    padding: int


def _index(char: str) -> int:
    position = CHARACTERS.find(char)
    if position < 0:
        raise ValueError(f"unsupported character {char!r}")
    return position


def encrypt(password: str, user_id: int, rng: random.Random | None = None) -> EncryptedPassword:
    """Scramble a password with a shift taken from the user's ID."""
    if not password:
        raise ValueError("password must not be empty")
    if rng is None:
        rng = random.Random()
    padding = max(0, (CIPHER_LENGTH - len(password)) // len(password))
    shift = user_id % 10
    pieces: list[str] = []
    for char in password:
        pieces.extend(rng.choice(CHARACTERS) for _ in range(padding))
        pieces.append(CHARACTERS[(_index(char) + shift) % len(CHARACTERS)])
    return EncryptedPassword("".join(pieces), padding)


def decrypt(ciphertext: str, user_id: int, padding: int) -> str:
    """Recover the password from scrambled text."""
    if padding < 0:
        raise ValueError("padding must not be negative")
    shift = user_id % 10
    return "".join(
        CHARACTERS[(_index(char) - shift) % len(CHARACTERS)]
        for char in ciphertext[padding :: padding + 1]
    )