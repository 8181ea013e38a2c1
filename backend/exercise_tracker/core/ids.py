"""Identifier Generation: opaque random tokens for users and exercises.

Invariants:
    - Ids are ID_LENGTH characters from the base-36 alphabet (0-9, a-z)
    - Two independent segments are drawn per id
    - Not cryptographic: uniqueness is probabilistic, the store re-draws on collision

Design Decisions:
    - random over secrets: ids are lookup keys, not credentials
    - rng injectable: tests pass a seeded random.Random for determinism
"""

import random
import string


ID_ALPHABET: str = string.digits + string.ascii_lowercase
ID_SEGMENT_LENGTH: int = 13
ID_LENGTH: int = ID_SEGMENT_LENGTH * 2

_default_rng = random.Random()


def _random_segment(rng: random.Random) -> str:
    return "".join(rng.choices(ID_ALPHABET, k=ID_SEGMENT_LENGTH))


def generate_id(rng: random.Random | None = None) -> str:
    """Return a fresh opaque id made of two random base-36 segments."""
    rng = rng or _default_rng
    return _random_segment(rng) + _random_segment(rng)
