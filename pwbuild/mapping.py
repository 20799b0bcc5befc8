"""
Mapping logic: turn draws from a random source into password characters.
"""

from __future__ import annotations

import random
from typing import List, Optional

_system_random = random.SystemRandom()


def default_rng() -> random.Random:
    """
    Process-wide source used when no rng is injected.
    SystemRandom keeps no state in Python, so it is safe to share between threads.
    """
    return _system_random


def sample_password(
    alphabet: str,
    length: int,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Draw `length` characters uniformly, with replacement, from `alphabet`.

    Each position is an independent `randrange(len(alphabet))` draw, so
    characters can repeat and no category is guaranteed to appear.
    A non-positive length gives an empty string.
    """
    rng = rng or default_rng()
    alphabet_size = len(alphabet)

    password_chars: list[str] = []
    for _ in range(length):
        password_chars.append(alphabet[rng.randrange(alphabet_size)])

    return "".join(password_chars)


def sample_password_with_categories(
    categories: List[str],
    length: int,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Like `sample_password`, but places one character from each category first.

    We:
    - Pick one guaranteed character per category.
    - Fill up to `length` from the combined alphabet.
    - Shuffle so the guaranteed characters are not always in front.
    - Truncate to `length` (best effort when there are more categories than positions).
    """
    if length <= 0:
        return ""

    rng = rng or default_rng()
    alphabet = "".join(categories)

    password_chars = [charset[rng.randrange(len(charset))] for charset in categories]
    while len(password_chars) < length:
        password_chars.append(alphabet[rng.randrange(len(alphabet))])

    rng.shuffle(password_chars)

    return "".join(password_chars[:length])
