"""Tests for sampling characters out of an alphabet."""

from __future__ import annotations

import random
from collections import Counter

from pwbuild.config import LOWERCASE, PasswordConfig
from pwbuild.mapping import default_rng, sample_password, sample_password_with_categories


def chi_square(counts: Counter, alphabet: str, total: int) -> float:
    expected = total / len(alphabet)
    return sum((counts.get(ch, 0) - expected) ** 2 / expected for ch in alphabet)


def test_sample_length_and_membership(seeded_rng):
    password = sample_password("abc", 50, seeded_rng)
    assert len(password) == 50
    assert set(password) <= set("abc")


def test_non_positive_length_is_empty(seeded_rng):
    assert sample_password(LOWERCASE, 0, seeded_rng) == ""
    assert sample_password(LOWERCASE, -5, seeded_rng) == ""
    assert sample_password_with_categories([LOWERCASE, "0"], -1, seeded_rng) == ""


def test_single_character_alphabet():
    assert sample_password("x", 4) == "xxxx"


def test_default_rng_is_system_random():
    assert isinstance(default_rng(), random.SystemRandom)
    assert default_rng() is default_rng()


def test_lowercase_frequencies_are_uniform():
    rng = random.Random(1)
    total = 26_000
    counts = Counter(sample_password(LOWERCASE, total, rng))
    assert set(counts) == set(LOWERCASE)
    # 25 degrees of freedom, p ~ 1e-4
    assert chi_square(counts, LOWERCASE, total) < 60.0


def test_full_alphabet_frequencies_are_uniform():
    alphabet = PasswordConfig(
        include_special_characters=True,
        use_numbers=True,
        use_uppercase=True,
        use_underlines=True,
    ).alphabet
    rng = random.Random(2)
    total = 93_000
    counts = Counter(sample_password(alphabet, total, rng))
    assert set(counts) == set(alphabet)
    # 92 degrees of freedom, p ~ 1e-4
    assert chi_square(counts, alphabet, total) < 150.0


def test_categories_guarantee_is_shuffled():
    # With only forced positions, the digit must not always land first.
    positions = set()
    for seed in range(40):
        password = sample_password_with_categories(["a", "1"], 2, random.Random(seed))
        assert sorted(password) == ["1", "a"]
        positions.add(password.index("1"))
    assert positions == {0, 1}
