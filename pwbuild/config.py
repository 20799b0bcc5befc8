"""
Configuration for the password builder.
"""

from __future__ import annotations

from dataclasses import dataclass

from .entropy import estimate_entropy_bits
from .mapping import sample_password, sample_password_with_categories

# Character sets, appended to the alphabet in this order.
LOWERCASE = "qwertyuiopasdfghjklzxcvbnm"
SPECIAL_CHARACTERS = "!\"$#%'()*+`-./:;<=>?@[\\]^{|}~&"
NUMBERS = "1234567890"
UPPERCASE = "QWERTYUIOPASDFGHJKLZXCVBNM"
UNDERLINE = "_"


@dataclass(frozen=True)
class PasswordConfig:
    # Desired password length in characters.
    # Zero or negative produces an empty password.
    length: int = 20

    include_special_characters: bool = False
    use_numbers: bool = False
    use_uppercase: bool = False
    use_underlines: bool = False

    # Opt-in: place at least one character of every enabled category.
    require_each_category: bool = False

    @property
    def categories(self) -> list[str]:
        """
        Character sets enabled by this config, lowercase first.
        """
        sets = [LOWERCASE]
        if self.include_special_characters:
            sets.append(SPECIAL_CHARACTERS)
        if self.use_numbers:
            sets.append(NUMBERS)
        if self.use_uppercase:
            sets.append(UPPERCASE)
        if self.use_underlines:
            sets.append(UNDERLINE)
        return sets

    @property
    def alphabet(self) -> str:
        return "".join(self.categories)

    @property
    def entropy_bits(self) -> float:
        return estimate_entropy_bits(self.length, len(self.alphabet))

    def generate(self, rng=None) -> str:
        """
        Produce one password from this config.

        The config is immutable, so it can be used for any number of
        passwords; each call draws independently from `rng`.
        """
        if self.require_each_category:
            return sample_password_with_categories(self.categories, self.length, rng)
        return sample_password(self.alphabet, self.length, rng)


# Settings used by create() and generate_password()
DEFAULT_CONFIG = PasswordConfig()
