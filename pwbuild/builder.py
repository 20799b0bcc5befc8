"""
Fluent password builder.

    password = (
        PasswordGenerator.create()
        .with_length(32)
        .with_numbers()
        .with_uppercase()
        .build()
    )

A builder hands its settings over exactly once: after `build()` or
`finalize()` every further call raises BuilderConsumedError. Start a new
builder with `create()` (or `from_config()`) for the next password, or keep
the PasswordConfig returned by `finalize()` and call `generate()` on it.
"""

from __future__ import annotations

import dataclasses
import logging
import operator
import random
from typing import Optional

from .config import DEFAULT_CONFIG, PasswordConfig
from .exceptions import BuilderConsumedError

log = logging.getLogger(__name__)


class PasswordGenerator:
    """
    Collects password settings, then builds one password from them.
    """

    def __init__(self, config: Optional[PasswordConfig] = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._consumed = False

    @classmethod
    def create(cls) -> "PasswordGenerator":
        """Builder with default settings: 20 lowercase letters."""
        return cls()

    @classmethod
    def from_config(cls, config: PasswordConfig) -> "PasswordGenerator":
        return cls(config)

    # --- settings ---

    def with_length(self, length: int) -> "PasswordGenerator":
        # Zero and negative lengths are accepted; they build an empty password.
        if isinstance(length, bool):
            raise TypeError("length must be an int, got bool")
        # Anything with __index__ (numpy integers included) is accepted.
        return self._update(length=operator.index(length))

    def with_special_characters(self) -> "PasswordGenerator":
        return self._update(include_special_characters=True)

    def with_numbers(self) -> "PasswordGenerator":
        return self._update(use_numbers=True)

    def with_uppercase(self) -> "PasswordGenerator":
        return self._update(use_uppercase=True)

    def with_underlines(self) -> "PasswordGenerator":
        return self._update(use_underlines=True)

    def require_each_category(self) -> "PasswordGenerator":
        """
        Opt in to placing at least one character from every enabled
        category (lowercase included). Without it, categories are only
        made available, not guaranteed.
        """
        return self._update(require_each_category=True)

    # --- terminal operations ---

    @property
    def consumed(self) -> bool:
        return self._consumed

    def finalize(self) -> PasswordConfig:
        """
        Hand over the collected settings as an immutable PasswordConfig.
        The builder cannot be used afterwards.
        """
        self._check_usable()
        self._consumed = True
        cfg = self._config
        log.debug(
            "Finalized password config: length=%d alphabet_size=%d "
            "special=%s numbers=%s uppercase=%s underlines=%s require_each=%s",
            cfg.length,
            len(cfg.alphabet),
            cfg.include_special_characters,
            cfg.use_numbers,
            cfg.use_uppercase,
            cfg.use_underlines,
            cfg.require_each_category,
        )
        return cfg

    def build(self, rng: Optional[random.Random] = None) -> str:
        """
        Finalize the builder and generate the password.

        `rng` is any random.Random-compatible source (seeded Random for
        reproducible output, QuantumRandom, ...). Defaults to SystemRandom.
        """
        return self.finalize().generate(rng)

    # --- internals ---

    def _check_usable(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(
                "This PasswordGenerator was already built; "
                "start a new one with PasswordGenerator.create()."
            )

    def _update(self, **changes) -> "PasswordGenerator":
        self._check_usable()
        self._config = dataclasses.replace(self._config, **changes)
        return self

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else "open"
        return f"<PasswordGenerator {state} {self._config!r}>"
