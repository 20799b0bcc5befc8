"""
Fluent random password builder.
"""

from __future__ import annotations

import random
from typing import Optional

from .builder import PasswordGenerator
from .config import DEFAULT_CONFIG, PasswordConfig
from .exceptions import BuilderConsumedError, PasswordBuildError


def generate_password(
    config: Optional[PasswordConfig] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    One-call helper: build a password straight from a PasswordConfig
    (DEFAULT_CONFIG when omitted).
    """
    return PasswordGenerator.from_config(config or DEFAULT_CONFIG).build(rng)


__all__ = [
    "PasswordGenerator",
    "PasswordConfig",
    "DEFAULT_CONFIG",
    "PasswordBuildError",
    "BuilderConsumedError",
    "generate_password",
]
