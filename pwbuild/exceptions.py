"""
Errors raised by the password builder.
"""


class PasswordBuildError(RuntimeError):
    """Base class for builder errors."""


class BuilderConsumedError(PasswordBuildError):
    """
    Raised when a PasswordGenerator is used again after `build()` or
    `finalize()` handed its configuration over.
    """
