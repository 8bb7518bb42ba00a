"""Repository name validation.

Names are checked against an ordered list of rules before any hub mutation;
the first failing rule wins. Validation is purely syntactic: no case folding
and no Unicode normalization.
"""

from __future__ import annotations

from collections.abc import Callable

from localhub.exceptions import (
    EmptyNameError,
    InvalidCharacterError,
    NameTooLongError,
    NameValidationError,
    ReservedNameError,
)

__all__ = [
    "INVALID_NAME_CHARS",
    "MAX_NAME_LENGTH",
    "RESERVED_NAMES",
    "check_repo_name",
    "validate_repo_name",
]

#: Maximum repository name length, in code points
MAX_NAME_LENGTH = 255

#: Current and parent directory tokens
RESERVED_NAMES: frozenset[str] = frozenset({".", ".."})

#: Characters never allowed in a repository name, in reporting order
INVALID_NAME_CHARS: tuple[str, ...] = ("/", "\\", ":", "*", "?", '"', "<", ">", "|")

NameRule = Callable[[str], NameValidationError | None]


def _check_empty(name: str) -> NameValidationError | None:
    if not name:
        return EmptyNameError(name)
    return None


def _check_length(name: str) -> NameValidationError | None:
    if len(name) > MAX_NAME_LENGTH:
        return NameTooLongError(name, MAX_NAME_LENGTH)
    return None


def _check_reserved(name: str) -> NameValidationError | None:
    if name in RESERVED_NAMES:
        return ReservedNameError(name)
    return None


def _check_characters(name: str) -> NameValidationError | None:
    for char in INVALID_NAME_CHARS:
        if char in name:
            return InvalidCharacterError(name, char)
    return None


_RULES: tuple[NameRule, ...] = (
    _check_empty,
    _check_length,
    _check_reserved,
    _check_characters,
)


def check_repo_name(name: str) -> NameValidationError | None:
    """Run the validation rules and return the first failure.

    Args:
        name: Repository name supplied by the user.

    Returns:
        The error for the first rule that fails, or None if the name is valid.

    Example:
        >>> check_repo_name("my-project") is None
        True
        >>> type(check_repo_name("..")).__name__
        'ReservedNameError'
    """
    for rule in _RULES:
        error = rule(name)
        if error is not None:
            return error
    return None


def validate_repo_name(name: str) -> None:
    """Validate a repository name.

    Raises:
        NameValidationError: The subclass matching the first failed rule.
    """
    error = check_repo_name(name)
    if error is not None:
        raise error
