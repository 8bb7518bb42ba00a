from __future__ import annotations

from localhub.exceptions.base import LocalHubError


class NameValidationError(LocalHubError):
    """Exception for repository names rejected before any filesystem change.

    Each validation rule has its own subclass so callers can tell the
    failures apart without parsing messages.

    Attributes:
        message: Human-readable error message.
        name: The rejected repository name.
    """

    def __init__(self, message: str, name: str) -> None:
        """Initialize the NameValidationError.

        Args:
            message: Human-readable error message.
            name: The rejected repository name.
        """
        self.name = name
        super().__init__(message)


class EmptyNameError(NameValidationError):
    """Repository name is the empty string."""

    def __init__(self, name: str = "") -> None:
        super().__init__("Repository name cannot be empty", name=name)


class NameTooLongError(NameValidationError):
    """Repository name exceeds the maximum length.

    Attributes:
        max_length: The limit that was exceeded, in code points.
    """

    def __init__(self, name: str, max_length: int) -> None:
        self.max_length = max_length
        super().__init__(
            f"Repository name is too long (max {max_length} characters)",
            name=name,
        )


class ReservedNameError(NameValidationError):
    """Repository name is '.' or '..'."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Repository name cannot be '{name}'", name=name)


class InvalidCharacterError(NameValidationError):
    """Repository name contains a forbidden character.

    Attributes:
        char: The offending character.
    """

    def __init__(self, name: str, char: str) -> None:
        self.char = char
        super().__init__(f"Repository name cannot contain '{char}'", name=name)
