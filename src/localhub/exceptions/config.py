from __future__ import annotations

from typing import Any

from localhub.exceptions.base import LocalHubError


class ConfigError(LocalHubError):
    """Exception for configuration loading, parsing, and validation errors.

    Raised for YAML parsing failures, Pydantic validation errors, and invalid
    environment variable values.

    Attributes:
        message: Human-readable error message describing the configuration issue.
        field: Optional field name that caused the error (e.g., "hub_path").
        value: Optional value that failed validation (for debugging).

    Examples:
        ```python
        raise ConfigError("Failed to parse config.yaml: invalid YAML syntax")

        raise ConfigError(
            "Invalid configuration value",
            field="verbosity",
            value="loud",
        )
        ```
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize the ConfigError.

        Args:
            message: Human-readable error message.
            field: Optional field name that caused the error.
            value: Optional value that failed validation.
        """
        self.field = field
        self.value = value
        super().__init__(message)
