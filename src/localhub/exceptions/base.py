from __future__ import annotations


class LocalHubError(Exception):
    """Base exception class for all localhub-specific errors.

    This is the root of the localhub exception hierarchy. Catching it at the
    CLI boundary covers every error the tool reports on purpose while letting
    system exceptions propagate naturally.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            hub.create("proj")
        except LocalHubError as e:
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(1)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the LocalHubError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
