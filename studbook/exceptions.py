"""Service-level errors."""


class StudbookError(Exception):
    """Base class for studbook errors."""


class NotFoundError(StudbookError):
    """A referenced entity does not exist."""


class FatalError(StudbookError):
    """Stored data is inconsistent; not recoverable by the caller."""


class ValidationFailedError(StudbookError):
    """Input was rejected; carries every violation found."""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.message = message
        self.errors = list(errors or [])
        super().__init__(message)

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        return f"{self.message}. Failed validations: {', '.join(self.errors)}."
