"""Exception hierarchy shared by the stores and the roster."""


class CurriculumError(Exception):
    """Base error for curriculum setup."""

    pass


class StorageError(CurriculumError):
    """Raised when a data file cannot be read or written."""

    def __init__(self, message: str, path=None):
        self.path = path
        super().__init__(message)


class MalformedRecordError(StorageError):
    """Raised in strict mode when a stored profile line cannot be decoded."""

    def __init__(self, path, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(
            f"Malformed profile record at line {line_number} of {path}: {reason}",
            path=path,
        )


class ValidationError(CurriculumError):
    """Raised when form input is rejected before any persistence attempt."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class DuplicateNameError(ValidationError):
    """Raised when a language or profile name already exists (case-insensitive)."""

    pass


class ProfileNotFoundError(CurriculumError):
    """Raised when no stored profile matches the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Profile not found: {name}")


class ProfileUpdateError(CurriculumError):
    """Raised when a profile cannot be replaced in storage."""

    pass
