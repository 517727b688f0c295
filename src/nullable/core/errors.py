class NullableError(Exception):
    """Base class for errors raised by the nullable package."""


class EmptyValueAccess(NullableError, LookupError):
    """Forced unwrap (``or_fail``/``get``) of an absent value."""

    def __init__(self, operation: str = "or_fail"):
        self.operation = operation
        super().__init__(f"{operation}() called on an absent value")


class NullabilityViolation(NullableError, TypeError):
    """A function handed to map/flat_map returned the wrong kind of value."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"{operation}: {message}")
