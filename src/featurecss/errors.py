"""Error types raised while building feature selectors."""


class FeatureSelectorError(Exception):
    """Base class for selector-building failures."""

    def __init__(self, message: str, operation: str | None = None):
        self.operation = operation
        super().__init__(message)


class UsageError(FeatureSelectorError):
    """Raised when an operation is invoked without a selector context."""

    def __init__(self, operation: str):
        super().__init__(f"{operation} must be called within a selector", operation)


class FeatureTypeError(FeatureSelectorError, TypeError):
    """Raised when a feature argument is not a text token."""

    def __init__(self, value: object, operation: str, message: str | None = None):
        self.value = value
        if message is None:
            message = (
                f"{operation}: feature {value!r} is not a string "
                f"(got {type(value).__name__})"
            )
        super().__init__(message, operation)


class InvalidFeatureError(FeatureSelectorError, ValueError):
    """Raised when a feature string cannot form a single class name."""

    def __init__(self, value: str, operation: str):
        self.value = value
        super().__init__(
            f"{operation}: feature {value!r} is not a valid class name", operation
        )
