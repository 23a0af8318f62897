"""Calculator error types."""


class InvalidArgumentError(ValueError):
    """Raised when a calculator is called with an argument outside its domain."""
