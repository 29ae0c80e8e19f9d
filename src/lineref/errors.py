# lineref/errors.py


class LinerefError(Exception):
    """Base for every error raised by the kernel. `code` is machine-readable."""

    default_code: str = "LINEREF_ERROR"

    def __init__(self, message: str = "", *, code: str = ""):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)


class ContractViolationError(LinerefError, AssertionError):
    """A precondition the caller must guarantee was broken. Never normalized."""

    default_code = "CONTRACT_VIOLATION"


class InvalidArgumentError(LinerefError, ValueError):
    """Absent or unsupported input (missing geometry, too few coordinates, ...)."""

    default_code = "INVALID_ARGUMENT"
