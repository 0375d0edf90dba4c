class DigitListError(Exception):
    """Base class for errors raised by the digit list package."""


class InvalidDigitError(DigitListError, ValueError):
    """A digit is missing, not an integer, or outside ``[0, base)``."""

    def __init__(self, value, base: int):
        if value is None:
            message = "Null digits are not allowed"
        else:
            message = f"Digit out of range for base {base}: {value!r}"
        super().__init__(message)
        self.value = value
        self.base = base


class ConcurrentModificationError(DigitListError, RuntimeError):
    """The list changed behind an iterator's back."""


class IllegalIteratorStateError(DigitListError, RuntimeError):
    """remove() or set() was called before next() or previous()."""
