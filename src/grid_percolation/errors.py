"""
Exceptions raised by the percolation core.
"""


class PercolationError(Exception):
    """Base class for percolation errors."""


class InvalidSizeError(PercolationError, ValueError):
    """Raised when a grid or forest is constructed with a non-positive size."""

    def __init__(self, size):
        self.size = size
        super().__init__(f"Size must be a positive integer, got {size!r}")


class OutOfRangeError(PercolationError, IndexError):
    """Raised when a site or element index falls outside its valid range."""

    def __init__(self, name: str, value, bound: int):
        self.name = name
        self.value = value
        self.bound = bound
        super().__init__(f"{name} {value!r} out of range [0, {bound})")
