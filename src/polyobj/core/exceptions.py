"""
Custom exception classes for polyobj.

The two demonstration failure kinds are deliberately unrelated beyond sharing
the package base class, so each is only ever caught by its own handler.
"""


class PolyobjException(Exception):
    """Base exception class for all polyobj exceptions."""

    pass


class _FixedMessageException(PolyobjException):
    """A stateless failure whose message never varies."""

    message: str = ""

    def __init__(self) -> None:
        super().__init__(self.message)


class CustomException1(_FixedMessageException):
    """First demonstration failure kind."""

    message = "Custom Exception 1"


class CustomException2(_FixedMessageException):
    """Second demonstration failure kind."""

    message = "Custom Exception 2"


class RegistryReleasedError(PolyobjException):
    """Raised when an ObjectRegistry is used after release()."""

    pass
