"""Markup error types."""


class MarkupError(Exception):
    """Base class for errors raised by the markup layer."""


class AttributeMergeError(MarkupError):
    """Raised when two attributes with different names are merged."""

    def __init__(self, name: str, other_name: str):
        self.name = name
        self.other_name = other_name
        super().__init__(f"cannot merge attribute {other_name!r} into {name!r}")


class UnknownMergeModeError(MarkupError):
    """Raised when a merge mode name is not recognised."""

    def __init__(self, mode: str):
        self.mode = mode
        super().__init__(f"unknown merge mode: {mode!r}")
