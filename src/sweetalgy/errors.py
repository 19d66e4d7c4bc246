"""Error definitions shared by all SweetAlgy helpers."""


class SweetAlgyError(Exception):
    """Base class for SweetAlgy errors."""


class InvalidArgumentError(SweetAlgyError):
    """Raised when a required argument is absent or otherwise unusable."""

    def __init__(self, argument: str, reason: str) -> None:
        super().__init__(f"Invalid argument '{argument}': {reason}")
        self.argument = argument
        self.reason = reason
