"""Exceptions raised by avatarme.

All pipeline stages up to drawing are total over a hashed record, so the
only failure a caller has to handle is :class:`OutputWriteFailure`.
"""


class AvatarError(Exception):
    """Base class for avatarme errors."""


class OutputWriteFailure(AvatarError):
    """The rendered image could not be written.

    Attributes:
        path: Destination that could not be created or written.
        reason: Underlying exception (also chained as ``__cause__``).
    """

    def __init__(self, path: str, reason: BaseException) -> None:
        super().__init__(f"cannot write identicon to {path}: {reason}")
        self.path = path
        self.reason = reason
