from __future__ import annotations
from typing import Optional


class EmptyValueAccess(Exception):
    """Raised when a payload is extracted from an Absent option.

    ``unwrap`` raises it bare; ``expect`` attaches the caller's message.
    """

    def __init__(self, message: Optional[str] = None):
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.message = message
