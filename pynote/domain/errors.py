from __future__ import annotations

from pathlib import Path


class IOFailure(OSError):
    """Any filesystem failure while reading or writing a document.

    Not-found, permission, decoding and disk-full errors are not distinguished;
    the original exception is kept as ``__cause__``.
    """

    def __init__(self, path: Path, operation: str, reason: str = "") -> None:
        self.path = path
        self.operation = operation
        self.reason = reason
        msg = f"Cannot {operation} {path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
