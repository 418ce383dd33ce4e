from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for blocking notifications.
    """

    def error(self, parent: Any | None, title: str, text: str) -> None: ...
