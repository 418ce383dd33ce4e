from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum

logger = logging.getLogger(__name__)


class CommandId(Enum):
    """User-facing commands exposed by the menu."""

    NEW = "new"
    OPEN = "open"
    SAVE = "save"
    SAVE_AS = "save_as"
    CLEAR = "clear"
    EXIT = "exit"


class CommandDispatcher:
    """
    Maps command ids to handlers and runs them synchronously, one at a time.
    The Qt event loop delivers menu triggers sequentially, so no locking is needed.
    """

    def __init__(self, handlers: Mapping[CommandId, Callable[[], None]]) -> None:
        self._handlers: dict[CommandId, Callable[[], None]] = dict(handlers)

    def ids(self) -> list[CommandId]:
        return list(self._handlers)

    def dispatch(self, command: CommandId) -> None:
        try:
            handler = self._handlers[command]
        except KeyError:
            raise KeyError(f"No handler registered for {command!r}") from None
        logger.debug("Dispatching %s", command.value)
        handler()
