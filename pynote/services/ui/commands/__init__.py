from __future__ import annotations

from .dispatcher import CommandDispatcher, CommandId

__all__ = [
    "CommandDispatcher",
    "CommandId",
]
