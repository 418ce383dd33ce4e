"""App constants."""

from .constants import (
    APP_NAME,
    APP_ORG,
    FILE_FILTER,
    MSG_OPEN_FAILED,
    MSG_SAVE_FAILED,
    SETTINGS_GEOMETRY,
    TEXT_ENCODING,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "FILE_FILTER",
    "MSG_OPEN_FAILED",
    "MSG_SAVE_FAILED",
    "SETTINGS_GEOMETRY",
    "TEXT_ENCODING",
]
