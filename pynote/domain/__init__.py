"""Domain layer: interfaces, errors and the document session model."""

from .errors import IOFailure
from .interfaces import IConfigService, IFileService, ISettingsService
from .models import DocumentSession, window_title

__all__ = [
    "IConfigService",
    "IFileService",
    "ISettingsService",
    "IOFailure",
    "DocumentSession",
    "window_title",
]
