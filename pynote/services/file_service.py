from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from pynote.domain.errors import IOFailure
from pynote.domain.interfaces import IFileService
from pynote.utils.constants import TEXT_ENCODING

logger = logging.getLogger(__name__)


class FileService(IFileService):
    """Whole-file UTF-8 reads and atomic writes."""

    def read_text(self, path: Path) -> str:
        # newline="" keeps \r\n intact so a read/write cycle is byte-for-byte
        try:
            with path.open("r", encoding=TEXT_ENCODING, newline="") as fh:
                return fh.read()
        except (OSError, UnicodeError) as exc:
            raise IOFailure(path, "read", str(exc)) from exc

    def write_text(self, path: Path, text: str) -> None:
        try:
            data = text.encode(TEXT_ENCODING)
        except UnicodeError as exc:
            raise IOFailure(path, "write", str(exc)) from exc

        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise IOFailure(path, "write", sf.errorString())
        committed = False
        try:
            if sf.write(data) != len(data):
                raise IOFailure(path, "write", sf.errorString())
            if not sf.commit():
                raise IOFailure(path, "write", "commit failed")
            committed = True
        finally:
            if not committed:
                sf.cancelWriting()
        logger.debug("Wrote %d bytes to %s", len(data), path)
