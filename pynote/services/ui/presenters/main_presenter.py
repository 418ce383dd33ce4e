from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Protocol, runtime_checkable

from pynote.domain.errors import IOFailure
from pynote.domain.interfaces import IFileService
from pynote.domain.models import DocumentSession, window_title
from pynote.services.ui.commands import CommandId
from pynote.services.ui.ports.dialogs import IFileDialogService
from pynote.services.ui.ports.messages import IMessageService
from pynote.utils.constants import (
    FILE_FILTER,
    MSG_ERROR_TITLE,
    MSG_OPEN_FAILED,
    MSG_SAVE_FAILED,
    STATUS_MSEC,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class IMainView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    def get_editor_text(self) -> str: ...
    def set_editor_text(self, text: str) -> None: ...
    def set_title(self, title: str) -> None: ...
    def show_status(self, text: str, msec: int = 3000) -> None: ...
    def request_exit(self) -> None: ...


class MainPresenter:
    """
    Command handlers for the single document session.

    The session holds the text last pushed to or pulled from the view; the view
    owns the live editor buffer between commands.
    """

    def __init__(
        self,
        view: IMainView,
        session: DocumentSession,
        files: IFileService,
        messages: IMessageService,
        dialogs: IFileDialogService,
        *,
        app_name: str,
    ) -> None:
        self.view = view
        self.session = session
        self.files = files
        self.messages = messages
        self.dialogs = dialogs
        self.app_name = app_name

    def command_table(self) -> dict[CommandId, Callable[[], None]]:
        return {
            CommandId.NEW: self.new_document,
            CommandId.OPEN: self.open_document,
            CommandId.SAVE: self.save,
            CommandId.SAVE_AS: self.save_as,
            CommandId.CLEAR: self.clear,
            CommandId.EXIT: self.exit,
        }

    # ---------- Commands ----------

    def new_document(self) -> None:
        self.session.reset()
        self.view.set_editor_text(self.session.editor_text())
        self.refresh_title()
        logger.info("New document")

    def open_document(self) -> None:
        path = self.dialogs.get_open_file(self.view, "Open", self._start_dir(), FILE_FILTER)
        if path is None:
            logger.debug("Open cancelled")
            return
        self.open_path(path)

    def open_path(self, path: Path) -> bool:
        try:
            text = self.files.read_text(path)
        except IOFailure as exc:
            logger.warning("Open failed: %s", exc)
            self.messages.error(self.view, MSG_ERROR_TITLE, MSG_OPEN_FAILED)
            return False
        self.session.load(path, text)
        self.view.set_editor_text(self.session.editor_text())
        self.refresh_title()
        self.view.show_status(f"Opened: {path}", STATUS_MSEC)
        logger.info("Opened %s", path)
        return True

    def save(self) -> bool:
        if self.session.path is None:
            return self.save_as()
        self._pull_text()
        return self._write_to(self.session.path)

    def save_as(self) -> bool:
        start = str(self.session.path) if self.session.path else ""
        path = self.dialogs.get_save_file(self.view, "Save As", start, FILE_FILTER)
        if path is None:
            logger.debug("Save As cancelled")
            return False
        self._pull_text()
        if not self._write_to(path):
            return False
        self.session.bind(path)
        self.refresh_title()
        return True

    def clear(self) -> None:
        self.session.clear()
        self.view.set_editor_text(self.session.editor_text())
        logger.info("Cleared document")

    def exit(self) -> None:
        logger.info("Exit requested")
        self.view.request_exit()

    # ---------- Helpers ----------

    def refresh_title(self) -> None:
        self.view.set_title(window_title(self.app_name, self.session.path))

    def _pull_text(self) -> None:
        self.session.apply_editor_text(self.view.get_editor_text())

    def _start_dir(self) -> str:
        return str(self.session.path.parent) if self.session.path else ""

    def _write_to(self, path: Path) -> bool:
        try:
            self.files.write_text(path, self.session.content)
        except IOFailure as exc:
            logger.warning("Save failed: %s", exc)
            self.messages.error(self.view, MSG_ERROR_TITLE, MSG_SAVE_FAILED)
            return False
        self.view.show_status(f"Saved: {path}", STATUS_MSEC)
        logger.info("Saved %s", path)
        return True
