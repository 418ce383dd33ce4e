from __future__ import annotations

import logging

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence, QTextOption
from PyQt6.QtWidgets import QApplication, QMainWindow, QPlainTextEdit, QStatusBar

from pynote.domain.interfaces import ISettingsService
from pynote.services.config.app_config import AppConfig
from pynote.services.ui.commands import CommandDispatcher, CommandId

logger = logging.getLogger(__name__)

# (command, label, shortcut, menu); None in the command slot is a separator
ACTION_TABLE: tuple[tuple[CommandId | None, str, QKeySequence.StandardKey | None, str], ...] = (
    (CommandId.NEW, "New", QKeySequence.StandardKey.New, "&File"),
    (CommandId.OPEN, "Open…", QKeySequence.StandardKey.Open, "&File"),
    (CommandId.SAVE, "Save", QKeySequence.StandardKey.Save, "&File"),
    (CommandId.SAVE_AS, "Save As…", QKeySequence.StandardKey.SaveAs, "&File"),
    (None, "", None, "&File"),
    (CommandId.EXIT, "Exit", QKeySequence.StandardKey.Quit, "&File"),
    (CommandId.CLEAR, "Clear All", None, "&Edit"),
)


class MainWindow(QMainWindow):
    """Thin PyQt window; menu actions go through the command dispatcher."""

    def __init__(
        self,
        settings: ISettingsService,
        config: AppConfig | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings
        self.config = config or AppConfig()
        self.setWindowTitle(self.config.app_name)
        self.resize(self.config.window_width, self.config.window_height)

        self._dispatcher: CommandDispatcher | None = None

        # Widgets
        self.editor = QPlainTextEdit(self)
        self._set_wrap(self.config.word_wrap)
        self.setCentralWidget(self.editor)

        # UI
        self.actions_by_id: dict[CommandId, QAction] = {}
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        # Restore UI state
        geo = self.settings.get_geometry()
        restored = isinstance(geo, (bytes, bytearray)) and self.restoreGeometry(QByteArray(geo))
        if not restored:
            self._center_on_screen()

    # ---------- UI creation ----------
    def _build_menu(self) -> None:
        m = self.menuBar()
        menus = {}
        for command, label, shortcut, menu_name in ACTION_TABLE:
            menu = menus.get(menu_name)
            if menu is None:
                menu = menus[menu_name] = m.addMenu(menu_name)
            if command is None:
                menu.addSeparator()
                continue
            act = QAction(
                label,
                self,
                triggered=lambda chk=False, c=command: self._on_command(c),
            )
            if shortcut is not None:
                act.setShortcut(QKeySequence(shortcut))
            menu.addAction(act)
            self.actions_by_id[command] = act

    def _set_wrap(self, on: bool) -> None:
        if on:
            self.editor.setLineWrapMode(QPlainTextEdit.LineWrapMode.WidgetWidth)
            self.editor.setWordWrapMode(QTextOption.WrapMode.WordWrap)
        else:
            self.editor.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)

    def _center_on_screen(self) -> None:
        screen = self.screen() or QApplication.primaryScreen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    # ---------- Commands ----------
    def attach_dispatcher(self, dispatcher: CommandDispatcher) -> None:
        self._dispatcher = dispatcher

    def _on_command(self, command: CommandId) -> None:
        if self._dispatcher is None:
            logger.warning("Command %s triggered before a dispatcher was attached", command.value)
            return
        self._dispatcher.dispatch(command)

    # ---------- IMainView ----------
    def get_editor_text(self) -> str:
        # toPlainText() would also rewrite U+00A0 and U+2028; only map block breaks.
        return self.editor.document().toRawText().replace("\u2029", "\n")

    def set_editor_text(self, text: str) -> None:
        self.editor.setPlainText(text)

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def show_status(self, text: str, msec: int = 3000) -> None:
        self.statusBar().showMessage(text, msec)

    def request_exit(self) -> None:
        self.close()
        app = QApplication.instance()
        if app is not None:
            app.quit()

    # ---------- Close ----------
    def closeEvent(self, event: QCloseEvent) -> None:
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)
