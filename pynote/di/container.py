from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QSettings

from pynote.domain.interfaces import IFileService, ISettingsService
from pynote.domain.models import DocumentSession
from pynote.services.config.app_config import AppConfig
from pynote.services.file_service import FileService
from pynote.services.settings_service import SettingsService
from pynote.services.ui.adapters import QtFileDialogService, QtMessageService
from pynote.services.ui.commands import CommandDispatcher
from pynote.services.ui.main_window import MainWindow
from pynote.services.ui.ports.dialogs import IFileDialogService
from pynote.services.ui.ports.messages import IMessageService
from pynote.services.ui.presenters import MainPresenter
from pynote.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Application context: owns the one document session and wires services,
    UI ports, the presenter and the main window around it.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        files: IFileService | None = None,
        settings: ISettingsService | None = None,
        qsettings: QSettings | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.session = DocumentSession()
        self.file_service: IFileService = files or FileService()
        self.settings_service: ISettingsService = settings or SettingsService(
            qsettings or QSettings()
        )
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

        self.presenter: MainPresenter | None = None
        self.dispatcher: CommandDispatcher | None = None

    @staticmethod
    def default(
        config: AppConfig | None = None,
        qsettings: QSettings | None = None,
        *,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(config=config, qsettings=qsettings)

    # ---------- UI factories ----------

    def build_main_presenter(self, view) -> MainPresenter:
        return MainPresenter(
            view=view,
            session=self.session,
            files=self.file_service,
            messages=self.messages,
            dialogs=self.dialogs,
            app_name=self.config.app_name,
        )

    def build_main_window(self, *, start_path: Path | None = None) -> MainWindow:
        """
        Create the Qt MainWindow, attach presenter + dispatcher, and open
        ``start_path`` if given.
        """
        window = MainWindow(settings=self.settings_service, config=self.config)
        self.presenter = self.build_main_presenter(view=window)
        self.dispatcher = CommandDispatcher(self.presenter.command_table())
        window.attach_dispatcher(self.dispatcher)

        self.presenter.refresh_title()
        if start_path is not None:
            self.presenter.open_path(start_path)
        return window
