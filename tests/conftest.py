from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest

# Headless Qt for CI; must be set before QApplication is created.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtCore import QSettings  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from pynote.services.file_service import FileService  # noqa: E402
from pynote.services.settings_service import SettingsService  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


# --- Fakes for the UI ports ---


class FakeDialogs:
    """Scripted file dialog: returns queued paths, None means 'cancelled'."""

    def __init__(self) -> None:
        self.open_results: list[Path | None] = []
        self.save_results: list[Path | None] = []
        self.open_calls = 0
        self.save_calls: list[str | None] = []

    def get_open_file(self, parent: Any, caption: str, start_dir: str | None, filter_str: str):
        self.open_calls += 1
        return self.open_results.pop(0) if self.open_results else None

    def get_save_file(self, parent: Any, caption: str, start_path: str | None, filter_str: str):
        self.save_calls.append(start_path)
        return self.save_results.pop(0) if self.save_results else None


class FakeMessages:
    def __init__(self) -> None:
        self.errors: list[tuple[str, str]] = []

    def error(self, parent: Any, title: str, text: str) -> None:
        self.errors.append((title, text))


# --- Other common fixtures ---


@pytest.fixture()
def fake_dialogs() -> FakeDialogs:
    return FakeDialogs()


@pytest.fixture()
def fake_messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"


@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s


@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()
