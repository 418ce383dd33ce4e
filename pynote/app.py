from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from pynote.di.container import Container
from pynote.services.config.app_config import build_app_config
from pynote.utils.constants import APP_ORG

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(level: int | str = logging.WARNING) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps Qt, composes the application via the DI container,
    and launches the main window.
    """
    config = build_app_config()
    configure_logging(config.log_level)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(config.app_name)
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path)
    win.show()
    logger.debug("Main window shown")

    return app.exec()
