import sys

import pyqtgraph as pg
import qdarkstyle
from PyQt6.QtWidgets import QApplication
from qdarkstyle.dark.palette import DarkPalette
from qdarkstyle.light.palette import LightPalette

from . import settings, theme
from .layout.main import MainWindow


def run() -> int:
    pg.setConfigOptions(antialias=True)
    theme.set_theme(settings.get("app/theme"))
    palette = LightPalette if theme.current_theme() == "light" else DarkPalette
    app = QApplication(sys.argv)
    app.setStyleSheet(
        qdarkstyle.load_stylesheet(qt_api="pyqt6", palette=palette)
        + theme.get_stylesheet()
    )
    main_window = MainWindow()
    main_window.show()
    return app.exec()
