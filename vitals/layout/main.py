from typing import Optional

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication, QMainWindow

from .. import settings, theme
from ..data.scheduler import MissingDisplaySlot, Scheduler
from ..data.signal import METRIC_ORDER, MetricKind, SignalGenerator
from ..tools import log
from .chart import MetricCard
from .ui import UI_MainWindow, card_name


class MainWindow(QMainWindow):

    def __init__(self) -> None:
        super().__init__()

        self.ui = UI_MainWindow()
        self.ui.setup_UI(self)

        seed = settings.get("dashboard/seed")
        self.timer = QTimer(self)
        self.scheduler = Scheduler(
            self.timer,
            SignalGenerator(None if seed < 0 else seed),
            capacity=settings.get("dashboard/capacity"),
            interval_ms=settings.get("dashboard/interval_ms"),
        )
        log("Welcome to VITALS", color="pink")
        self.start_dashboard()

    def display_targets(self) -> dict[MetricKind, Optional[MetricCard]]:
        return {
            kind: self.ui.cards.get(card_name(kind.value))
            for kind in METRIC_ORDER
        }

    def start_dashboard(self) -> bool:
        try:
            self.scheduler.start(self.display_targets())
        except MissingDisplaySlot as exc:
            log(f"[DASH] Dashboard not started: {exc}", color="red")
            self.ui.label_status.setText(f"Not started: {exc}")
            return False
        capacity = settings.get("dashboard/capacity")
        self.ui.label_status.setText(
            f"Running | every {self.scheduler.interval_ms} ms | "
            f"last {capacity} samples"
        )
        return True

    def closeEvent(self, event):
        self.save_settings()
        event.accept()

    def save_settings(self) -> None:
        screen_geometry = QApplication.primaryScreen().availableGeometry()
        settings.set("window/relative_size",
            self.width() / screen_geometry.width(),
        )
        settings.set("app/theme", theme.current_theme())
