from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (QApplication, QGridLayout, QLabel, QStatusBar,
                             QVBoxLayout, QWidget)

from .. import __version__, settings
from ..data.signal import METRIC_ORDER
from ..tools import LoggingTextEdit, setup_logger
from .chart import MetricCard

TITLE = f"VITALS: live resource utilization [{__version__}]"

# 2x2 grid, row-major in tick order
GRID_COLUMNS = 2


def card_name(key: str) -> str:
    return f"{key}-card"


class UI_MainWindow(QWidget):

    def setup_UI(self, form: QWidget) -> None:
        super().__init__()
        form.setWindowTitle(TITLE)

        screen_geometry = QApplication.primaryScreen().availableGeometry()
        relative_size = settings.get("window/relative_size")
        width = int(screen_geometry.width() * relative_size)
        height = int(screen_geometry.height() * relative_size)
        form.setGeometry(
            (screen_geometry.width() - width) // 2,
            (screen_geometry.height() - height) // 2,
            width,
            height,
        )
        if relative_size == 1.0:
            form.showMaximized()

        self.root = QWidget()
        self.root.setObjectName("DashboardRoot")
        self.root_layout = QVBoxLayout(self.root)
        self.root_layout.setContentsMargins(12, 12, 12, 12)
        self.root_layout.setSpacing(10)
        form.setCentralWidget(self.root)

        self.setup_cards()
        self.setup_logger()
        self.setup_status_bar()
        form.setStatusBar(self.statusbar)

    def setup_cards(self) -> None:
        grid = QGridLayout()
        grid.setSpacing(10)
        animation_ms = settings.get("dashboard/animation_ms")
        y_max = settings.get("dashboard/y_max")
        self.cards: dict[str, MetricCard] = {}
        for i, kind in enumerate(METRIC_ORDER):
            card = MetricCard(
                kind.label,
                self.root,
                animation_ms=animation_ms,
                y_max=y_max,
            )
            grid.addWidget(card, i // GRID_COLUMNS, i % GRID_COLUMNS)
            self.cards[card_name(kind.value)] = card
        self.root_layout.addLayout(grid, stretch=1)

    def setup_logger(self) -> None:
        heading = QLabel("Log")
        heading.setObjectName("MetricTitle")
        logger = LoggingTextEdit()
        logger.setObjectName("LogPane")
        logger.setFixedHeight(110)
        self.root_layout.addWidget(heading)
        self.root_layout.addWidget(logger)
        self.logger = logger
        setup_logger(logger)

    def setup_status_bar(self) -> None:
        self.statusbar = QStatusBar()
        self.label_status = QLabel("Not started")
        self.label_status.setAlignment(Qt.AlignmentFlag.AlignLeft)
        self.statusbar.addWidget(self.label_status, 1)
