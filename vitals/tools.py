from typing import Any

from PyQt6.QtGui import QColor, QTextCharFormat
from PyQt6.QtWidgets import QTextEdit

from . import settings

LOGGER: Any = None


def log(message: str, color: str | tuple[int, int, int] = "white") -> None:
    if LOGGER is None:
        print(message)
    else:
        LOGGER.log(message, color=color)


def setup_logger(logger: Any) -> None:
    global LOGGER
    LOGGER = logger


class LoggingTextEdit(QTextEdit):

    MAX_BLOCKS = 500

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setReadOnly(True)
        # one line per block, oldest lines dropped past MAX_BLOCKS
        self.document().setMaximumBlockCount(self.MAX_BLOCKS)

    def log(
        self,
        message: Any,
        color: str | tuple[int, int, int] = "white",
    ) -> None:
        cursor = self.textCursor()
        cursor.movePosition(cursor.MoveOperation.End)
        format = QTextCharFormat()
        if isinstance(color, tuple):
            format.setForeground(QColor(*color))
        else:
            format.setForeground(QColor(color))
        format.setFontPointSize(settings.get("viewer/font_size_log"))
        cursor.mergeCharFormat(format)
        if message != "\n":
            cursor.insertText(f"> {message}\n")
        self.setTextCursor(cursor)
        self.ensureCursorVisible()


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"
