"""Rolling line chart per metric (pyqtgraph) and the card holding it."""
from typing import Optional, Sequence

import numpy as np
import pyqtgraph as pg
from PyQt6.QtCore import QEasingCurve, Qt, QVariantAnimation
from PyQt6.QtGui import QBrush, QColor, QGradient, QLinearGradient
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QSizePolicy, QVBoxLayout, QWidget

from ..data.axis import axis_ticks
from ..theme import get_axis_color, get_grid_alpha, get_plot_bg, with_alpha


def _gradient_brush(color: str) -> QBrush:
    """Vertical fade under the curve: 50% opacity at the line, clear at the baseline.

    The ViewBox flips y, so in object coordinates stop 0.0 is the baseline.
    """
    gradient = QLinearGradient(0, 0, 0, 1)
    gradient.setCoordinateMode(QGradient.CoordinateMode.ObjectMode)
    gradient.setColorAt(0.0, QColor(*with_alpha(color, 0x00)))
    gradient.setColorAt(1.0, QColor(*with_alpha(color, 0x80)))
    return QBrush(gradient)


def _chart_plot(
    parent: QWidget,
    axis_labels: Sequence[int],
    y_max: float,
) -> pg.PlotWidget:
    pw = pg.PlotWidget(background=get_plot_bg(), parent=parent)
    pw.setMouseEnabled(False, False)
    pw.setMenuEnabled(False)
    pw.hideButtons()
    pw.setXRange(axis_labels[0], axis_labels[-1], padding=0.02)
    pw.setYRange(0, y_max, padding=0)
    pw.showGrid(x=False, y=True, alpha=get_grid_alpha())
    axis_color = get_axis_color()
    for name in ("left", "bottom"):
        axis = pw.getAxis(name)
        axis.setTextPen(axis_color)
        axis.setPen(axis_color)
    pw.getAxis("bottom").setTicks([axis_ticks(tuple(axis_labels))])
    return pw


class ChartRenderer:
    """Renderer handle for one metric.

    The x positions are the static axis labels; ``update`` only swaps the
    y values and tweens from the previous series to the new one.
    """

    def __init__(
        self,
        parent: QWidget,
        color: str,
        initial_samples: Sequence[float],
        axis_labels: Sequence[int],
        animation_ms: int = 200,
        y_max: float = 100.0,
    ) -> None:
        self._x = np.asarray(axis_labels, dtype=np.float64)
        self._shown = np.asarray(initial_samples, dtype=np.float64)
        if self._shown.shape != self._x.shape:
            raise ValueError(
                f"{len(initial_samples)} samples for {len(axis_labels)} axis labels"
            )
        self._start = self._shown.copy()
        self._target = self._shown.copy()
        self.widget = _chart_plot(parent, axis_labels, y_max)
        self.curve = self.widget.plot(
            self._x,
            self._shown,
            pen=pg.mkPen(color, width=2),
            fillLevel=0,
            brush=_gradient_brush(color),
        )
        self._animation = QVariantAnimation(self.widget)
        self._animation.setStartValue(0.0)
        self._animation.setEndValue(1.0)
        self._animation.setDuration(max(0, animation_ms))
        self._animation.setEasingCurve(QEasingCurve.Type.Linear)
        self._animation.valueChanged.connect(self._on_frame)

    def update(self, samples: Sequence[float]) -> None:
        target = np.asarray(samples, dtype=np.float64)
        if target.shape != self._x.shape:
            raise ValueError(
                f"expected {self._x.size} samples, got {target.size}"
            )
        self._animation.stop()
        self._start = self._shown.copy()
        self._target = target
        if self._animation.duration() == 0:
            self._draw(target)
            return
        self._animation.start()

    def _on_frame(self, value) -> None:
        t = float(value)
        self._draw(self._start + (self._target - self._start) * t)

    def _draw(self, y: np.ndarray) -> None:
        self._shown = y
        self.curve.setData(self._x, y)


class MetricCard(QFrame):
    """Title, big percentage readout and chart for one metric."""

    def __init__(
        self,
        title: str,
        parent: Optional[QWidget] = None,
        animation_ms: int = 200,
        y_max: float = 100.0,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("MetricCard")
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self._animation_ms = animation_ms
        self._y_max = y_max
        self.renderer: Optional[ChartRenderer] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        layout.setSpacing(6)

        header = QHBoxLayout()
        self.label_title = QLabel(title)
        self.label_title.setObjectName("MetricTitle")
        self.readout = QLabel("—")
        self.readout.setObjectName("MetricValue")
        self.readout.setAlignment(
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
        )
        header.addWidget(self.label_title)
        header.addStretch(1)
        header.addWidget(self.readout)
        layout.addLayout(header)
        self._layout = layout

    def create_renderer(
        self,
        label: str,
        color: str,
        initial_samples: Sequence[float],
        axis_labels: Sequence[int],
    ) -> ChartRenderer:
        if self.renderer is not None:
            return self.renderer
        self.label_title.setText(label)
        self.label_title.setStyleSheet(f"color: {color};")
        self.renderer = ChartRenderer(
            self,
            color,
            initial_samples,
            axis_labels,
            animation_ms=self._animation_ms,
            y_max=self._y_max,
        )
        self._layout.addWidget(self.renderer.widget, stretch=1)
        return self.renderer
