"""Per-tick update: next sample, rolling push, render notification."""

from typing import Mapping, Optional, Protocol, Sequence

from ..tools import format_percentage, log
from .series import MetricSeries
from .signal import METRIC_ORDER, MetricKind, SignalGenerator


class RendererHandle(Protocol):

    def update(self, samples: Sequence[float]) -> None:
        """Replace the whole visible series and redraw."""


class Readout(Protocol):

    def setText(self, text: str) -> None: ...


class DisplaySlot:
    """Chart and numeric readout a metric is rendered into."""

    def __init__(self, renderer: RendererHandle, readout: Optional[Readout] = None) -> None:
        self.renderer = renderer
        self.readout = readout

    def show(self, samples: Sequence[float], value: float) -> None:
        if self.readout is not None:
            self.readout.setText(format_percentage(value))
        self.renderer.update(samples)


class MetricUpdateCoordinator:
    """Owns the series of all metrics and the only code path mutating them.

    A slot mapped to ``None`` (or missing) still has its series advanced,
    only the render step is skipped. A slot raising during render is logged
    and retried on the next tick like any other.
    """

    def __init__(
        self,
        series: Mapping[MetricKind, MetricSeries],
        generator: SignalGenerator,
        slots: Optional[Mapping[MetricKind, Optional[DisplaySlot]]] = None,
    ) -> None:
        self._series = dict(series)
        self._generator = generator
        self._slots: dict[MetricKind, Optional[DisplaySlot]] = dict(slots or {})
        self._tick_count = 0

    @property
    def series(self) -> Mapping[MetricKind, MetricSeries]:
        return self._series

    @property
    def tick_count(self) -> int:
        return self._tick_count

    def tick(self) -> dict[MetricKind, float]:
        self._tick_count += 1
        values: dict[MetricKind, float] = {}
        for kind in METRIC_ORDER:
            series = self._series.get(kind)
            if series is None:
                continue
            raw = self._generator.next_sample(kind, series.level)
            values[kind] = series.advance(raw)
            slot = self._slots.get(kind)
            if slot is None:
                continue
            try:
                slot.show(series.samples, series.current_value)
            except Exception as exc:
                log(
                    f"[RENDER] {kind.label} failed on tick "
                    f"{self._tick_count}: {exc!r}",
                    color="red",
                )
        return values
