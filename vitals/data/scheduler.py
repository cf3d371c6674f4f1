"""One-time dashboard setup and the fixed-interval tick loop.

The timer is anything with ``timeout.connect(callback)`` and ``start(msec)``,
i.e. a ``QTimer`` in the app. Ticks run on the event loop and never overlap.
"""

from enum import Enum
from typing import Callable, Mapping, Optional, Protocol, Sequence

from .. import theme
from ..tools import format_percentage, log
from .axis import build_labels
from .coordinator import DisplaySlot, MetricUpdateCoordinator, Readout, RendererHandle
from .series import MAX_DATA_POINTS, MetricSeries
from .signal import METRIC_ORDER, MetricKind, SignalGenerator

DEFAULT_INTERVAL_MS = 1000


class MissingDisplaySlot(LookupError):

    def __init__(self, missing: Sequence[MetricKind]) -> None:
        self.missing = tuple(missing)
        names = ", ".join(kind.label for kind in self.missing)
        super().__init__(f"No display slot for: {names}")


class DisplayTarget(Protocol):

    readout: Optional[Readout]

    def create_renderer(
        self,
        label: str,
        color: str,
        initial_samples: Sequence[float],
        axis_labels: Sequence[int],
    ) -> RendererHandle: ...


class _Signal(Protocol):

    def connect(self, slot: Callable[[], object]) -> object: ...


class RepeatingTimer(Protocol):

    timeout: _Signal

    def start(self, msec: int) -> None: ...


class SchedulerState(Enum):
    NOT_STARTED = "not started"
    RUNNING = "running"


class Scheduler:

    def __init__(
        self,
        timer: RepeatingTimer,
        generator: Optional[SignalGenerator] = None,
        capacity: int = MAX_DATA_POINTS,
        interval_ms: int = DEFAULT_INTERVAL_MS,
    ) -> None:
        if interval_ms < 1:
            raise ValueError(f"interval_ms must be >= 1, got {interval_ms}")
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._timer = timer
        self._generator = generator if generator is not None else SignalGenerator()
        self._capacity = capacity
        self._interval_ms = interval_ms
        self._state = SchedulerState.NOT_STARTED
        self._axis_labels: Optional[tuple[int, ...]] = None
        self._coordinator: Optional[MetricUpdateCoordinator] = None

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def axis_labels(self) -> Optional[tuple[int, ...]]:
        return self._axis_labels

    @property
    def coordinator(self) -> Optional[MetricUpdateCoordinator]:
        return self._coordinator

    def setup(
        self,
        targets: Mapping[MetricKind, Optional[DisplayTarget]],
    ) -> MetricUpdateCoordinator:
        """Seed all series and create one renderer per metric.

        All four targets are required; nothing is created if one is missing.
        """
        if self._coordinator is not None:
            return self._coordinator
        present: dict[MetricKind, DisplayTarget] = {}
        missing = []
        for kind in METRIC_ORDER:
            target = targets.get(kind)
            if target is None:
                missing.append(kind)
            else:
                present[kind] = target
        if missing:
            raise MissingDisplaySlot(missing)

        self._axis_labels = build_labels(self._capacity)
        series: dict[MetricKind, MetricSeries] = {}
        slots: dict[MetricKind, Optional[DisplaySlot]] = {}
        for kind in METRIC_ORDER:
            profile = self._generator.profile(kind)
            series[kind] = MetricSeries(
                self._generator.seed_value(kind),
                profile.bounds,
                self._capacity,
            )
            target = present[kind]
            renderer = target.create_renderer(
                kind.label,
                theme.get_metric_color(kind.value),
                series[kind].samples,
                self._axis_labels,
            )
            slots[kind] = DisplaySlot(renderer, target.readout)
            if target.readout is not None:
                target.readout.setText(
                    format_percentage(series[kind].current_value)
                )
            log(
                f"[SETUP] {kind.label}: seed {series[kind].current_value:.2f}, "
                f"bounds {profile.lower:g}..{profile.upper:g}"
            )
        self._coordinator = MetricUpdateCoordinator(series, self._generator, slots)
        return self._coordinator

    def start(self, targets: Mapping[MetricKind, Optional[DisplayTarget]]) -> None:
        if self._state is SchedulerState.RUNNING:
            return
        coordinator = self.setup(targets)
        self._timer.timeout.connect(coordinator.tick)
        self._timer.start(self._interval_ms)
        self._state = SchedulerState.RUNNING
        log(
            f"[DASH] Running: {len(METRIC_ORDER)} metrics, "
            f"{self._capacity} points @ {self._interval_ms} ms"
        )
