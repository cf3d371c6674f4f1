from __future__ import annotations

import pytest

from vitals import tools


class FakeReadout:

    def __init__(self) -> None:
        self.texts: list[str] = []

    def setText(self, text: str) -> None:
        self.texts.append(text)


class FakeRenderer:
    """Records every series it is handed; raises on the listed call numbers."""

    def __init__(self, fail_on: tuple[int, ...] = ()) -> None:
        self.updates: list[tuple[float, ...]] = []
        self.calls = 0
        self.fail_on = set(fail_on)

    def update(self, samples) -> None:
        self.calls += 1
        if self.calls in self.fail_on:
            raise RuntimeError("canvas gone")
        self.updates.append(tuple(samples))


class FakeTarget:

    def __init__(self, renderer: FakeRenderer | None = None) -> None:
        self.readout = FakeReadout()
        self.renderer = renderer if renderer is not None else FakeRenderer()
        self.created: list[tuple] = []

    def create_renderer(self, label, color, initial_samples, axis_labels):
        self.created.append((label, color, tuple(initial_samples), tuple(axis_labels)))
        return self.renderer


class FakeSignal:

    def __init__(self) -> None:
        self.slots: list = []

    def connect(self, slot) -> None:
        self.slots.append(slot)

    def emit(self) -> None:
        for slot in self.slots:
            slot()


class FakeTimer:

    def __init__(self) -> None:
        self.timeout = FakeSignal()
        self.started: list[int] = []

    def start(self, msec: int) -> None:
        self.started.append(msec)

    def fire(self, n: int = 1) -> None:
        for _ in range(n):
            self.timeout.emit()


class RecordingLogger:

    def __init__(self) -> None:
        self.lines: list[tuple[str, object]] = []

    def log(self, message, color="white") -> None:
        self.lines.append((message, color))


@pytest.fixture
def log_lines():
    logger = RecordingLogger()
    tools.setup_logger(logger)
    yield logger.lines
    tools.setup_logger(None)
