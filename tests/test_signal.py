"""Tests for the simulated random-walk signals."""
from __future__ import annotations

import pytest

from vitals.data.signal import (METRIC_ORDER, PROFILES, MetricKind,
                                SignalGenerator, clamp)


class TestProfiles:

    def test_order(self) -> None:
        assert METRIC_ORDER == (
            MetricKind.CPU, MetricKind.MEMORY, MetricKind.DISK, MetricKind.GPU,
        )

    @pytest.mark.parametrize("kind, bounds, step_range", [
        (MetricKind.CPU, (5, 95), (-7.5, 7.5)),
        (MetricKind.MEMORY, (10, 90), (-1.92, 2.08)),
        (MetricKind.DISK, (15, 85), (-0.25, 0.25)),
        (MetricKind.GPU, (5, 95), (-6.0, 6.0)),
    ])
    def test_table(self, kind, bounds, step_range) -> None:
        profile = PROFILES[kind]
        assert profile.bounds == bounds
        lo, hi = profile.step_range
        assert lo == pytest.approx(step_range[0])
        assert hi == pytest.approx(step_range[1])

    def test_labels(self) -> None:
        assert [k.label for k in METRIC_ORDER] == ["CPU", "Memory", "Disk", "GPU"]


class TestSignalGenerator:

    def test_clamp(self) -> None:
        assert clamp(-3.0, 5.0, 95.0) == 5.0
        assert clamp(120.0, 5.0, 95.0) == 95.0
        assert clamp(50.0, 5.0, 95.0) == 50.0

    def test_forced_step_clamps_to_upper(self) -> None:
        gen = SignalGenerator(seed=1)
        assert gen.next_sample(MetricKind.CPU, 50.0, step=1000.0) == 95.0

    def test_forced_step_clamps_to_lower(self) -> None:
        gen = SignalGenerator(seed=1)
        assert gen.next_sample(MetricKind.DISK, 20.0, step=-1000.0) == 15.0

    def test_forced_step_inside_bounds(self) -> None:
        gen = SignalGenerator(seed=1)
        assert gen.next_sample(MetricKind.GPU, 30.0, step=2.5) == 32.5

    @pytest.mark.parametrize("kind", list(MetricKind))
    def test_steps_within_range(self, kind: MetricKind) -> None:
        gen = SignalGenerator(seed=3)
        lo, hi = PROFILES[kind].step_range
        for _ in range(2000):
            step = gen.step(kind)
            assert lo - 1e-9 <= step <= hi + 1e-9

    @pytest.mark.parametrize("kind", list(MetricKind))
    def test_walk_never_escapes_bounds(self, kind: MetricKind) -> None:
        gen = SignalGenerator(seed=11)
        lower, upper = PROFILES[kind].bounds
        value = gen.seed_value(kind)
        for _ in range(10_000):
            value = gen.next_sample(kind, value)
            assert lower <= value <= upper

    @pytest.mark.parametrize("kind, center, spread", [
        (MetricKind.CPU, 50.0, 10.0),
        (MetricKind.MEMORY, 40.0, 5.0),
        (MetricKind.DISK, 20.0, 2.5),
        (MetricKind.GPU, 30.0, 7.5),
    ])
    def test_seed_values(self, kind, center, spread) -> None:
        gen = SignalGenerator(seed=5)
        lower, upper = PROFILES[kind].bounds
        for _ in range(500):
            seed = gen.seed_value(kind)
            assert center - spread <= seed <= center + spread
            assert lower <= seed <= upper

    def test_seeded_generators_are_reproducible(self) -> None:
        a, b = SignalGenerator(seed=7), SignalGenerator(seed=7)
        va, vb = 50.0, 50.0
        for _ in range(50):
            va = a.next_sample(MetricKind.CPU, va)
            vb = b.next_sample(MetricKind.CPU, vb)
            assert va == vb

    def test_memory_drifts_upward(self) -> None:
        gen = SignalGenerator(seed=0)
        steps = [gen.step(MetricKind.MEMORY) for _ in range(20_000)]
        assert sum(steps) / len(steps) == pytest.approx(0.08, abs=0.03)
