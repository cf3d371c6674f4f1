"""Simulated utilization signals: one bounded random walk per metric."""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MetricKind(Enum):
    CPU = "cpu"
    MEMORY = "memory"
    DISK = "disk"
    GPU = "gpu"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    MetricKind.CPU: "CPU",
    MetricKind.MEMORY: "Memory",
    MetricKind.DISK: "Disk",
    MetricKind.GPU: "GPU",
}

# Tick order. Render notifications follow it too.
METRIC_ORDER = (MetricKind.CPU, MetricKind.MEMORY, MetricKind.DISK, MetricKind.GPU)


@dataclass(frozen=True)
class WalkProfile:
    """Step is ``(u - bias) * scale`` with u uniform in [0, 1)."""
    bias: float
    scale: float
    lower: float
    upper: float
    seed_center: float
    seed_spread: float

    @property
    def bounds(self) -> tuple[float, float]:
        return self.lower, self.upper

    @property
    def step_range(self) -> tuple[float, float]:
        return -self.bias * self.scale, (1.0 - self.bias) * self.scale


PROFILES: dict[MetricKind, WalkProfile] = {
    # volatile
    MetricKind.CPU: WalkProfile(0.5, 15.0, 5.0, 95.0, 50.0, 10.0),
    # mild, slight upward drift
    MetricKind.MEMORY: WalkProfile(0.48, 4.0, 10.0, 90.0, 40.0, 5.0),
    # near-static
    MetricKind.DISK: WalkProfile(0.5, 0.5, 15.0, 85.0, 20.0, 2.5),
    # volatile like CPU
    MetricKind.GPU: WalkProfile(0.5, 12.0, 5.0, 95.0, 30.0, 7.5),
}


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


class SignalGenerator:
    """Random-walk source. Pass ``seed`` for reproducible runs."""

    def __init__(
        self,
        seed: Optional[int] = None,
        profiles: Optional[dict[MetricKind, WalkProfile]] = None,
    ) -> None:
        self._rng = random.Random(seed)
        self._profiles = dict(PROFILES if profiles is None else profiles)

    def profile(self, kind: MetricKind) -> WalkProfile:
        return self._profiles[kind]

    def step(self, kind: MetricKind) -> float:
        p = self._profiles[kind]
        return (self._rng.random() - p.bias) * p.scale

    def seed_value(self, kind: MetricKind) -> float:
        p = self._profiles[kind]
        value = p.seed_center + (self._rng.random() - 0.5) * 2 * p.seed_spread
        return clamp(value, p.lower, p.upper)

    def next_sample(
        self,
        kind: MetricKind,
        previous: float,
        step: Optional[float] = None,
    ) -> float:
        """Unrounded next value of the walk, always within the profile bounds.

        ``step`` overrides the random draw.
        """
        p = self._profiles[kind]
        if step is None:
            step = self.step(kind)
        return clamp(previous + step, p.lower, p.upper)
