"""Rolling window buffer for one metric. Pure logic, stdlib only, for easy unit testing."""
from collections import deque

# 30 points at 1000 ms = last 30 s on screen.
MAX_DATA_POINTS = 30


class MetricSeries:
    """Fixed-capacity sample window: index 0 oldest, index -1 the present.

    The window is pre-filled with ``capacity`` copies of the seed, so its
    length never changes afterwards. ``push`` is the only mutation.
    """

    def __init__(
        self,
        seed: float,
        bounds: tuple[float, float],
        capacity: int = MAX_DATA_POINTS,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        lower, upper = bounds
        if lower > upper:
            raise ValueError(f"invalid bounds {bounds!r}")
        self._capacity = capacity
        self._bounds = (float(lower), float(upper))
        self._samples: deque[float] = deque(
            [float(seed)] * capacity, maxlen=capacity,
        )
        self._level = float(seed)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def bounds(self) -> tuple[float, float]:
        return self._bounds

    @property
    def samples(self) -> tuple[float, ...]:
        return tuple(self._samples)

    @property
    def current_value(self) -> float:
        return self._samples[-1]

    @property
    def level(self) -> float:
        """Unrounded running value the next random-walk step starts from."""
        return self._level

    def push(self, value: float) -> None:
        # maxlen drops index 0 on append
        self._samples.append(float(value))

    def advance(self, raw: float) -> float:
        """Keep ``raw`` as the walk state and push it rounded to 2 decimals."""
        self._level = float(raw)
        reported = round(self._level, 2)
        self.push(reported)
        return reported

    def __len__(self) -> int:
        return len(self._samples)

    def __repr__(self) -> str:
        return (
            f"MetricSeries(capacity={self._capacity}, bounds={self._bounds}, "
            f"current_value={self.current_value})"
        )
