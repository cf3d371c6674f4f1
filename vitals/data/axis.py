"""Static x-axis of the rolling charts: seconds relative to now."""

TICK_EVERY = 5


def build_labels(capacity: int) -> tuple[int, ...]:
    """``(-(capacity-1), ..., -1, 0)``. Built once; charts never relabel."""
    if capacity < 1:
        raise ValueError(f"capacity must be >= 1, got {capacity}")
    return tuple(range(-(capacity - 1), 1))


def tick_label(value: int) -> str:
    if value == 0:
        return "Now"
    if value < 0 and value % TICK_EVERY == 0:
        return f"{value}s"
    return ""


def axis_ticks(labels: tuple[int, ...]) -> list[tuple[int, str]]:
    """(position, text) pairs for every label, blank where no tick is shown."""
    return [(value, tick_label(value)) for value in labels]
