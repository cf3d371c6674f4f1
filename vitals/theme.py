"""
Dark dashboard colors for VITALS, with a light variant.
Metric line colors are the same in both themes.
"""
_current_theme = "dark"


def set_theme(theme: str) -> None:
    global _current_theme
    _current_theme = "light" if theme == "light" else "dark"


def current_theme() -> str:
    return _current_theme


def get_stylesheet() -> str:
    return STYLESHEET_LIGHT if _current_theme == "light" else STYLESHEET_DARK


def get_plot_bg() -> tuple[int, int, int]:
    return PLOT_BG_LIGHT if _current_theme == "light" else PLOT_BG


def get_axis_color() -> str:
    return AXIS_COLOR_LIGHT if _current_theme == "light" else AXIS_COLOR


def get_grid_alpha() -> float:
    """Opacity of the horizontal grid lines (pyqtgraph takes 0..1)."""
    return 0.35 if _current_theme == "light" else 0.2


def get_metric_color(key: str) -> str:
    """Line color for 'cpu', 'memory', 'disk' or 'gpu'."""
    return METRIC_COLORS[key]


def with_alpha(color: str, alpha: int) -> tuple[int, int, int, int]:
    """'#rrggbb' plus alpha 0..255 as an rgba tuple for pyqtgraph."""
    color = color.lstrip("#")
    r, g, b = (int(color[i:i+2], 16) for i in (0, 2, 4))
    return r, g, b, max(0, min(255, alpha))


METRIC_COLORS = {
    "cpu": "#00aaff",     # blue
    "memory": "#00ffaa",  # green
    "disk": "#ffaa00",    # orange
    "gpu": "#ff40ff",     # magenta
}

# Plot backgrounds (for pyqtgraph, use rgb tuples)
PLOT_BG = (26, 26, 30)
PLOT_BG_LIGHT = (236, 236, 240)

AXIS_COLOR = "#888888"
AXIS_COLOR_LIGHT = "#555555"

COLOR_FG = "#e0e0e0"
COLOR_FG_DIM = "#888888"
COLOR_CARD = "#222228"
COLOR_BORDER = "#333333"
COLOR_BG = "#121214"

STYLESHEET_DARK = f"""
QMainWindow, QWidget#DashboardRoot {{
    background-color: {COLOR_BG};
}}
QFrame#MetricCard {{
    background-color: {COLOR_CARD};
    border: 1px solid {COLOR_BORDER};
    border-radius: 8px;
}}
QLabel#MetricTitle {{
    background-color: transparent;
    color: {COLOR_FG_DIM};
    font-size: 11pt;
    font-weight: bold;
}}
QLabel#MetricValue {{
    background-color: transparent;
    color: {COLOR_FG};
    font-size: 20pt;
    font-weight: bold;
}}
QTextEdit#LogPane {{
    background-color: {COLOR_CARD};
    border: 1px solid {COLOR_BORDER};
}}
"""

STYLESHEET_LIGHT = """
QMainWindow, QWidget#DashboardRoot {
    background-color: #f4f4f7;
}
QFrame#MetricCard {
    background-color: white;
    border: 1px solid #c8cad3;
    border-radius: 8px;
}
QLabel#MetricTitle {
    background-color: transparent;
    color: #565f89;
    font-size: 11pt;
    font-weight: bold;
}
QLabel#MetricValue {
    background-color: transparent;
    color: #1a1b26;
    font-size: 20pt;
    font-weight: bold;
}
QTextEdit#LogPane {
    background-color: white;
    border: 1px solid #c8cad3;
    color: #1a1b26;
}
"""
