from pathlib import Path
from typing import Any, Optional

from PyQt6.QtCore import QSettings

SETTINGS: "_Settings" = None  # type: ignore


_default_settings = {
    "window/relative_size": 0.6,

    "viewer/font_size_log": 9,

    "dashboard/capacity": 30,
    "dashboard/interval_ms": 1000,
    "dashboard/animation_ms": 200,
    "dashboard/seed": -1,
    "dashboard/y_max": 100.0,

    "app/theme": "dark",
}


class _Settings:

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path.cwd() if path is None else path
        self._file = "_cache.vitals"
        self.select_ini()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def file(self) -> str:
        return self._file

    def select_ini(self) -> None:
        self.settings = QSettings(
            str(self.path / self._file),
            QSettings.Format.IniFormat,
        )

    def __getitem__(self, setting: str) -> Any:
        self.settings.sync()
        return self.settings.value(
            setting,
            _default_settings[setting],
            type(_default_settings[setting]),
        )

    def __setitem__(self, setting: str, value: Any) -> None:
        type_ = type(_default_settings[setting])
        if type(value) != type_:
            try:
                value = type_(value)
            except (TypeError, ValueError) as exc:
                raise ValueError(
                    f"Setting '{setting}' of type {type_} was given as "
                    f"incorrect type {type(value)}"
                ) from exc
        self.settings.setValue(setting, value)
        self.settings.sync()


def get(setting: str) -> Any:
    global SETTINGS

    if SETTINGS is None:
        SETTINGS = _Settings()

    return SETTINGS[setting]


def set(setting: str, value: Any) -> None:
    global SETTINGS

    if SETTINGS is None:
        SETTINGS = _Settings()

    SETTINGS[setting] = value


def new_settings(path: Optional[Path] = None) -> None:
    """Point the module at the INI file in ``path`` (cwd if None)."""
    global SETTINGS
    SETTINGS = _Settings(path)
