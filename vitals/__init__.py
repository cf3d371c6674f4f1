def _get_version() -> str:
    try:
        from importlib.metadata import version
        return version("VITALS")
    except Exception:
        return "0.0.0"

__version__ = _get_version()
