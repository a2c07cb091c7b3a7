from .settings import DEFAULT_PORT, Settings, load_settings

__all__ = ["DEFAULT_PORT", "Settings", "load_settings"]
