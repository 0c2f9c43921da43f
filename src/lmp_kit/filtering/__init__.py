from .config import FilterConfig, normalize_extension, relative_posix_path
from .settings import LmpSettings, load_settings
from .walker import list_files

__all__ = [
    "FilterConfig",
    "LmpSettings",
    "list_files",
    "load_settings",
    "normalize_extension",
    "relative_posix_path",
]
