"""Registry bootstrap (import side-effect)."""
from .attributes import standard as _standard  # noqa: F401
from .api import set_registry
from .bootstrap import build_registry
from .core.config import get_settings
from .core.logging import install_default_filter

_settings = get_settings()
install_default_filter(_settings.log_level)
set_registry(build_registry(_settings.calendar_dir))
