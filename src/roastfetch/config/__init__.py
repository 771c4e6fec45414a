from .loader import ConfigError, load_config
from .models import RoastConfig

__all__ = ["ConfigError", "RoastConfig", "load_config"]
