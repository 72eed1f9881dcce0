# cmdcomplete.config - Configuration module
from cmdcomplete.config.config import Config, load_config

__all__ = [
    "Config",
    "load_config",
]
