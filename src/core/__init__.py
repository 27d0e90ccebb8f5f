from src.core.config.loader import load_server_config
from src.core.config.models import ServerConfig, ModelSite
from src.core.exceptions import ConfigError, UnexpectedResponseFormat

__all__ = [
    "load_server_config",
    "ServerConfig",
    "ModelSite",
    "ConfigError",
    "UnexpectedResponseFormat",
]
