from src.core.config.loader import load_server_config
from src.core.config.models import ServerConfig, ModelSite
from src.core.config.env import get_env_vars

__all__ = ["load_server_config", "ServerConfig", "ModelSite", "get_env_vars"]
