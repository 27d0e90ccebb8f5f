from pathlib import Path

from src.core.config.env import get_env_vars
from src.core.config.models import ServerConfig, default_tutor_site, default_writing_site
from src.core.exceptions import ConfigError


def load_server_config(
    env: dict[str, str] | None = None,
    env_file_path: str | None = ".env",
    project_root: Path | None = None,
) -> ServerConfig:
    """Build the ServerConfig once at startup. Pass `env` to skip reading the process environment."""
    if env is None:
        env = get_env_vars(env_file_path, project_root)
    writing = default_writing_site()
    tutor = default_tutor_site()
    if env.get("WRITING_MODEL_URL"):
        writing = writing.model_copy(update={"url": env["WRITING_MODEL_URL"]})
    if env.get("TUTOR_MODEL_URL"):
        tutor = tutor.model_copy(update={"url": env["TUTOR_MODEL_URL"]})
    data: dict = {
        "host": env.get("HOST") or "0.0.0.0",
        "port": env.get("PORT") or 3000,
        # An empty token counts as absent
        "hf_api_token": env.get("HF_API_TOKEN") or None,
        "writing": writing,
        "tutor": tutor,
    }
    if env.get("HF_REQUEST_TIMEOUT"):
        data["request_timeout"] = env["HF_REQUEST_TIMEOUT"]
    try:
        return ServerConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid server config: {e}") from e
