import os
from pathlib import Path

from dotenv import load_dotenv

# Environment variables the server reads
SERVER_ENV_KEYS = (
    "HOST",
    "PORT",
    "HF_API_TOKEN",
    "HF_REQUEST_TIMEOUT",
    "WRITING_MODEL_URL",
    "TUTOR_MODEL_URL",
)


def load_env_file(env_file_path: str | None, project_root: Path | None = None) -> Path | None:
    """Load a .env file without overriding variables already set. Returns the path when one was loaded."""
    if not env_file_path:
        return None
    path = Path(env_file_path)
    if not path.is_absolute():
        path = (project_root or Path.cwd()) / path
    if not path.exists():
        return None
    load_dotenv(path, override=False)
    return path


def get_env_vars(env_file_path: str | None = None, project_root: Path | None = None) -> dict[str, str]:
    load_env_file(env_file_path, project_root)
    return {key: os.environ[key] for key in SERVER_ENV_KEYS if key in os.environ}
