import os
import tomllib
from pathlib import Path
from typing import Any

from bandsintown.errors import ConfigError
from bandsintown.transport import DEFAULT_TIMEOUT

DEFAULT_BASE_URL = "http://api.bandsintown.com"

_DEFAULT_CONFIG_PATH = Path("config.toml")
_DEFAULT_ENV_PATH = Path("secrets")


def load(path: Path = _DEFAULT_CONFIG_PATH, env_path: Path = _DEFAULT_ENV_PATH) -> dict[str, Any]:
    """Load config from TOML (if present), then overlay values from the secrets file."""
    cfg: dict[str, Any] = {}
    if path.exists():
        with open(path, "rb") as f:
            try:
                cfg = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid config file {path}: {exc}") from exc
    _load_env(env_path, cfg)
    return cfg


def _load_env(env_path: Path, cfg: dict) -> None:
    """
    Parse the KEY=VALUE secrets file (default ./secrets) and inject values into the config dict.

    Supported variable names:
      BANDSINTOWN_APP_ID  -> cfg["api"]["app_id"]

    Shell environment variables take precedence over values in the file.
    """
    # Pick up anything already set in the shell first
    _apply_env_vars(cfg, os.environ)

    if not env_path.exists():
        return

    file_values: dict[str, str] = {}
    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, _, value = line.partition("=")
            file_values[key.strip()] = value.strip().strip('"').strip("'")

    # Shell environment takes precedence over the secrets file
    _apply_env_vars(cfg, {**file_values, **os.environ})


def _apply_env_vars(cfg: dict, env: Any) -> None:
    api = cfg.setdefault("api", {})
    if v := env.get("BANDSINTOWN_APP_ID"):
        api["app_id"] = v


def get_api(cfg: dict) -> dict[str, Any]:
    """Return the [api] section with defaults filled in. An app id is required."""
    api = dict(cfg.get("api", {}))

    app_id = api.get("app_id")
    if not app_id:
        raise ConfigError(
            "No app id configured. Set BANDSINTOWN_APP_ID or [api].app_id in config.toml."
        )
    if not isinstance(app_id, str):
        raise ConfigError("[api].app_id must be a string")

    base_url = api.get("base_url", DEFAULT_BASE_URL)
    if not isinstance(base_url, str) or not base_url:
        raise ConfigError("[api].base_url must be a non-empty string")

    timeout = api.get("timeout", DEFAULT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError("[api].timeout must be a positive number of seconds")

    return {"app_id": app_id, "base_url": base_url, "timeout": timeout}
