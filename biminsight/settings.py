"""ConfigManager — layered settings and the ``.env`` template.

Resolution order, later wins: defaults -> ``.biminsight/config.json`` ->
``.env`` -> environment variables.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from biminsight.config import (
    DEFAULT_GEMINI_API_URL,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_OLLAMA_HOST,
    DEFAULT_OLLAMA_MODEL,
    DEFAULT_TIMEOUT,
    SETTINGS_DIR,
)
from biminsight.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# All known configuration keys with defaults
_CONFIG_KEYS: dict[str, dict[str, Any]] = {
    "BIMINSIGHT_PROVIDER": {"default": "gemini", "description": "Text backend: gemini or ollama"},
    "GEMINI_API_KEY": {"default": "", "description": "Gemini API key (secret)"},
    "GEMINI_API_URL": {"default": DEFAULT_GEMINI_API_URL, "description": "Gemini models endpoint"},
    "GEMINI_MODEL": {"default": DEFAULT_GEMINI_MODEL, "description": "Gemini model name"},
    "OLLAMA_HOST": {"default": DEFAULT_OLLAMA_HOST, "description": "Ollama LLM server"},
    "OLLAMA_MODEL": {"default": DEFAULT_OLLAMA_MODEL, "description": "Ollama model name"},
    "BIMINSIGHT_TIMEOUT": {"default": str(DEFAULT_TIMEOUT), "description": "Request timeout in seconds"},
    "BIMINSIGHT_PROMPT_FILE": {"default": "", "description": "Custom prompt preamble file"},
    "BIMINSIGHT_SYSTEM_FILE": {"default": "", "description": "Custom system instruction file"},
    "BIMINSIGHT_LOG_LEVEL": {"default": "INFO", "description": "Logging level"},
}

# Config key -> InsightSettings field
_FIELDS = {
    "BIMINSIGHT_PROVIDER": "provider",
    "GEMINI_API_KEY": "gemini_api_key",
    "GEMINI_API_URL": "gemini_api_url",
    "GEMINI_MODEL": "gemini_model",
    "OLLAMA_HOST": "ollama_host",
    "OLLAMA_MODEL": "ollama_model",
    "BIMINSIGHT_TIMEOUT": "timeout",
    "BIMINSIGHT_PROMPT_FILE": "prompt_file",
    "BIMINSIGHT_SYSTEM_FILE": "system_file",
    "BIMINSIGHT_LOG_LEVEL": "log_level",
}


class InsightSettings(BaseModel):
    """Resolved runtime settings."""

    provider: str = "gemini"
    gemini_api_key: str = Field(default="", repr=False)
    gemini_api_url: str = DEFAULT_GEMINI_API_URL
    gemini_model: str = DEFAULT_GEMINI_MODEL
    ollama_host: str = DEFAULT_OLLAMA_HOST
    ollama_model: str = DEFAULT_OLLAMA_MODEL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    prompt_file: str = ""
    system_file: str = ""
    log_level: str = "INFO"


def _read_env_file(path: Path) -> dict[str, str]:
    values: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            k, v = line.split("=", 1)
            values[k.strip()] = v.strip().strip("\"'")
    return values


class ConfigManager:
    """Load and template biminsight configuration."""

    def generate_env_template(self, project_path: str | Path) -> Path:
        """Write ``.env.example`` into *project_path* and return its path.

        Secret keys are listed with an empty value whatever their default.
        """
        blocks = [
            "# biminsight settings; copy to .env and fill in the secrets.\n"
            "# Resolution: defaults < .biminsight/config.json < .env < environment.\n"
        ]
        for key, info in _CONFIG_KEYS.items():
            value = "" if "(secret)" in info["description"] else info["default"]
            blocks.append(f"# {info['description']}\n{key}={value}\n")

        env_path = Path(project_path) / ".env.example"
        env_path.write_text("\n".join(blocks), encoding="utf-8")
        return env_path

    def load_raw(self, project_path: str | Path) -> dict[str, str]:
        """Return the merged flat key/value mapping before validation."""
        root = Path(project_path)
        config: dict[str, str] = {key: str(info["default"]) for key, info in _CONFIG_KEYS.items()}

        config_json = root / SETTINGS_DIR / "config.json"
        if config_json.is_file():
            try:
                data = json.loads(config_json.read_text(encoding="utf-8"))
                for k, v in data.items():
                    config[k] = str(v)
            except (json.JSONDecodeError, OSError, AttributeError):
                logger.warning("Ignoring unreadable %s", config_json, exc_info=True)

        env_file = root / ".env"
        if env_file.is_file():
            try:
                config.update(_read_env_file(env_file))
            except OSError:
                logger.warning("Ignoring unreadable %s", env_file, exc_info=True)

        # Environment variables override all
        for key in _CONFIG_KEYS:
            env_val = os.environ.get(key)
            if env_val is not None:
                config[key] = env_val

        return config

    def load_config(self, project_path: str | Path = ".") -> InsightSettings:
        """Return validated :class:`InsightSettings` for *project_path*.

        Raises
        ------
        ConfigurationError
            If a value cannot be coerced (e.g. a non-numeric timeout).
        """
        raw = self.load_raw(project_path)
        values = {field: raw[key] for key, field in _FIELDS.items() if key in raw}
        values["provider"] = values.get("provider", "gemini").strip().lower()
        try:
            settings = InsightSettings(**values)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc
        logger.debug("Loaded settings: %r", settings)
        return settings
