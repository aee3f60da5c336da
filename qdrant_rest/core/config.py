import os
import json
import logging
from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from dotenv import load_dotenv

logger = logging.getLogger("qdrant_rest.config")

# Environment variable -> config field
ENV_MAPPINGS = {
    "QDRANT_HOST": "host",
    "QDRANT_PORT": "port",
    "QDRANT_API_KEY": "api_key",
    "QDRANT_TIMEOUT": "timeout",
    "QDRANT_SCHEME": "scheme",
    "QDRANT_TRANSPORT": "transport",
    "LOG_LEVEL": "log_level",
}


class ConnectionConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = Field(default="localhost")
    port: int = Field(default=6333)
    api_key: Optional[str] = Field(default=None)
    timeout: int = Field(default=30)
    scheme: Literal["http", "https"] = Field(default="http")
    transport: str = Field(default="requests")
    log_level: str = Field(default="INFO")

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"

    @classmethod
    def from_env(cls, config_path: Optional[str] = None) -> "ConnectionConfig":
        """
        Load connection settings from environment variables and optionally from a config file (JSON or YAML).
        Environment variables take precedence over file config; anything unset keeps its default.
        """
        load_dotenv()

        config_data: Dict[str, Any] = {}
        if config_path and os.path.exists(config_path):
            config_data = _read_config_file(config_path)
            logger.info(f"Loaded connection config from {config_path}")
        elif config_path:
            logger.warning(f"Config file not found: {config_path}, using environment only")

        for env_var, field_name in ENV_MAPPINGS.items():
            env_value = os.getenv(env_var)
            if env_value:
                config_data[field_name] = env_value

        try:
            return cls.model_validate(config_data)
        except ValidationError as e:
            invalid = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ValueError(
                "Invalid connection config values:\n- " + "\n- ".join(invalid) +
                "\n\nCheck QDRANT_* variables in your .env file or the config file."
            ) from e


def _read_config_file(config_path: str) -> Dict[str, Any]:
    with open(config_path, "r") as f:
        if config_path.endswith((".yaml", ".yml")):
            import yaml
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    # Accept either a flat mapping or one nested under a "qdrant" section
    if isinstance(data.get("qdrant"), dict):
        data = data["qdrant"]
    return data
