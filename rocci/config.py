"""Server and backend configuration"""

import json
from os import getenv
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

ROCCI_SERVER_CONFIG = "ROCCI_SERVER_CONFIG"
DEFAULT_BACKEND = "dummy"


class CommonConfig(BaseModel):
    """Server-wide properties handed to every backend."""

    model_config = ConfigDict(extra="allow")

    backend: str = DEFAULT_BACKEND
    hostname: str = "localhost"
    port: int = 3000
    protocol: str = "https"
    log_level: Optional[str] = None


class ServerConfig(BaseModel):
    """Complete configuration for a server process"""

    common: CommonConfig = Field(default_factory=CommonConfig)
    backends: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    def backend_options(self, backend_name: Optional[str] = None) -> Dict[str, Any]:
        """Options configured for ``backend_name`` (the configured backend by default)."""
        name = (backend_name or self.common.backend).strip().lower()
        return dict(self.backends.get(name, {}))

    def server_properties(self) -> Dict[str, Any]:
        return self.common.model_dump()

    @classmethod
    def from_path(cls, config_file_path: str) -> "ServerConfig":
        """Load a YAML config file and return the configuration as a ServerConfig instance."""
        from pathlib import Path

        path = Path(config_file_path)
        if path.suffix.lower() not in [".yaml", ".yml"]:
            raise ValueError(f"Config file must have a .yaml or .yml extension, got: {config_file_path}")

        import yaml

        with open(config_file_path, "r") as f:
            return cls.model_validate(yaml.safe_load(f) or {})

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Build the configuration from ROCCI_SERVER_* environment variables."""
        common: Dict[str, Any] = {}
        for field_name in ("backend", "hostname", "port", "protocol", "log_level"):
            value = getenv(f"ROCCI_SERVER_{field_name.upper()}")
            if value is not None:
                common[field_name] = value

        backends: Dict[str, Dict[str, Any]] = {}
        options_json = getenv("ROCCI_SERVER_BACKEND_OPTIONS")
        if options_json:
            try:
                options = json.loads(options_json)
            except json.JSONDecodeError as e:
                raise ValueError(f"ROCCI_SERVER_BACKEND_OPTIONS is not valid JSON: {e}") from e
            if not isinstance(options, dict):
                raise ValueError("ROCCI_SERVER_BACKEND_OPTIONS must be a JSON object")
            backends[common.get("backend", DEFAULT_BACKEND).strip().lower()] = options

        return cls(common=CommonConfig(**common), backends=backends)

    @classmethod
    def load(cls) -> "ServerConfig":
        """Load from the YAML file named by ROCCI_SERVER_CONFIG, falling back to the environment."""
        config_file_path = getenv(ROCCI_SERVER_CONFIG)
        if config_file_path:
            return cls.from_path(config_file_path)
        return cls.from_env()


class BackendConfig(BaseModel):
    """What one backend instance is constructed with. Immutable for its lifetime."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    options: Dict[str, Any] = Field(default_factory=dict)
    server_properties: Dict[str, Any] = Field(default_factory=dict)
