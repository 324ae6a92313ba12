from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from jsonschema import ValidationError, validate


CONFIG_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "scheme_ports": {
            "type": "object",
            "additionalProperties": {
                "anyOf": [
                    {"type": "integer", "minimum": 0},
                    {"type": "null"},
                ]
            },
        },
        "jobs": {"type": "integer", "minimum": 1},
    },
}


class ConfigError(ValueError):
    """Raised when a configuration file cannot be loaded or is invalid."""


@dataclass
class Config:
    scheme_ports: dict[str, int | None] = field(default_factory=dict)
    jobs: int | None = None

    @staticmethod
    def from_file(path: str) -> "Config":
        """Load configuration from a YAML or JSON file.

        Raises:
            ConfigError: If the extension is unsupported, the file cannot be
                read or parsed, or the content fails schema validation.
        """
        ext = Path(path).suffix.lower()
        try:
            with open(path, "r", encoding="utf-8") as handle:
                if ext in {".yaml", ".yml"}:
                    data = yaml.safe_load(handle)
                elif ext == ".json":
                    data = json.load(handle)
                else:
                    raise ConfigError(f"Unsupported config file extension: {ext}")
        except OSError as exc:
            raise ConfigError(f"Unable to read config {path}: {exc}") from exc
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ConfigError(f"Unable to parse config {path}: {exc}") from exc
        return Config.from_dict(data or {})

    @staticmethod
    def from_dict(data: dict) -> "Config":
        try:
            validate(instance=data, schema=CONFIG_SCHEMA)
        except ValidationError as exc:
            location = ".".join(str(part) for part in exc.absolute_path) or "<root>"
            raise ConfigError(f"Invalid config at {location}: {exc.message}") from exc
        scheme_ports = {
            str(scheme).lower(): (None if port is None else int(port))
            for scheme, port in data.get("scheme_ports", {}).items()
        }
        return Config(scheme_ports=scheme_ports, jobs=data.get("jobs"))
