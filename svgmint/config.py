"""Run configuration from environment variables, an optional JSON file and CLI flags."""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Any

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "svgmint.json"

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


class Settings(BaseSettings):
    input: str = "./svg"
    output: str = "./svg-out"
    blueprint: str = "typescript"
    module: str = "svgmint"
    log_level: str = "info"

    # Engine policy
    percent_fallback: bool = True
    scope_by_module: bool = False
    strict_xml: bool = False

    # Write <output>/<module>.svgmint.json next to the generated sources
    manifest: bool = False

    model_config = {
        "env_prefix": "SVGMINT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


def load_config_file(path: str) -> dict[str, Any]:
    """Read a JSON config file. Keys may be snake_case, camelCase or kebab-case."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return {_snake(key): value for key, value in data.items()}


def discover_config_file(cwd: str | None = None) -> str | None:
    candidate = os.path.join(cwd or os.getcwd(), DEFAULT_CONFIG_FILE)
    return candidate if os.path.isfile(candidate) else None


def build_settings(overrides: dict[str, Any] | None = None, config_file: str | None = None) -> Settings:
    """CLI overrides beat the config file, which beats environment and defaults."""
    values: dict[str, Any] = {}
    if config_file:
        values.update(load_config_file(config_file))
        logger.debug("Loaded config file %s", config_file)
    values.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings(**values)


def _snake(key: str) -> str:
    return _CAMEL_RE.sub("_", key).replace("-", "_").lower()
