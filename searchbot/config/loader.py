"""Configuration loading utilities."""

import json
import re
from pathlib import Path
from typing import Any

from loguru import logger

from searchbot.config.schema import Config


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".searchbot" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file or create default.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            data = _migrate_config(data)
            return Config.model_validate(convert_keys(data))
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning("Failed to load config from {}: {}", path, e)
            logger.warning("Using default configuration.")

    return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """Convert snake_case keys to camelCase."""
    if isinstance(data, dict):
        return {snake_to_camel(k): convert_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def snake_to_camel(name: str) -> str:
    """Convert snake_case to camelCase."""
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def _migrate_config(data: dict) -> dict:
    """Migrate old config formats to current."""
    tools = data.setdefault("tools", {})
    web_cfg = tools.setdefault("web", {})

    # Move legacy tools.browser.* -> tools.web.browser.*
    legacy_browser_cfg = tools.pop("browser", None)
    if legacy_browser_cfg and "browser" not in web_cfg:
        web_cfg["browser"] = legacy_browser_cfg

    # Move legacy tools.webSearch.* -> tools.web.search.*
    legacy_search_cfg = tools.pop("webSearch", None)
    if legacy_search_cfg and "search" not in web_cfg:
        web_cfg["search"] = legacy_search_cfg

    # Rename tools.web.search.chunkDir -> tools.web.search.outputDir
    search_cfg = web_cfg.get("search") or {}
    legacy_chunk_dir = search_cfg.pop("chunkDir", None)
    if legacy_chunk_dir and not search_cfg.get("outputDir"):
        search_cfg["outputDir"] = legacy_chunk_dir

    return data
