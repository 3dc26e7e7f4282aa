"""Configuration loading utilities for picotags."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

_ENV_PREFIX = "PICOTAGS_"
_DEFAULT_CONFIG = Path("~/.picotags/config.toml").expanduser()


_DEFAULT_SETTINGS: dict[str, Any] = {
    "content_dir": "./content",
    "content_encoding": "utf-8",
    "content_pattern": "*.md",
    "tags_header": "Tags",
    "filter_header": "Filter",
    "filtered_pages_variable": "filtered_pages",
    "page_tags_variable": "page_tags",
    "verbose_logging": False,
}


def _default_config_path() -> Path:
    return _DEFAULT_CONFIG


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _build_default_config_template(settings: Mapping[str, Any]) -> str:
    return "\n".join(
        [
            "# picotags configuration",
            "",
            "# Content",
            f"content_dir = {_render_value(settings['content_dir'])}",
            f"content_encoding = {_render_value(settings['content_encoding'])}",
            f"content_pattern = {_render_value(settings['content_pattern'])}",
            "",
            "# Meta headers",
            f"tags_header = {_render_value(settings['tags_header'])}",
            f"filter_header = {_render_value(settings['filter_header'])}",
            "",
            "# Template variables",
            f"filtered_pages_variable = {_render_value(settings['filtered_pages_variable'])}",
            f"page_tags_variable = {_render_value(settings['page_tags_variable'])}",
            "",
            "# Logging",
            f"verbose_logging = {_render_value(settings['verbose_logging'])}",
            "",
        ]
    )


def _coerce_env_value(key: str, value: str) -> Any:
    default = _DEFAULT_SETTINGS.get(key)
    if isinstance(default, bool):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    if isinstance(default, int):
        try:
            return int(value)
        except ValueError:
            return default
    return value


def _resolve_config_path(cli_options: Mapping[str, Any] | None) -> Path:
    cli_options = dict(cli_options or {})
    raw_config_path = cli_options.get("config_path")
    return Path(raw_config_path).expanduser() if raw_config_path else _default_config_path()


def _load_file_config(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}


def _load_env_config() -> dict[str, Any]:
    config: dict[str, Any] = {}
    for env_key, raw_value in os.environ.items():
        if env_key.startswith(_ENV_PREFIX):
            normalized = env_key[len(_ENV_PREFIX) :].lower()
            config[normalized] = _coerce_env_value(normalized, raw_value)
    return config


def get_config(cli_options: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Merge defaults, config file, environment and CLI options (last wins)."""

    cli_options = dict(cli_options or {})
    config_path = _resolve_config_path(cli_options)

    file_config = _load_file_config(config_path)
    env_config = _load_env_config()
    cli_config = {
        key: value
        for key, value in cli_options.items()
        if value is not None and key != "config_path"
    }

    merged: dict[str, Any] = dict(_DEFAULT_SETTINGS)
    merged.update(file_config)
    merged.update(env_config)
    merged.update(cli_config)

    merged["config_path"] = str(config_path)
    return merged


@dataclass(slots=True)
class InitResult:
    config_path: Path
    config_created: bool
    config_updated_keys: list[str]


def initialize_config(cli_options: Mapping[str, Any] | None = None) -> InitResult:
    config_path = _resolve_config_path(cli_options)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    cli_options = dict(cli_options or {})
    init_settings = dict(_DEFAULT_SETTINGS)
    for key, value in cli_options.items():
        if key in init_settings and value is not None:
            init_settings[key] = value

    config_created = False
    config_updated_keys: list[str] = []
    if not config_path.exists():
        config_path.write_text(
            _build_default_config_template(init_settings), encoding="utf-8"
        )
        config_created = True
    else:
        existing_content = config_path.read_text(encoding="utf-8")
        missing_keys = [
            key for key in _DEFAULT_SETTINGS if f"{key} =" not in existing_content
        ]
        if missing_keys:
            config_updated_keys = list(missing_keys)
            with config_path.open("a", encoding="utf-8") as handle:
                handle.write("\n# Added by picotags init to ensure required defaults.\n")
                for key in missing_keys:
                    handle.write(f"{key} = {_render_value(init_settings[key])}\n")

    return InitResult(
        config_path=config_path.resolve(),
        config_created=config_created,
        config_updated_keys=config_updated_keys,
    )
