"""Configuration loading for doctoc (.doctoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError, InvalidConfigurationError, UnsupportedPlatformError
from .platforms import DEFAULT_PLATFORM, Platform
from .toc import DEFAULT_ENTRY_PREFIX

CONFIG_FILENAME = ".doctoc.yml"


@dataclass
class TocOptions:
    """Effective options for a doctoc run."""

    platform: Platform = DEFAULT_PLATFORM
    max_header_level: Optional[int] = None
    title: Optional[str] = None
    notitle: bool = False
    entry_prefix: str = DEFAULT_ENTRY_PREFIX
    stdout: bool = False


def load_config(config_path: Path) -> TocOptions:
    """Load options from ``config_path`` (a file or the directory holding it).

    A missing file yields the defaults.
    """
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return TocOptions()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    options = TocOptions()
    platform = _as_str(data.get("platform"))
    if platform:
        try:
            options.platform = Platform.from_id(platform)
        except UnsupportedPlatformError as exc:
            raise ConfigError(f"{config_file.name}: {exc}") from exc
    if "maxlevel" in data:
        try:
            options.max_header_level = validate_max_level(data.get("maxlevel"))
        except InvalidConfigurationError as exc:
            raise ConfigError(f"{config_file.name}: {exc}") from exc
    options.title = _as_str(data.get("title"))
    options.notitle = bool(_as_bool(data.get("notitle")))
    if options.title and options.notitle:
        raise ConfigError(f"{config_file.name}: title and notitle are mutually exclusive")
    options.entry_prefix = _as_str(data.get("entryprefix")) or DEFAULT_ENTRY_PREFIX
    options.stdout = bool(_as_bool(data.get("stdout")))
    return options


def validate_max_level(value: Any) -> Optional[int]:
    """Parse a maximum header level; ``None`` and ``0`` mean no limit."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise InvalidConfigurationError(
            f"Max. heading level specified is not a positive number: {value}"
        )
    try:
        level = int(value)
    except (TypeError, ValueError):
        raise InvalidConfigurationError(
            f"Max. heading level specified is not a positive number: {value}"
        ) from None
    if level < 0:
        raise InvalidConfigurationError(
            f"Max. heading level specified is not a positive number: {value}"
        )
    return level or None


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "TocOptions", "load_config", "validate_max_level"]
