"""Configuration loading for archivestats (.archivestats.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .facets import DEFAULT_WEEKDAY_LANGUAGE, WEEKDAY_LABELS
from .logging import get_logger

CONFIG_FILENAME = ".archivestats.yml"

DEFAULT_DENY_LIST = (
    ".DS_Store",
    ".git",
    ".gitignore",
    ".gitea",
    "README.json",
    "README.md",
)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class LimitsConfig:
    """Top-N sizes for the dimensions with a fixed limit."""

    tag: int = 30
    category: int = 10
    month: int = 12
    day: int = 31
    hour: int = 24
    week: int = 7


@dataclass
class OutputConfig:
    """Where and how the report is persisted."""

    directory: Path = Path("report")
    filename: str = "stats.json"
    summary: bool = False
    summary_filename: str = "stats.md"


@dataclass
class ArchiveStatsConfig:
    """Represents the settings defined in .archivestats.yml."""

    root: Path
    content_extension: str = ".md"
    sidecar_extension: str = ".json"
    deny_list: List[str] = field(default_factory=lambda: list(DEFAULT_DENY_LIST))
    weekday_language: str = DEFAULT_WEEKDAY_LANGUAGE
    base_year: int = 2007
    workers: int = 1
    limits: LimitsConfig = field(default_factory=LimitsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: Path) -> ArchiveStatsConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ArchiveStatsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = ArchiveStatsConfig(root=root)

    content_extension = _as_extension(data.get("content_extension"))
    if content_extension:
        config.content_extension = content_extension
    sidecar_extension = _as_extension(data.get("sidecar_extension"))
    if sidecar_extension:
        config.sidecar_extension = sidecar_extension
    if config.content_extension == config.sidecar_extension:
        raise ConfigError("content_extension and sidecar_extension must differ")

    if "deny_list" in data:
        config.deny_list = _as_str_list(data.get("deny_list"))

    language = _as_str(data.get("weekday_language"))
    if language:
        if language.lower() in WEEKDAY_LABELS:
            config.weekday_language = language.lower()
        else:
            get_logger("config").warning(
                "Unknown weekday_language %r; using %r", language, DEFAULT_WEEKDAY_LANGUAGE
            )

    base_year = _as_int(data.get("base_year"))
    if base_year is not None:
        config.base_year = base_year

    workers = _as_int(data.get("workers"))
    if workers is not None and workers > 0:
        config.workers = workers

    limits_data = _as_dict(data.get("limits"))
    for name in ("tag", "category", "month", "day", "hour", "week"):
        value = _as_int(limits_data.get(name))
        if value is not None:
            setattr(config.limits, name, value)

    output_data = _as_dict(data.get("output"))
    if output_data:
        directory = _as_str(output_data.get("directory"))
        if directory:
            config.output.directory = Path(directory)
        filename = _as_str(output_data.get("filename"))
        if filename:
            config.output.filename = filename
        summary = _as_bool(output_data.get("summary"))
        if summary is not None:
            config.output.summary = summary
        summary_filename = _as_str(output_data.get("summary_filename"))
        if summary_filename:
            config.output.summary_filename = summary_filename

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_extension(value: Any) -> Optional[str]:
    text = _as_str(value)
    if not text:
        return None
    text = text.strip()
    return text if text.startswith(".") else f".{text}"


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


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


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float)) and not isinstance(item, bool)]
    return []
