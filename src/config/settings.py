"""Configuration manager: load/save YAML config with defaults."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from utils.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CONFIG_PATH,
    DEFAULT_FONT_FAMILY,
    DEFAULT_PAIRED_PATH,
    DEFAULT_PAIRED_SMALL_PATH,
    DEFAULT_TAGGED_PATH,
    DEFAULT_WRAP_WIDTH,
    PDF_TITLE_PREFIX,
    USER_DATA_DIR,
    WORDS_PER_PDF,
)
from utils.exceptions import ConfigurationError
from utils.logging_config import get_logger

logger = get_logger("config.settings")


@dataclass
class SourceConfig:
    format: str = ""  # "" (by suffix) | tagged | paired
    paired_path: str = DEFAULT_PAIRED_PATH
    paired_small_path: str = DEFAULT_PAIRED_SMALL_PATH
    tagged_path: str = DEFAULT_TAGGED_PATH
    skip_entries: int = 0
    on_malformed: str = "abort"  # abort | skip


@dataclass
class BatchConfig:
    size: int = DEFAULT_BATCH_SIZE
    number: int = 0
    repeat: int = 1


@dataclass
class SessionConfig:
    quiz: bool = False
    wrap_width: int = DEFAULT_WRAP_WIDTH


@dataclass
class ExportConfig:
    fonts_dir: str = ""  # falls back to $BGVOCAB_FONTS
    font_family: str = DEFAULT_FONT_FAMILY
    words_per_file: int = WORDS_PER_PDF
    output_dir: str = "."
    title_prefix: str = PDF_TITLE_PREFIX


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppSettings:
    """Top-level application settings."""

    source: SourceConfig = field(default_factory=SourceConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class SettingsManager:
    """Singleton configuration manager.

    Loads the bundled defaults, then overlays ``~/.bgvocab/config.yaml``
    (or the path passed on first construction).
    """

    _instance: SettingsManager | None = None

    def __new__(cls, *args: Any, **kwargs: Any) -> SettingsManager:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, user_config_path: Path | None = None) -> None:
        if hasattr(self, "_initialized") and self._initialized:
            return
        self._settings = AppSettings()
        self._user_config_path = user_config_path or USER_DATA_DIR / "config.yaml"
        self._initialized = True

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def user_config_path(self) -> Path:
        return self._user_config_path

    def load(self) -> AppSettings:
        """Load settings from default config, then overlay user config.

        Returns:
            Merged :class:`AppSettings`.
        """
        self._settings = AppSettings()

        if DEFAULT_CONFIG_PATH.exists():
            self._merge_from_yaml(DEFAULT_CONFIG_PATH)

        if self._user_config_path.exists():
            self._merge_from_yaml(self._user_config_path)

        logger.info(
            "Settings loaded (format=%s, batch size=%d, on_malformed=%s)",
            self._settings.source.format or "auto",
            self._settings.batch.size,
            self._settings.source.on_malformed,
        )
        return self._settings

    def save(self) -> None:
        """Persist current settings to user config file."""
        try:
            self._user_config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._user_config_path, "w", encoding="utf-8") as fh:
                yaml.dump(self._to_dict(), fh, default_flow_style=False, sort_keys=False, allow_unicode=True)
            logger.info("Settings saved to %s", self._user_config_path)
        except OSError as exc:
            raise ConfigurationError(f"Failed to save settings: {exc}") from exc

    def _merge_from_yaml(self, path: Path) -> None:
        """Merge settings from a YAML file into current settings."""
        try:
            with open(path, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as exc:
            logger.warning("Could not load config from %s: %s", path, exc)
            return

        if not isinstance(data, dict):
            return

        for section_name in ("source", "batch", "session", "export", "logging"):
            section = data.get(section_name)
            if isinstance(section, dict):
                self._merge_section(getattr(self._settings, section_name), section, path)

    @staticmethod
    def _merge_section(target: Any, values: dict[str, Any], path: Path) -> None:
        known = {f.name: f for f in fields(target)}
        for key, value in values.items():
            if key not in known:
                logger.warning("Unknown setting '%s' in %s", key, path)
                continue
            current = getattr(target, key)
            # bool is an int subclass; check it first
            if isinstance(current, bool):
                value = bool(value)
            elif isinstance(current, int):
                try:
                    value = int(value)
                except (TypeError, ValueError):
                    logger.warning("Ignoring non-integer '%s: %r' in %s", key, value, path)
                    continue
            elif isinstance(current, str):
                value = "" if value is None else str(value)
            setattr(target, key, value)

    def _to_dict(self) -> dict[str, Any]:
        return asdict(self._settings)
