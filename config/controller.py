"""Configuration controller for YAML-based settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


PACKAGED_DEFAULT = Path(__file__).with_name("default.yaml")

DEFAULT_DISKS = "/ /tmp"
DEFAULT_THRESHOLDS = "10 10"
DEFAULT_TARGET = "#target_slack_channel"
DEFAULT_SLACK_API_URL = "https://slack.com/api/chat.postMessage"
DEFAULT_TOKEN_ENV = "SLACK_SECRET_KEY"


@dataclass(frozen=True)
class ConfigPaths:
    """Filesystem paths for configuration files."""

    config_dir: Path
    config_file: Path
    override_file: Path


class ConfigController:
    """Singleton controller for loading and updating configuration."""

    _instance: "ConfigController | None" = None

    def __init__(self, config_file: str = "default.yaml") -> None:
        if ConfigController._instance is not None:
            raise RuntimeError("You cannot create another ConfigController class")

        config_dir = Path("config")
        self.paths = ConfigPaths(
            config_dir=config_dir,
            config_file=config_dir / config_file,
            override_file=config_dir / "override.yaml",
        )
        self.config: dict[str, Any] = {}
        self.load_config()

    @classmethod
    def get_instance(cls) -> "ConfigController":
        """Return the singleton instance of the controller."""

        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load_config(self) -> None:
        """Load configuration from default and override YAML files.

        When no ``config/`` directory exists in the working directory the
        defaults shipped with the package are used.
        """

        config_file = self.paths.config_file
        if not config_file.exists():
            config_file = PACKAGED_DEFAULT

        config: dict[str, Any] = {}
        if config_file.exists():
            with config_file.open("r", encoding="utf-8") as file:
                config = yaml.safe_load(file) or {}

        if self.paths.override_file.exists():
            with self.paths.override_file.open("r", encoding="utf-8") as file:
                override_config = yaml.safe_load(file) or {}
            if override_config:
                config = self._deep_merge(config, override_config)

        self.config = self._normalize_config(config)

    def save_config(self, config: dict[str, Any]) -> None:
        """Persist configuration to override.yaml, archiving previous overrides."""

        self.paths.config_dir.mkdir(parents=True, exist_ok=True)
        if self.paths.override_file.exists():
            archive_index = 1
            archive_file = self._archive_path(archive_index)
            while archive_file.exists():
                archive_index += 1
                archive_file = self._archive_path(archive_index)
            self.paths.override_file.rename(archive_file)

        with self.paths.override_file.open("w", encoding="utf-8") as file:
            yaml.safe_dump(config, file)

    def get_config(self) -> dict[str, Any]:
        """Return the currently loaded configuration."""

        return dict(self.config)

    def set_config(self, config: dict[str, Any]) -> None:
        """Set and persist configuration values."""

        self.config = dict(config)
        self.save_config(self.config)

    def _archive_path(self, index: int) -> Path:
        """Return the archive path for a given override index."""

        filename = f"override_{index:04d}.yaml"
        return self.paths.config_dir / filename

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge dictionaries, overriding base values with override values."""

        merged = dict(base)
        for key, value in override.items():
            if (
                key in merged
                and isinstance(merged[key], dict)
                and isinstance(value, dict)
            ):
                merged[key] = self._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _normalize_config(self, config: dict[str, Any]) -> dict[str, Any]:
        """Fill in defaults for the disk check and Slack sections."""

        normalized = dict(config)
        normalized["logging_level"] = str(normalized.get("logging_level", "INFO"))
        normalized["file_logging_enabled"] = bool(normalized.get("file_logging_enabled", False))
        normalized["log_dir"] = str(normalized.get("log_dir", "./log/"))

        disk_cfg = dict(normalized.get("diskspace") or {})
        disk_cfg["disks"] = self._as_field(disk_cfg.get("disks", DEFAULT_DISKS))
        disk_cfg["thresholds"] = self._as_field(disk_cfg.get("thresholds", DEFAULT_THRESHOLDS))
        disk_cfg["target"] = str(disk_cfg.get("target") or DEFAULT_TARGET)
        max_workers = disk_cfg.get("max_workers")
        disk_cfg["max_workers"] = int(max_workers) if max_workers else None
        normalized["diskspace"] = disk_cfg

        slack_cfg = dict(normalized.get("slack") or {})
        slack_cfg["api_url"] = str(slack_cfg.get("api_url") or DEFAULT_SLACK_API_URL)
        slack_cfg["timeout_s"] = float(slack_cfg.get("timeout_s", 30.0))
        slack_cfg["token_env"] = str(slack_cfg.get("token_env") or DEFAULT_TOKEN_ENV)
        normalized["slack"] = slack_cfg
        return normalized

    @staticmethod
    def _as_field(value: Any) -> str:
        """Collapse a YAML list or scalar into a space-separated string."""

        if isinstance(value, (list, tuple)):
            return " ".join(str(item) for item in value)
        return str(value)
